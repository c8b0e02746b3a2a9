"""Application settings, read from ``NOTES_*`` environment variables."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from policies import DateStyle, TitlePolicy

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NOTES_")

    title_policy: TitlePolicy = Field(
        default=TitlePolicy.SINGLE_FIELD,
        description="How editor text maps to note title and content"
    )
    date_style: DateStyle = Field(
        default=DateStyle.CALENDAR,
        description="How note dates are shown (calendar date or weekday)"
    )
    seed_default_folder: bool = Field(
        default=True,
        description="Start with one undeletable folder"
    )
    default_folder_name: str = Field(default="Notes")
    discard_blank_on_back: bool = Field(
        default=True,
        description="Delete a blank placeholder note when leaving the editor"
    )
    window_title: str = Field(default="Notes")
    stylesheet: str = Field(default="style.qss")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard Python logging levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v_upper


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
