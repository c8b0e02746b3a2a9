"""
Rules for turning editor text into a note and back, and for rendering dates.

Two title policies are supported:

* ``single_field`` keeps the whole text as the note content and derives the
  title from its first line.
* ``title_body`` splits the text at the first line break: the first line is
  stored as the title and the rest as the content.

The two are not interchangeable. ``title_body`` drops blank lines before the
title and a trailing line break after a lone first line, so pick one per
deployment.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Tuple

from models import Note

_LINE_BREAK = re.compile(r"\r\n|\n|\r")
_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*(?:\r\n|\n|\r))+")
PREVIEW_LENGTH = 40


def first_line(text: str) -> str:
    return _LINE_BREAK.split(text, maxsplit=1)[0]


class TitlePolicy(str, Enum):
    SINGLE_FIELD = "single_field"
    TITLE_BODY = "title_body"

    def split_text(self, text: str) -> Tuple[str, str]:
        """Return the ``(title, content)`` pair to store for *text*."""
        if self is TitlePolicy.SINGLE_FIELD:
            return first_line(text), text
        # the title is the first line that has text
        text = _LEADING_BLANK_LINES.sub("", text)
        parts = _LINE_BREAK.split(text, maxsplit=1)
        return parts[0], parts[1] if len(parts) > 1 else ""

    def compose(self, note: Note) -> str:
        """Rebuild the editor text for a stored note."""
        if self is TitlePolicy.SINGLE_FIELD:
            return note.content
        if not note.content:
            return note.title
        return f"{note.title}\n{note.content}"

    def list_title(self, note: Note) -> str:
        if self is TitlePolicy.SINGLE_FIELD:
            return first_line(note.content)
        return note.title

    def preview(self, note: Note) -> str:
        # single-field lists show the first line only
        if self is TitlePolicy.SINGLE_FIELD:
            return ""
        snippet = _LINE_BREAK.sub(" ", note.content)
        if len(snippet) > PREVIEW_LENGTH:
            return snippet[:PREVIEW_LENGTH] + "…"
        return snippet


class DateStyle(str, Enum):
    CALENDAR = "calendar"
    WEEKDAY = "weekday"

    def render(self, date: datetime) -> str:
        if self is DateStyle.WEEKDAY:
            return date.strftime("%A")
        return f"{date:%b} {date.day}, {date.year}"
