from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Folder:
    id: str
    name: str
    is_default: bool = False


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    date: datetime
    is_checked: bool = False

    @property
    def is_blank(self) -> bool:
        return not (self.title.strip() or self.content.strip())


@dataclass(frozen=True)
class FolderListItem:
    """A folder as shown in the folder list, with its live note count."""

    folder: Folder
    count: int

    @property
    def id(self) -> str:
        return self.folder.id

    @property
    def name(self) -> str:
        return self.folder.name

    @property
    def is_default(self) -> bool:
        return self.folder.is_default
