"""
Screen controllers for the folder list, the note list and the note editor.

Controllers hold the per-screen state (dialog flags, the editor buffer),
turn user actions into repository calls and ask the navigator to change
screens. They never touch Qt, so the widgets in ``views`` stay thin.
"""

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from config import Settings
from models import Folder, FolderListItem, Note
from navigation import (
    NOTE_EDITOR, NOTES, EditNote, EditorTarget, Navigator,
    RouteMatch, note_editor_route, notes_route,
)
from policies import DateStyle, TitlePolicy
from repository import NoteRepository

logger = logging.getLogger(__name__)

FolderLike = Union[Folder, FolderListItem]

NEW_NOTE_HEADER = "New Note"
EMPTY_NOTES_HINT = "No notes yet. Tap + to create one."


class FoldersController:
    def __init__(self, repo: NoteRepository, navigator: Navigator):
        self.repo = repo
        self.navigator = navigator
        self.adding = False
        self.new_folder_name = ""
        self.pending_delete: Optional[FolderLike] = None

    def folders(self) -> List[FolderListItem]:
        return self.repo.list_folders()

    def open(self, folder: FolderLike) -> None:
        self.navigator.push(notes_route(folder.id))

    # add-folder dialog

    def begin_add_folder(self) -> None:
        self.adding = True
        self.new_folder_name = ""

    def set_new_folder_name(self, text: str) -> None:
        self.new_folder_name = text

    @property
    def can_add_folder(self) -> bool:
        return bool(self.new_folder_name.strip())

    def confirm_add_folder(self) -> Optional[Folder]:
        """Create the folder; a blank name keeps the dialog open."""
        if not self.can_add_folder:
            return None
        folder = self.repo.create_folder(self.new_folder_name)
        self.cancel_add_folder()
        return folder

    def cancel_add_folder(self) -> None:
        self.adding = False
        self.new_folder_name = ""

    # delete-folder dialog

    def can_delete(self, folder: FolderLike) -> bool:
        return not folder.is_default

    def request_delete(self, folder: FolderLike) -> bool:
        if not self.can_delete(folder):
            return False
        self.pending_delete = folder
        return True

    @property
    def delete_prompt(self) -> str:
        if self.pending_delete is None:
            return ""
        return (f"Are you sure you want to delete '{self.pending_delete.name}' "
                "and all its notes?")

    def confirm_delete(self) -> bool:
        folder, self.pending_delete = self.pending_delete, None
        if folder is None:
            return False
        return self.repo.delete_folder(folder.id)

    def cancel_delete(self) -> None:
        self.pending_delete = None


@dataclass(frozen=True)
class NoteListItem:
    """A note as rendered in the note list."""

    note: Note
    title: str
    preview: str
    date: str
    bold: bool


class NotesController:
    def __init__(self, repo: NoteRepository, navigator: Navigator,
                 folder_id: str, policy: TitlePolicy = TitlePolicy.SINGLE_FIELD,
                 date_style: DateStyle = DateStyle.CALENDAR,
                 purge_blank: bool = False):
        self.repo = repo
        self.navigator = navigator
        self.policy = policy
        self.date_style = date_style
        self.folder = repo.get_folder(folder_id)
        if self.folder is None:
            logger.warning("Unknown folder %s, showing the first folder", folder_id)
            folders = repo.list_folders()
            self.folder = folders[0].folder if folders else None
        # placeholders left behind by the editor are dropped on return
        if purge_blank and self.folder is not None:
            repo.purge_blank_notes(self.folder.id)

    @property
    def title(self) -> str:
        return self.folder.name if self.folder else ""

    def notes(self) -> List[Note]:
        if self.folder is None:
            return []
        return self.repo.list_notes(self.folder.id)

    def items(self) -> List[NoteListItem]:
        return [
            NoteListItem(
                note=n,
                title=self.policy.list_title(n),
                preview=self.policy.preview(n),
                date=self.date_style.render(n.date),
                bold=self.policy is TitlePolicy.TITLE_BODY and not n.is_checked,
            )
            for n in self.notes()
        ]

    def new_note(self) -> Optional[Note]:
        """Create a placeholder note and open the editor on it."""
        if self.folder is None:
            return None
        note = self.repo.create_note(self.folder.id)
        if note is not None:
            self.navigator.push(note_editor_route(self.folder.id, EditNote(note.id)))
        return note

    def open_note(self, note: Note) -> None:
        self.navigator.push(note_editor_route(self.folder.id, EditNote(note.id)))

    def set_checked(self, note: Note, checked: bool) -> Optional[Note]:
        return self.repo.set_checked(self.folder.id, note.id, checked)

    def back(self) -> bool:
        return self.navigator.pop()


class EditorState(str, Enum):
    CREATING = "creating"
    EDITING = "editing"


class NoteEditorController:
    """Editor for one note.

    The editor is CREATING when it was opened without a note, or on a blank
    placeholder, and EDITING when the note already has text in the store.
    Saving or leaving pops back to the note list.
    """

    def __init__(self, repo: NoteRepository, navigator: Navigator,
                 folder_id: str, target: EditorTarget,
                 policy: TitlePolicy = TitlePolicy.SINGLE_FIELD,
                 date_style: DateStyle = DateStyle.CALENDAR,
                 discard_blank_on_back: bool = True):
        self.repo = repo
        self.navigator = navigator
        self.folder_id = folder_id
        self.policy = policy
        self.date_style = date_style
        self.discard_blank_on_back = discard_blank_on_back

        self.note: Optional[Note] = None
        if isinstance(target, EditNote):
            self.note = repo.get_note(folder_id, target.note_id)
            if self.note is None:
                logger.warning("Note %s not found in folder %s, starting a new one",
                               target.note_id, folder_id)

        if self.note is None or self.note.is_blank:
            self.state = EditorState.CREATING
            self.text = ""
        else:
            self.state = EditorState.EDITING
            self.text = policy.compose(self.note)

    def set_text(self, text: str) -> None:
        self.text = text

    @property
    def can_save(self) -> bool:
        return bool(self.text.strip())

    @property
    def can_delete(self) -> bool:
        return self.state is EditorState.EDITING and self.can_save

    @property
    def header(self) -> str:
        if not self.can_save:
            return NEW_NOTE_HEADER
        date = self.note.date if self.note else self.repo.now()
        return self.date_style.render(date)

    def save(self) -> Optional[Note]:
        if not self.can_save:
            return None
        title, content = self.policy.split_text(self.text)
        note = Note(
            id=self.note.id if self.note else str(uuid.uuid4()),
            title=title,
            content=content,
            date=self.repo.now(),
            is_checked=self.note.is_checked if self.note else False,
        )
        saved = self.repo.save_note(self.folder_id, note)
        self.navigator.pop()
        return saved

    def back(self) -> None:
        """Leave without saving, dropping the note if its text is blank."""
        if not self.can_save and self.discard_blank_on_back and self.note is not None:
            self.repo.delete_note(self.folder_id, self.note.id)
        self.navigator.pop()

    def delete(self) -> bool:
        if not self.can_delete:
            return False
        self.repo.delete_note(self.folder_id, self.note.id)
        self.navigator.pop()
        return True


Controller = Union[FoldersController, NotesController, NoteEditorController]


def build_controller(match: RouteMatch, repo: NoteRepository,
                     navigator: Navigator, settings: Settings) -> Controller:
    if match.name == NOTES:
        return NotesController(repo, navigator, match.folder_id,
                               policy=settings.title_policy,
                               date_style=settings.date_style,
                               purge_blank=not settings.discard_blank_on_back)
    if match.name == NOTE_EDITOR:
        return NoteEditorController(repo, navigator, match.folder_id,
                                    match.editor_target,
                                    policy=settings.title_policy,
                                    date_style=settings.date_style,
                                    discard_blank_on_back=settings.discard_blank_on_back)
    return FoldersController(repo, navigator)
