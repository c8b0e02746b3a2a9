import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List, Optional

from models import Folder, FolderListItem, Note

logger = logging.getLogger(__name__)


class NoteRepository:
    """In-memory store for folders and the notes they hold.

    Notes are kept per folder id, in creation order. Nothing is written to
    disk: the store lives as long as the process does.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now,
                 default_folder: Optional[str] = None):
        self._clock = clock
        self._folders: List[Folder] = []
        self._notes: Dict[str, List[Note]] = {}
        if default_folder:
            self.create_default_folder(default_folder)

    def now(self) -> datetime:
        return self._clock()

    # ─── Folders ───

    def create_folder(self, name: str) -> Optional[Folder]:
        if not name.strip():
            return None
        return self._add_folder(Folder(id=str(uuid.uuid4()), name=name))

    def create_default_folder(self, name: str) -> Folder:
        for folder in self._folders:
            if folder.is_default:
                return folder
        return self._add_folder(
            Folder(id=str(uuid.uuid4()), name=name, is_default=True)
        )

    def _add_folder(self, folder: Folder) -> Folder:
        self._folders.append(folder)
        self._notes[folder.id] = []
        logger.debug("Created folder %s (%r)", folder.id, folder.name)
        return folder

    def delete_folder(self, folder_id: str) -> bool:
        folder = self.get_folder(folder_id)
        if folder is None or folder.is_default:
            return False
        self._folders = [f for f in self._folders if f.id != folder_id]
        dropped = self._notes.pop(folder_id, [])
        logger.debug("Deleted folder %s with %d notes", folder_id, len(dropped))
        return True

    def get_folder(self, folder_id: str) -> Optional[Folder]:
        for folder in self._folders:
            if folder.id == folder_id:
                return folder
        return None

    def list_folders(self) -> List[FolderListItem]:
        return [
            FolderListItem(folder=f, count=len(self.list_notes(f.id)))
            for f in self._folders
        ]

    # ─── Notes ───

    def list_notes(self, folder_id: str) -> List[Note]:
        return [n for n in self._notes.get(folder_id, []) if not n.is_blank]

    def get_note(self, folder_id: str, note_id: str) -> Optional[Note]:
        for note in self._notes.get(folder_id, []):
            if note.id == note_id:
                return note
        return None

    def create_note(self, folder_id: str) -> Optional[Note]:
        """Append an empty placeholder note, hidden until it gets content."""
        notes = self._notes.get(folder_id)
        if notes is None:
            logger.warning("Cannot create a note in unknown folder %s", folder_id)
            return None
        note = Note(id=str(uuid.uuid4()), title="", content="", date=self._clock())
        notes.append(note)
        logger.debug("Created placeholder note %s in folder %s", note.id, folder_id)
        return note

    def save_note(self, folder_id: str, note: Note) -> Optional[Note]:
        notes = self._notes.get(folder_id)
        if notes is None:
            logger.warning("Cannot save note %s to unknown folder %s", note.id, folder_id)
            return None
        note = replace(note, date=self._clock())
        for i, n in enumerate(notes):
            if n.id == note.id:
                notes[i] = note
                logger.debug("Updated note %s in folder %s", note.id, folder_id)
                break
        else:
            notes.append(note)
            logger.debug("Added note %s to folder %s", note.id, folder_id)
        return note

    def set_checked(self, folder_id: str, note_id: str, checked: bool) -> Optional[Note]:
        notes = self._notes.get(folder_id, [])
        for i, n in enumerate(notes):
            if n.id == note_id:
                notes[i] = replace(n, is_checked=checked)
                return notes[i]
        return None

    def delete_note(self, folder_id: str, note_id: str) -> bool:
        notes = self._notes.get(folder_id)
        if notes is None:
            return False
        kept = [n for n in notes if n.id != note_id]
        if len(kept) == len(notes):
            return False
        self._notes[folder_id] = kept
        logger.debug("Deleted note %s from folder %s", note_id, folder_id)
        return True

    def purge_blank_notes(self, folder_id: Optional[str] = None) -> int:
        """Drop blank placeholders from one folder, or from every folder."""
        folder_ids = [folder_id] if folder_id is not None else list(self._notes)
        removed = 0
        for fid in folder_ids:
            notes = self._notes.get(fid)
            if notes is None:
                continue
            kept = [n for n in notes if not n.is_blank]
            removed += len(notes) - len(kept)
            self._notes[fid] = kept
        if removed:
            logger.debug("Purged %d blank notes", removed)
        return removed
