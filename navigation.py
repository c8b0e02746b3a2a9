"""
String-keyed routes and the navigation stack shared by the screens.

Routes:

    folders
    notes/{folder_id}
    note_editor/{folder_id}/{note_id}

The editor's note id is either a stored note id or ``new``. Inside the
program that choice is an ``EditorTarget``; the ``new`` sentinel only
exists in route strings.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

FOLDERS = "folders"
NOTES = "notes"
NOTE_EDITOR = "note_editor"

NEW_NOTE = "new"

_ROUTE_ARITY = {FOLDERS: 0, NOTES: 1, NOTE_EDITOR: 2}


class RouteError(ValueError):
    """Raised for a route string that names no screen."""


@dataclass(frozen=True)
class CreateNote:
    pass


@dataclass(frozen=True)
class EditNote:
    note_id: str


EditorTarget = Union[CreateNote, EditNote]


@dataclass(frozen=True)
class RouteMatch:
    name: str
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def folder_id(self) -> str:
        return self.params["folder_id"]

    @property
    def editor_target(self) -> EditorTarget:
        note_id = self.params["note_id"]
        return CreateNote() if note_id == NEW_NOTE else EditNote(note_id)


def folders_route() -> str:
    return FOLDERS


def notes_route(folder_id: str) -> str:
    return f"{NOTES}/{folder_id}"


def note_editor_route(folder_id: str, target: EditorTarget) -> str:
    note_id = target.note_id if isinstance(target, EditNote) else NEW_NOTE
    return f"{NOTE_EDITOR}/{folder_id}/{note_id}"


def parse_route(route: str) -> RouteMatch:
    name, *args = route.split("/")
    if name not in _ROUTE_ARITY or len(args) != _ROUTE_ARITY[name] or not all(args):
        raise RouteError(f"Unknown route: {route!r}")
    if name == NOTES:
        return RouteMatch(name, {"folder_id": args[0]})
    if name == NOTE_EDITOR:
        return RouteMatch(name, {"folder_id": args[0], "note_id": args[1]})
    return RouteMatch(name)


class Navigator:
    """A push/pop stack of routes, starting at the folder list."""

    def __init__(self, start: Optional[str] = None):
        self._stack: List[RouteMatch] = [parse_route(start or folders_route())]
        self._listeners: List[Callable[[RouteMatch], None]] = []

    @property
    def current(self) -> RouteMatch:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def subscribe(self, listener: Callable[[RouteMatch], None]) -> None:
        self._listeners.append(listener)

    def push(self, route: str) -> RouteMatch:
        match = parse_route(route)
        self._stack.append(match)
        logger.debug("Navigate to %s", route)
        self._notify()
        return match

    def pop(self) -> bool:
        """Return to the previous screen; ``False`` when already at the root."""
        if len(self._stack) == 1:
            return False
        self._stack.pop()
        self._notify()
        return True

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.current)
