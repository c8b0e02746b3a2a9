# views/main_window.py

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QStackedWidget, QWidget

from config import Settings, get_settings
from controllers import (
    FoldersController, NoteEditorController, NotesController, build_controller
)
from navigation import Navigator, RouteMatch
from repository import NoteRepository
from views.folders_view import FoldersView
from views.note_editor_view import NoteEditorView
from views.notes_view import NotesView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Hosts one screen at a time, rebuilt from the top of the navigator."""

    def __init__(self, repo: Optional[NoteRepository] = None,
                 navigator: Optional[Navigator] = None,
                 settings: Optional[Settings] = None):
        super().__init__()
        self.settings = settings or get_settings()
        self.setWindowTitle(self.settings.window_title)
        if repo is None:
            seed = (self.settings.default_folder_name
                    if self.settings.seed_default_folder else None)
            repo = NoteRepository(default_folder=seed)
        self.repo = repo
        self.navigator = navigator or Navigator()

        self.pages = QStackedWidget()
        self.setCentralWidget(self.pages)
        self.resize(420, 720)

        self.navigator.subscribe(self._show)
        self._show(self.navigator.current)

    @property
    def current_page(self) -> QWidget:
        return self.pages.currentWidget()

    def _show(self, match: RouteMatch):
        logger.debug("Showing %s %s", match.name, match.params)
        controller = build_controller(match, self.repo, self.navigator, self.settings)
        page = self._page_for(controller)
        while self.pages.count():
            old = self.pages.widget(0)
            self.pages.removeWidget(old)
            old.deleteLater()
        self.pages.addWidget(page)
        self.pages.setCurrentWidget(page)

    def _page_for(self, controller) -> QWidget:
        if isinstance(controller, NoteEditorController):
            return NoteEditorView(controller)
        if isinstance(controller, NotesController):
            return NotesView(controller)
        if isinstance(controller, FoldersController):
            return FoldersView(controller)
        raise TypeError(f"No view for {type(controller).__name__}")
