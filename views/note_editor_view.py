from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QHBoxLayout, QLabel, QPlainTextEdit, QPushButton, QToolButton,
    QVBoxLayout, QWidget
)

from controllers import NoteEditorController


class NoteEditorView(QWidget):
    def __init__(self, controller: NoteEditorController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._build_ui()
        self._update_actions()

    def _build_ui(self):
        lyt = QVBoxLayout(self)
        lyt.setContentsMargins(8, 8, 8, 8)

        bar = QHBoxLayout()
        self.btn_back = QToolButton()
        self.btn_back.setText("‹")
        self.btn_back.setToolTip("Back")
        self.btn_back.setAutoRaise(True)
        self.btn_back.clicked.connect(self.controller.back)
        bar.addWidget(self.btn_back)

        self.lbl_header = QLabel()
        self.lbl_header.setObjectName("editorHeader")
        bar.addWidget(self.lbl_header)
        bar.addStretch()

        self.btn_delete = QPushButton("Delete")
        self.btn_delete.setObjectName("deleteButton")
        self.btn_delete.clicked.connect(self.controller.delete)
        bar.addWidget(self.btn_delete)

        self.btn_done = QPushButton("Done")
        self.btn_done.setObjectName("doneButton")
        self.btn_done.clicked.connect(self.controller.save)
        bar.addWidget(self.btn_done)
        lyt.addLayout(bar)

        self.editor = QPlainTextEdit()
        self.editor.setPlaceholderText("Start typing...")
        self.editor.blockSignals(True)
        self.editor.setPlainText(self.controller.text)
        self.editor.blockSignals(False)
        self.editor.textChanged.connect(self._on_text_changed)
        lyt.addWidget(self.editor, stretch=1)

        QShortcut(QKeySequence(Qt.Key.Key_Escape), self, activated=self.controller.back)

    def _on_text_changed(self):
        self.controller.set_text(self.editor.toPlainText())
        self._update_actions()

    def _update_actions(self):
        self.lbl_header.setText(self.controller.header)
        self.btn_done.setEnabled(self.controller.can_save)
        self.btn_delete.setVisible(self.controller.can_delete)
