from PyQt6.QtWidgets import (
    QDialog, QDialogButtonBox, QLabel, QLineEdit, QVBoxLayout
)

from controllers import FoldersController


class AddFolderDialog(QDialog):
    """Asks for a folder name. Add stays disabled while the name is blank."""

    def __init__(self, controller: FoldersController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle("New Folder")
        self.setModal(True)

        lyt = QVBoxLayout(self)
        lbl = QLabel("New Folder")
        lbl.setStyleSheet("font-size:17px; font-weight:500;")
        lyt.addWidget(lbl)

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Folder name")
        self.name_edit.textChanged.connect(self._on_text_changed)
        lyt.addWidget(self.name_edit)

        self.buttons = QDialogButtonBox()
        self.add_button = self.buttons.addButton(
            "Add", QDialogButtonBox.ButtonRole.AcceptRole
        )
        self.buttons.addButton("Cancel", QDialogButtonBox.ButtonRole.RejectRole)
        self.buttons.accepted.connect(self._on_accept)
        self.buttons.rejected.connect(self.reject)
        lyt.addWidget(self.buttons)

        self.controller.begin_add_folder()
        self._on_text_changed("")

    def _on_text_changed(self, text: str):
        self.controller.set_new_folder_name(text)
        self.add_button.setEnabled(self.controller.can_add_folder)

    def _on_accept(self):
        if self.controller.confirm_add_folder() is not None:
            self.accept()

    def reject(self):
        self.controller.cancel_add_folder()
        super().reject()
