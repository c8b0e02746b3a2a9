from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QHBoxLayout, QLabel, QListWidget, QListWidgetItem, QMessageBox,
    QToolButton, QVBoxLayout, QWidget
)

from controllers import FoldersController
from models import FolderListItem
from views.dialogs import AddFolderDialog


class FoldersView(QWidget):
    def __init__(self, controller: FoldersController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._build_ui()
        self.refresh()

    def _build_ui(self):
        lyt = QVBoxLayout(self)
        lyt.setContentsMargins(8, 8, 8, 8)

        hdr = QHBoxLayout()
        lbl_title = QLabel("Folders")
        lbl_title.setStyleSheet("font-size:17px; font-weight:500;")
        hdr.addWidget(lbl_title)
        hdr.addStretch()
        self.btn_add = QToolButton()
        self.btn_add.setText("+")
        self.btn_add.setToolTip("Add Folder")
        self.btn_add.setAutoRaise(True)
        self.btn_add.clicked.connect(self._add_folder)
        hdr.addWidget(self.btn_add)
        lyt.addLayout(hdr)

        self.folder_list = QListWidget()
        self.folder_list.itemClicked.connect(self._on_select)
        lyt.addWidget(self.folder_list, stretch=1)

    def refresh(self):
        self.folder_list.clear()
        for entry in self.controller.folders():
            item = QListWidgetItem()
            item.setData(Qt.ItemDataRole.UserRole, entry)
            self.folder_list.addItem(item)
            row = self._folder_row(entry)
            item.setSizeHint(row.sizeHint())
            self.folder_list.setItemWidget(item, row)

    def _folder_row(self, entry: FolderListItem) -> QWidget:
        row = QWidget()
        rl = QHBoxLayout(row)
        rl.setContentsMargins(16, 4, 8, 4)
        rl.addWidget(QLabel(entry.name), stretch=1)
        lbl_count = QLabel(str(entry.count))
        lbl_count.setObjectName("folderCount")
        rl.addWidget(lbl_count)
        if self.controller.can_delete(entry):
            btn_del = QToolButton()
            btn_del.setText("✕")
            btn_del.setToolTip("Delete Folder")
            btn_del.setAutoRaise(True)
            btn_del.clicked.connect(lambda _=False, e=entry: self._delete_folder(e))
            rl.addWidget(btn_del)
        return row

    def _on_select(self, item: QListWidgetItem):
        self.controller.open(item.data(Qt.ItemDataRole.UserRole))

    def _add_folder(self):
        dialog = AddFolderDialog(self.controller, self)
        if dialog.exec():
            self.refresh()

    def _delete_folder(self, entry: FolderListItem):
        if not self.controller.request_delete(entry):
            return
        answer = QMessageBox.question(
            self, "Delete Folder", self.controller.delete_prompt,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Cancel,
        )
        if answer == QMessageBox.StandardButton.Yes:
            self.controller.confirm_delete()
            self.refresh()
        else:
            self.controller.cancel_delete()
