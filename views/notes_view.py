from PyQt6.QtCore import QEvent, QRect, Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout, QLabel, QListWidget, QListWidgetItem, QPushButton,
    QStackedLayout, QStyle, QStyleOptionViewItem, QToolButton, QVBoxLayout,
    QWidget
)

from controllers import EMPTY_NOTES_HINT, NotesController
from policies import TitlePolicy


class NotesView(QWidget):
    def __init__(self, controller: NotesController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._press_pos = None
        self._build_ui()
        self.refresh()

    def _build_ui(self):
        lyt = QVBoxLayout(self)
        lyt.setContentsMargins(8, 8, 8, 8)

        hdr = QHBoxLayout()
        self.btn_back = QToolButton()
        self.btn_back.setText("‹")
        self.btn_back.setToolTip("Back")
        self.btn_back.setAutoRaise(True)
        self.btn_back.clicked.connect(self.controller.back)
        hdr.addWidget(self.btn_back)
        self.lbl_title = QLabel(self.controller.title)
        self.lbl_title.setStyleSheet("font-size:17px; font-weight:500;")
        hdr.addWidget(self.lbl_title)
        hdr.addStretch()
        lyt.addLayout(hdr)

        # list and empty hint share one slot
        self.body = QStackedLayout()
        self.note_list = QListWidget()
        self.note_list.itemClicked.connect(self._on_select)
        self.note_list.itemChanged.connect(self._on_check_changed)
        self._viewport = self.note_list.viewport()
        self._viewport.installEventFilter(self)
        self.body.addWidget(self.note_list)
        self.lbl_empty = QLabel(EMPTY_NOTES_HINT)
        self.lbl_empty.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.body.addWidget(self.lbl_empty)
        lyt.addLayout(self.body, stretch=1)

        self.btn_new = QPushButton("+")
        self.btn_new.setObjectName("newNoteButton")
        self.btn_new.setToolTip("New Note")
        self.btn_new.setFixedSize(48, 48)
        self.btn_new.clicked.connect(self.controller.new_note)
        lyt.addWidget(self.btn_new, alignment=Qt.AlignmentFlag.AlignRight)

    def refresh(self):
        checkable = self.controller.policy is TitlePolicy.TITLE_BODY
        self.note_list.blockSignals(True)
        self.note_list.clear()
        for entry in self.controller.items():
            lines = [entry.title]
            if entry.preview:
                lines.append(entry.preview)
            lines.append(entry.date)
            item = QListWidgetItem("\n".join(lines))
            item.setData(Qt.ItemDataRole.UserRole, entry.note)
            font = QFont(item.font())
            font.setBold(entry.bold)
            item.setFont(font)
            if checkable:
                item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
                item.setCheckState(
                    Qt.CheckState.Checked if entry.note.is_checked
                    else Qt.CheckState.Unchecked
                )
            self.note_list.addItem(item)
        self.note_list.blockSignals(False)
        self.body.setCurrentWidget(
            self.note_list if self.note_list.count() else self.lbl_empty
        )

    def eventFilter(self, obj, event):
        if (event.type() == QEvent.Type.MouseButtonPress
                and obj is self._viewport):
            self._press_pos = event.position().toPoint()
        return super().eventFilter(obj, event)

    def check_indicator_rect(self, item: QListWidgetItem) -> QRect:
        opt = QStyleOptionViewItem()
        opt.rect = self.note_list.visualItemRect(item)
        opt.features |= QStyleOptionViewItem.ViewItemFeature.HasCheckIndicator
        return self.note_list.style().subElementRect(
            QStyle.SubElement.SE_ItemViewItemCheckIndicator, opt, self.note_list
        )

    def _on_select(self, item: QListWidgetItem):
        # ticking the box only toggles the note
        if (item.flags() & Qt.ItemFlag.ItemIsUserCheckable
                and self._press_pos is not None
                and self.check_indicator_rect(item).contains(self._press_pos)):
            return
        self.controller.open_note(item.data(Qt.ItemDataRole.UserRole))

    def _on_check_changed(self, item: QListWidgetItem):
        checked = item.checkState() == Qt.CheckState.Checked
        note = self.controller.set_checked(item.data(Qt.ItemDataRole.UserRole), checked)
        if note is None:
            return
        self.note_list.blockSignals(True)
        item.setData(Qt.ItemDataRole.UserRole, note)
        font = QFont(item.font())
        font.setBold(not checked)
        item.setFont(font)
        self.note_list.blockSignals(False)
