from __future__ import annotations

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
    QListWidgetItem
)

from repositories.word_repository import WordRepository
from ui.font import list_word_font, title_font
from ui.styles import ADD_BUTTON_STYLE, LIST_STYLE
from ui.word_list.new_word_dialog import NewWordDialog
from ui.word_list.viewmodel import WordListViewModel


class WordListWindow(QWidget):
    """Single screen: header with "+" and the list of saved words."""

    def __init__(self, repository: WordRepository, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("GuardaPalabras")
        self.resize(400, 640)

        self.vm = WordListViewModel(repository, self)
        self.vm.words_changed.connect(self._render)

        self._build_ui()
        self.vm.load()

    # ------------------------------------------------------------------
    # UI
    # ------------------------------------------------------------------
    def _build_ui(self):
        lay = QVBoxLayout(self)

        head = QHBoxLayout()
        title = QLabel("Palabras")
        title.setFont(title_font)
        head.addWidget(title, 1)

        self.add_button = QPushButton("+")
        self.add_button.setFixedSize(44, 36)
        self.add_button.setStyleSheet(ADD_BUTTON_STYLE)
        self.add_button.clicked.connect(self._on_add_clicked)
        head.addWidget(self.add_button)
        lay.addLayout(head)

        self.list_widget = QListWidget()
        self.list_widget.setStyleSheet(LIST_STYLE)
        self.list_widget.setSelectionMode(QListWidget.NoSelection)
        lay.addWidget(self.list_widget, 1)

    def _render(self):
        self.list_widget.clear()
        for row in range(self.vm.row_count()):
            item = QListWidgetItem(self.vm.text_at(row))
            item.setFont(list_word_font)
            self.list_widget.addItem(item)

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------
    def _ask_word(self) -> str | None:
        return NewWordDialog.get_word(self)

    def _on_add_clicked(self):
        text = self._ask_word()
        if text is None:  # Cancelar
            return
        self.vm.add_word(text)
