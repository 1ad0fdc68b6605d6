from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from repositories.word_repository import StorageError, Word, WordRepository


class WordListViewModel(QObject):
    """
    Holds the ordered word list the view renders.
    Talks to the repository; the view only listens to ``words_changed``.
    """

    words_changed = Signal()

    def __init__(self, repository: WordRepository, parent=None) -> None:
        super().__init__(parent)
        self._repo = repository
        self._words: List[Word] = []
        self._loaded = False

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #
    @property
    def words(self) -> List[Word]:
        return list(self._words)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def section_count(self) -> int:
        return 1

    def row_count(self) -> int:
        return len(self._words)

    def text_at(self, row: int) -> str:
        return self._words[row].text

    # ------------------------------------------------------------------ #
    # Use-cases
    # ------------------------------------------------------------------ #
    def load(self) -> None:
        """Fetch everything from the store. A read failure keeps the current list."""
        try:
            self._words = self._repo.fetch_all()
        except StorageError as exc:
            print(f"No se recuperaron los datos, info del error: {exc!r}")
        self._loaded = True
        self.words_changed.emit()

    def add_word(self, text: str) -> Optional[Word]:
        """Persist ``text`` as typed and append it; returns None if the save failed."""
        try:
            word = self._repo.save(text)
        except StorageError as exc:
            print(f"No se pudo guardar, info del error: {exc!r}")
            return None
        self._words.append(word)
        self.words_changed.emit()
        return word
