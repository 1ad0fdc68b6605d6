"""repositories/word_repository.py
---------------------------------
Wrap db.py helpers so the UI never imports db directly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from db import (
    StorageError,
    get_db_path,
    load_words as _load_words,
    save_word as _save_word,
)


# ---------- plain data ----------
@dataclass(frozen=True)
class Word:
    text: str
    id: Optional[int] = None


class WordRepository:
    """Storage gateway for the word list.

    Every call opens its own connection to ``db_path`` and blocks until the
    store answers. Failures are raised as :class:`db.StorageError`.
    """

    def __init__(self, db_path: str | None = None) -> None:
        self._db_path = db_path

    @property
    def db_path(self) -> str:
        if self._db_path is None:
            try:
                self._db_path = get_db_path()
            except OSError as exc:
                raise StorageError(f"Cannot prepare data directory: {exc}") from exc
        return self._db_path

    # -------- Query --------
    def fetch_all(self) -> List[Word]:
        return [Word(text=text, id=row_id) for row_id, text in _load_words(self.db_path)]

    # -------- Create --------
    def save(self, text: str) -> Word:
        row_id = _save_word(self.db_path, text)
        return Word(text=text, id=row_id)


__all__ = ["Word", "WordRepository", "StorageError"]
