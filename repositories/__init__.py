"""Repository package public interface.

    from repositories import WordRepository, Word, StorageError
"""

from .word_repository import StorageError, Word, WordRepository

__all__: list[str] = [
    "StorageError",
    "Word",
    "WordRepository",
]
