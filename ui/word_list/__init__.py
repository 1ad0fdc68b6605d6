"""
Convenience re-exports so callers can simply:

    from ui.word_list import WordListWindow, WordListViewModel
"""

from .new_word_dialog import NewWordDialog
from .view import WordListWindow
from .viewmodel import WordListViewModel

__all__ = [
    "NewWordDialog",
    "WordListViewModel",
    "WordListWindow",
]
