"""Repository doubles used by the view model and widget tests."""

from repositories.word_repository import StorageError, Word, WordRepository


class RecordingRepository(WordRepository):
    """Real repository that also records save() calls."""

    def __init__(self, db_path):
        super().__init__(db_path)
        self.saved = []

    def save(self, text):
        self.saved.append(text)
        return super().save(text)


class FailingRepository(WordRepository):
    """In-memory store that can be made unavailable for reads or writes."""

    def __init__(self, words=None, fail_fetch=False, fail_save=True):
        super().__init__(db_path=":unused:")
        self._words = list(words or [])
        self.fail_fetch = fail_fetch
        self.fail_save = fail_save
        self.save_calls = 0

    def fetch_all(self):
        if self.fail_fetch:
            raise StorageError("store unavailable")
        return list(self._words)

    def save(self, text):
        self.save_calls += 1
        if self.fail_save:
            raise StorageError("disk full")
        word = Word(text=text, id=len(self._words) + 1)
        self._words.append(word)
        return word
