import logging
import random
from contextlib import closing
from pathlib import Path
from typing import Iterator
from fancyhangman.errors import IOFailure, StorageUnavailable
from fancyhangman.words.base import WordBase
from fancyhangman.words.models import MarkResult, WordEntry

logger = logging.getLogger(__name__)

class TextWordBase(WordBase):
    """
    Word base backed by a plain UTF-8 file with one word per line.
    The file is opened and closed within every operation; usage is not tracked.
    """

    def __init__(
        self,
        file_path: str | Path,
        word_length: int | None = None,
        rng: random.Random | None = None
    ):
        super().__init__(word_length)
        self.path = Path(file_path)
        self.rng = rng or random.Random()

    def _read_words(self) -> Iterator[str]:
        try:
            f = open(self.path, "r", encoding="utf-8")
        except OSError as e:
            raise StorageUnavailable(f"Cannot open word base {self.path}: {e}") from e

        with f:
            try:
                for line in f:
                    word = line.strip()
                    if word:
                        yield word
            except (OSError, UnicodeDecodeError) as e:
                raise IOFailure(f"Error reading from word base {self.path}: {e}") from e

    def random_pick(self) -> WordEntry | None:
        # Reservoir sampling: the n-th word replaces the pick with probability 1/n
        chosen = None
        with closing(self._read_words()) as words:
            for n, word in enumerate(words, start=1):
                if self.rng.randrange(n) == 0:
                    chosen = word

        if chosen is None:
            return None
        return WordEntry(word=chosen)

    def find(self, text: str) -> WordEntry | None:
        target = self.clean(text)
        with closing(self._read_words()) as words:
            for word in words:
                if word == target:
                    return WordEntry(word=word)
        return None

    def _ends_without_newline(self) -> bool:
        if not self.path.exists() or self.path.stat().st_size == 0:
            return False
        try:
            with open(self.path, "rb") as f:
                f.seek(-1, 2)
                return f.read(1) != b"\n"
        except OSError as e:
            raise IOFailure(f"Error reading from word base {self.path}: {e}") from e

    def insert(self, text: str) -> bool:
        word = self.validate(text)

        # A missing file is an empty collection; appending creates it
        if self.path.exists() and self.find(word) is not None:
            logger.debug(f"'{word}' already in {self.path}, skipping")
            return False

        prefix = "\n" if self._ends_without_newline() else ""

        try:
            f = open(self.path, "a", encoding="utf-8")
        except OSError as e:
            raise StorageUnavailable(f"Cannot open word base {self.path} for writing: {e}") from e

        try:
            with f:
                f.write(f"{prefix}{word}\n")
        except OSError as e:
            raise IOFailure(f"Error writing '{word}' to word base {self.path}: {e}") from e

        logger.debug(f"Appended '{word}' to {self.path}")
        return True

    def mark_used(self, entry: WordEntry) -> MarkResult:
        return MarkResult.UNTRACKED
