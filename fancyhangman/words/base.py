import re
from abc import ABC, abstractmethod
from fancyhangman.errors import InvalidWord
from fancyhangman.words.models import MarkResult, WordEntry

WORD_PATTERN = re.compile(r"[a-z]+")

def is_storable(word: str) -> bool:
    """
    True when the word consists of lowercase ASCII letters only.
    """
    return WORD_PATTERN.fullmatch(word) is not None

class WordBase(ABC):
    """
    Abstract storage for the word collection the game draws from.
    The text and table backends implement this; the game and the importer
    only ever talk to this interface.
    """

    def __init__(self, word_length: int | None = None):
        # None disables the length check on insert
        self.word_length = word_length

    @abstractmethod
    def random_pick(self) -> WordEntry | None:
        """
        Returns a uniformly chosen entry from the eligible collection,
        or None when there is nothing left to pick.
        """
        pass

    @abstractmethod
    def find(self, text: str) -> WordEntry | None:
        """
        Exact lookup, regardless of the 'used' flag.
        """
        pass

    @abstractmethod
    def insert(self, text: str) -> bool:
        """
        Adds the word unless it is already stored.
        Returns True only when a new entry was written.
        """
        pass

    @abstractmethod
    def mark_used(self, entry: WordEntry) -> MarkResult:
        """
        Flags the entry as solved.
        """
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @staticmethod
    def clean(text: str) -> str:
        return text.strip().lower()

    def validate(self, text: str) -> str:
        word = self.clean(text)
        if not word:
            raise InvalidWord("Cannot store an empty word")
        if any(ch.isspace() for ch in word):
            raise InvalidWord(f"Word '{word}' contains whitespace")
        if not is_storable(word):
            raise InvalidWord(f"Word '{word}' contains characters outside a-z")
        if self.word_length is not None and len(word) != self.word_length:
            raise InvalidWord(
                f"Word '{word}' has {len(word)} characters, expected {self.word_length}"
            )
        return word
