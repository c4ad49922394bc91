from enum import Enum
from anyascii import anyascii


class AppLanguage(str, Enum):
    DE = "de"
    EN = "en"


_UMLAUTS = {
    "ä": "ae",
    "ö": "oe",
    "ü": "ue",
}


def parse_app_language(locale: str | None) -> AppLanguage:
    """
    Maps a locale tag to an AppLanguage. Unknown or empty tags fall back to EN.
    """
    if locale and locale.strip().lower() == AppLanguage.DE.value:
        return AppLanguage.DE
    return AppLanguage.EN


def replace_umlauts(word: str) -> str:
    for src, dst in _UMLAUTS.items():
        word = word.replace(src, dst)
    return word


def to_ascii(word: str) -> str:
    """
    Transliterates every non-ASCII character to its closest ASCII approximation.
    """
    return anyascii(word)


def replace_unicode(word: str, language: AppLanguage) -> str:
    """
    Folds a lowercase word to the ASCII alphabet.

    German words get their umlauts expanded to digraphs first (schön -> schoen),
    every other language is transliterated directly (schön -> schon).
    No case folding happens here; callers pass lowercase input.
    """
    if language == AppLanguage.DE:
        word = replace_umlauts(word)
    return to_ascii(word)
