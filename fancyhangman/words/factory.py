from fancyhangman.config import Settings
from fancyhangman.words.base import WordBase
from fancyhangman.words.table import TableWordBase
from fancyhangman.words.text import TextWordBase

def create_word_base(settings: Settings) -> WordBase:
    """
    DATABASE_URL wins over WORDBASE_FILE when both are configured.
    """
    if settings.uses_database:
        return TableWordBase(settings.database_url, word_length=settings.word_length)
    elif settings.wordbase_file:
        return TextWordBase(settings.wordbase_file, word_length=settings.word_length)
    else:
        raise ValueError("No word base configured")
