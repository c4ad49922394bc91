class WordBaseError(Exception):
    """
    Base class for every failure raised by a word base or the import pipeline.
    """


class StorageUnavailable(WordBaseError):
    """
    The backing file cannot be opened or created, or the database connection
    cannot be established.
    """


class IOFailure(WordBaseError):
    """
    A read or write against an already opened medium failed.
    """


class InvalidWord(WordBaseError, ValueError):
    """
    The word violates the entry invariants (empty, whitespace, wrong length).
    """
