import logging
from contextlib import contextmanager
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from fancyhangman.errors import IOFailure, StorageUnavailable
from fancyhangman.storage.database import Base, Word, make_engine
from fancyhangman.words.base import WordBase
from fancyhangman.words.models import MarkResult, WordEntry

logger = logging.getLogger(__name__)

class TableWordBase(WordBase):
    """
    Word base backed by the 'words' table of a relational database.

    One session is held for the lifetime of the instance. Unlike the text
    backend, solved words are remembered and never picked again.
    """

    def __init__(
        self,
        database_url: str | None = None,
        word_length: int | None = None,
        engine: Engine | None = None,
        create_schema: bool = True
    ):
        super().__init__(word_length)
        if engine is None and not database_url:
            raise ValueError("Either database_url or engine is required")

        try:
            self.engine = engine or make_engine(database_url)
            if create_schema:
                Base.metadata.create_all(bind=self.engine)
            self.session = Session(bind=self.engine, autoflush=False)
            # Connect now, there is no usable instance without a connection
            self.session.connection()
            self.session.commit()
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"Error connecting to database: {e}") from e
        except ImportError as e:
            # Driver for the URL scheme is not installed
            raise StorageUnavailable(f"No database driver available: {e}") from e

    @contextmanager
    def _transaction(self, action: str):
        try:
            yield self.session
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            raise IOFailure(f"Error when {action}: {e}") from e

    def random_pick(self) -> WordEntry | None:
        with self._transaction("reading from the database") as db:
            row = (
                db.query(Word)
                .filter(Word.used == False)
                .order_by(func.random())
                .first()
            )
            return WordEntry.model_validate(row) if row else None

    def find(self, text: str) -> WordEntry | None:
        target = self.clean(text)
        with self._transaction(f"looking for '{target}' in the database") as db:
            row = db.query(Word).filter(Word.word == target).first()
            return WordEntry.model_validate(row) if row else None

    def insert(self, text: str) -> bool:
        word = self.validate(text)
        if self.find(word) is not None:
            return False

        try:
            with self._transaction(f"writing '{word}' to the database") as db:
                db.add(Word(word=word, used=False))
        except IntegrityError:
            # Lost a race against the unique constraint
            logger.debug(f"'{word}' rejected by the unique constraint")
            return False

        logger.debug(f"Added '{word}' to the database")
        return True

    def mark_used(self, entry: WordEntry) -> MarkResult:
        with self._transaction(f"updating '{entry.word}' in the database") as db:
            affected = (
                db.query(Word)
                .filter(Word.id == entry.id)
                .update({Word.used: True}, synchronize_session=False)
            )

        if affected <= 0:
            logger.warning(f"Updating '{entry.word}' (id {entry.id}) affected no rows")
            return MarkResult.STALE

        logger.debug(f"Marked '{entry.word}' as used")
        return MarkResult.UPDATED

    def close(self) -> None:
        self.session.close()
