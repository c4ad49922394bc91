from sqlalchemy import Boolean, Column, Integer, String, create_engine, false
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class Word(Base):
    __tablename__ = "words"

    id = Column(Integer, primary_key=True)
    word = Column(String, unique=True, nullable=False)
    used = Column(Boolean, nullable=False, default=False, server_default=false())


def make_engine(database_url: str, **kwargs) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})  # needed for SQLite
    return create_engine(database_url, **kwargs)
