import pytest
from pydantic import ValidationError
from fancyhangman.config import Settings
from fancyhangman.lang.normalize import AppLanguage
from fancyhangman.words.factory import create_word_base
from fancyhangman.words.table import TableWordBase
from fancyhangman.words.text import TextWordBase

ENV_VARS = ["DATABASE_URL", "WORDBASE_FILE", "MAX_GUESSES", "LOCALE", "WORD_LENGTH"]

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)

def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("WORDBASE_FILE", "words.txt")
    monkeypatch.setenv("MAX_GUESSES", "4")
    monkeypatch.setenv("LOCALE", "de")

    settings = Settings()
    assert settings.wordbase_file == "words.txt"
    assert settings.max_guesses == 4
    assert settings.locale == AppLanguage.DE
    assert settings.word_length == 5
    assert not settings.uses_database

def test_settings_from_env_file(tmp_path):
    (tmp_path / ".env").write_text("WORDBASE_FILE=list.txt\nWORD_LENGTH=6\n", encoding="utf-8")
    settings = Settings()
    assert settings.wordbase_file == "list.txt"
    assert settings.word_length == 6

def test_unknown_locale_falls_back_to_english():
    settings = Settings(wordbase_file="words.txt", locale="fr")
    assert settings.locale == AppLanguage.EN

def test_storage_is_required():
    with pytest.raises(ValidationError):
        Settings()

def test_max_guesses_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(wordbase_file="words.txt", max_guesses=0)

def test_factory_creates_text_backend(tmp_path):
    word_base = create_word_base(Settings(wordbase_file=str(tmp_path / "words.txt"), word_length=6))
    assert isinstance(word_base, TextWordBase)
    assert word_base.word_length == 6

def test_factory_prefers_database(tmp_path):
    settings = Settings(
        wordbase_file=str(tmp_path / "words.txt"),
        database_url=f"sqlite:///{tmp_path / 'words.db'}",
    )
    with create_word_base(settings) as word_base:
        assert isinstance(word_base, TableWordBase)
        assert word_base.random_pick() is None
