import pytest
from typer.testing import CliRunner
from fancyhangman.cli import app

runner = CliRunner()

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ["DATABASE_URL", "WORDBASE_FILE", "MAX_GUESSES", "LOCALE", "WORD_LENGTH"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

def test_import_command(tmp_path):
    source = tmp_path / "raw.txt"
    source.write_text("Möwe\nRübe\nBaum\n", encoding="utf-8")
    words = tmp_path / "words.txt"

    result = runner.invoke(app, ["import", str(source), "de", "--wordbase-file", str(words)])

    assert result.exit_code == 0, result.output
    assert "Added 2 words" in result.output
    assert words.read_text(encoding="utf-8") == "moewe\nruebe\n"

def test_import_command_reports_errors(tmp_path):
    result = runner.invoke(
        app, ["import", str(tmp_path / "nope.txt"), "--wordbase-file", str(tmp_path / "words.txt")]
    )
    assert result.exit_code == 1
    assert "Import aborted" in result.output

def test_play_command_win(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("apple\napply\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["play", "--wordbase-file", str(words), "--max-guesses", "3"],
        input="ab\nzzzzz\napple\napply\n",
    )

    assert result.exit_code == 0, result.output
    assert "must have a size of 5 characters" in result.output
    assert "not in the word list" in result.output
    assert "Congratulations! You won!" in result.output

def test_play_command_empty_word_base(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("", encoding="utf-8")

    result = runner.invoke(app, ["play", "--wordbase-file", str(words)])

    assert result.exit_code == 0
    assert "ran out of words" in result.output

def test_missing_configuration():
    result = runner.invoke(app, ["play"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output

def test_play_command_ends_on_eof(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("apple\n", encoding="utf-8")

    result = runner.invoke(app, ["play", "--wordbase-file", str(words)], input="grape\n")

    assert result.exit_code == 0, result.output
    assert "not in the word list" in result.output
    assert "Game aborted." in result.output
