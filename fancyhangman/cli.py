import logging
from typing import Optional
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text
from fancyhangman.config import Settings
from fancyhangman.errors import WordBaseError
from fancyhangman.game.engine import GameSession
from fancyhangman.game.models import GuessResult, GuessStatus, LetterState
from fancyhangman.lang.normalize import parse_app_language
from fancyhangman.maintenance.importer import DedupMode, import_words
from fancyhangman.words.factory import create_word_base

app = typer.Typer(help="fhcli: a fancy hangman-style word guessing game.")
console = Console()

LETTER_STYLES = {
    LetterState.CORRECT: "bold green",
    LetterState.PRESENT: "bold yellow",
    LetterState.ABSENT: "",
}

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

def _load_settings(**overrides) -> Settings:
    try:
        return Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red]\n{escape(str(e))}")
        raise typer.Exit(code=1)

@app.command()
def play(
    wordbase_file: Optional[str] = typer.Option(None, help="Overrides WORDBASE_FILE"),
    database_url: Optional[str] = typer.Option(None, help="Overrides DATABASE_URL"),
    max_guesses: Optional[int] = typer.Option(None, help="Overrides MAX_GUESSES"),
):
    """
    Guess today's word.
    """
    settings = _load_settings(
        wordbase_file=wordbase_file, database_url=database_url, max_guesses=max_guesses
    )

    try:
        with create_word_base(settings) as word_base:
            session = GameSession(
                word_base, settings.max_guesses, settings.locale, settings.word_length
            )
            _run_session(session)
    except WordBaseError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

def _run_session(session: GameSession):
    if session.start() is None:
        console.print("¯\\_(ツ)_/¯ Seems like I ran out of words! Have you tried using the import tool?")
        return

    console.print("Welcome to fancy hangman CLI! Guess today's word!")
    console.print(" ".join("_" * session.word_length))
    console.print(f"You have {session.max_guesses} guesses.")

    while not session.finished:
        try:
            raw_guess = console.input("> ")
        except EOFError:
            console.print("\nGame aborted.")
            return
        result = session.submit(raw_guess)

        if result.status == GuessStatus.INVALID:
            console.print(
                f"Invalid input: Your guess must have a size of {session.word_length} characters. "
                f"You entered {len(result.guess)} characters."
            )
            continue
        if result.status == GuessStatus.UNKNOWN_WORD:
            console.print("The guessed word is not in the word list.")
            continue

        console.print(_render_feedback(result))

        if result.status == GuessStatus.WON:
            console.print("[bold green]Congratulations! You won![/bold green]")
        elif result.status == GuessStatus.LOST:
            console.print(f"Better luck next time! The word was [bold]{session.solution.word}[/bold].")
        elif result.guesses_left > 1:
            console.print(f"You now have {result.guesses_left} guesses.")
        else:
            console.print("This is your last guess.")

def _render_feedback(result: GuessResult) -> Text:
    text = Text()
    for item in result.feedback:
        text.append(item.letter, style=LETTER_STYLES[item.state])
        text.append(" ")
    return text

@app.command("import")
def import_(
    source: str = typer.Argument(..., help="Raw word list, one word per line"),
    locale: Optional[str] = typer.Argument(None, help="Locale of the word list (de or en)"),
    dedup: DedupMode = typer.Option(DedupMode.ADJACENT, help="Duplicate detection strategy"),
    wordbase_file: Optional[str] = typer.Option(None, help="Overrides WORDBASE_FILE"),
    database_url: Optional[str] = typer.Option(None, help="Overrides DATABASE_URL"),
):
    """
    Polishes a raw word list and adds it to the word base.
    """
    settings = _load_settings(wordbase_file=wordbase_file, database_url=database_url)
    language = parse_app_language(locale) if locale else settings.locale

    try:
        with create_word_base(settings) as word_base:
            report = import_words(
                source,
                language,
                word_base,
                word_length=settings.word_length,
                dedup=dedup,
                progress=True,
            )
    except WordBaseError as e:
        console.print(f"[red]An error occurred while importing. Import aborted\n{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"✨ Done in {report.duration_seconds:.2f}s. "
        f"Added {report.inserted} words to the word base!"
    )

if __name__ == "__main__":
    app()
