import logging
from fancyhangman.game.models import GuessResult, GuessStatus
from fancyhangman.game.rules import is_full_match, is_valid_guess, score_guess
from fancyhangman.lang.normalize import AppLanguage, replace_unicode
from fancyhangman.words.base import WordBase
from fancyhangman.words.models import WordEntry

logger = logging.getLogger(__name__)

class GameOverError(RuntimeError):
    pass

class GameSession:
    """
    Runs a single round of the guessing game against a word base.
    Input and output are left to the caller.
    """

    def __init__(
        self,
        word_base: WordBase,
        max_guesses: int,
        language: AppLanguage = AppLanguage.EN,
        word_length: int = 5
    ):
        self.word_base = word_base
        self.max_guesses = max_guesses
        self.language = language
        self.word_length = word_length
        self.solution: WordEntry | None = None
        self.guesses_used = 0
        self.won = False

    @property
    def guesses_left(self) -> int:
        return self.max_guesses - self.guesses_used

    @property
    def finished(self) -> bool:
        return self.won or self.guesses_left <= 0

    def start(self) -> WordEntry | None:
        """
        Picks the solution. None means the word base ran out of words.
        """
        self.solution = self.word_base.random_pick()
        self.guesses_used = 0
        self.won = False
        if self.solution:
            logger.debug(f"New game with a {len(self.solution.word)} letter solution")
        return self.solution

    def submit(self, raw_guess: str) -> GuessResult:
        if self.solution is None:
            raise GameOverError("The game has not been started")
        if self.finished:
            raise GameOverError("The game is already over")

        guess = replace_unicode(raw_guess.strip().lower(), self.language)

        if not is_valid_guess(guess, self.word_length):
            return GuessResult(
                status=GuessStatus.INVALID, guess=guess, guesses_left=self.guesses_left
            )
        if self.word_base.find(guess) is None:
            return GuessResult(
                status=GuessStatus.UNKNOWN_WORD, guess=guess, guesses_left=self.guesses_left
            )

        self.guesses_used += 1
        feedback = score_guess(self.solution.word, guess)

        if is_full_match(self.solution.word, guess):
            self.won = True
            mark_result = self.word_base.mark_used(self.solution)
            return GuessResult(
                status=GuessStatus.WON,
                guess=guess,
                feedback=feedback,
                guesses_left=self.guesses_left,
                mark_result=mark_result
            )

        status = GuessStatus.LOST if self.guesses_left <= 0 else GuessStatus.MISS
        return GuessResult(
            status=status, guess=guess, feedback=feedback, guesses_left=self.guesses_left
        )
