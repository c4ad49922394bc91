from enum import Enum
from pydantic import BaseModel
from fancyhangman.words.models import MarkResult

class LetterState(str, Enum):
    CORRECT = "correct"  # Right letter, right position
    PRESENT = "present"  # Letter occurs elsewhere in the solution
    ABSENT = "absent"

class LetterFeedback(BaseModel):
    letter: str
    state: LetterState

class GuessStatus(str, Enum):
    INVALID = "invalid"            # Wrong length, no guess consumed
    UNKNOWN_WORD = "unknown_word"  # Not in the word base, no guess consumed
    MISS = "miss"
    WON = "won"
    LOST = "lost"

class GuessResult(BaseModel):
    status: GuessStatus
    guess: str
    feedback: list[LetterFeedback] = []
    guesses_left: int
    mark_result: MarkResult | None = None  # Only set when the game is won
