from fancyhangman.game.models import LetterFeedback, LetterState

def is_valid_guess(guess: str, word_length: int) -> bool:
    return len(guess.strip()) == word_length

def score_guess(solution: str, guess: str) -> list[LetterFeedback]:
    """
    Compares the guess letter by letter with the solution.
    A letter is PRESENT whenever it occurs anywhere in the solution; repeated
    letters are not counted against each other.
    """
    solution = solution.lower()
    feedback = []
    for i, letter in enumerate(guess.lower()):
        if i < len(solution) and solution[i] == letter:
            state = LetterState.CORRECT
        elif letter in solution:
            state = LetterState.PRESENT
        else:
            state = LetterState.ABSENT
        feedback.append(LetterFeedback(letter=letter, state=state))
    return feedback

def is_full_match(solution: str, guess: str) -> bool:
    return solution.lower() == guess.lower()
