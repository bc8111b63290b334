"""
Guess evaluation for the word game.

Evaluation is case-insensitive: both words are upper-cased before they are
compared. Whitespace is not stripped here, callers clean their input first.
"""
from collections import Counter
from enum import Enum
from typing import Sequence, Tuple

WORD_LENGTH = 5


class Mark(str, Enum):
    """Per-position feedback for one letter of a guess."""
    EXACT = "exact"
    PRESENT = "present"
    ABSENT = "absent"


Feedback = Tuple[Mark, ...]


class InvalidLengthError(ValueError):
    """Raised when a secret or guess is not exactly WORD_LENGTH letters."""

    def __init__(self, field: str, length: int):
        self.field = field
        self.length = length
        super().__init__(
            f"{field} must be {WORD_LENGTH} letters, got {length}"
        )


def normalize_word(word: str) -> str:
    return word.upper()


def is_well_formed(word) -> bool:
    """Check that `word` is an alphabetic string of WORD_LENGTH letters."""
    if not isinstance(word, str):
        return False
    word = normalize_word(word)
    return len(word) == WORD_LENGTH and word.isalpha()


# Evaluate a guess against the secret word.
def evaluate(secret: str, guess: str) -> Feedback:
    secret = normalize_word(secret)
    guess = normalize_word(guess)
    if len(secret) != WORD_LENGTH:
        raise InvalidLengthError("secret", len(secret))
    if len(guess) != WORD_LENGTH:
        raise InvalidLengthError("guess", len(guess))

    result = [Mark.ABSENT] * WORD_LENGTH

    # First pass: mark exact positions and count the secret letters left over
    remaining = Counter()
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            result[i] = Mark.EXACT
        else:
            remaining[s] += 1

    # Second pass, left to right: a letter is present only while unmatched
    # copies of it remain in the secret
    for i, g in enumerate(guess):
        if result[i] is Mark.EXACT:
            continue
        if remaining[g] > 0:
            result[i] = Mark.PRESENT
            remaining[g] -= 1

    return tuple(result)


def is_solved(feedback: Sequence[Mark]) -> bool:
    return len(feedback) == WORD_LENGTH and all(m is Mark.EXACT for m in feedback)


def feedback_tags(feedback: Sequence[Mark]) -> list:
    """Serialize marks to their wire tags, e.g. ["exact", "absent", ...]."""
    return [m.value for m in feedback]
