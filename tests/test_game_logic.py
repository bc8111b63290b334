import random
from collections import Counter

import pytest

from game_logic import (
    InvalidLengthError,
    Mark,
    WORD_LENGTH,
    evaluate,
    feedback_tags,
    is_solved,
    is_well_formed,
)

E, P, A = Mark.EXACT, Mark.PRESENT, Mark.ABSENT


# --- golden cases, worked out by hand with the two-pass rules ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("ERASE", "SPEED", (P, A, P, P, A)),
    ("ALLOW", "LLAMA", (P, E, P, A, A)),
    ("CRANE", "EERIE", (A, A, P, A, E)),
    ("STEAL", "EERIE", (P, A, A, A, A)),
    ("ROBOT", "OOOOO", (A, E, A, E, A)),
    ("LEVEL", "BELLE", (A, E, P, P, P)),
    ("SCOOP", "COOLS", (P, P, E, A, P)),
    ("CRANE", "RAISE", (P, P, A, A, E)),
    ("CRANE", "CRANE", (E, E, E, E, E)),
])
def test_evaluate_golden(secret, guess, expected):
    assert evaluate(secret, guess) == expected


def test_naive_containment_would_overcount():
    # Secret has one E left after the exact match; the other two Es are absent
    fb = evaluate("CRANE", "EERIE")
    marks_for_e = [m for ch, m in zip("EERIE", fb) if ch == "E"]
    assert marks_for_e == [A, A, E]


def test_case_insensitive():
    assert evaluate("crane", "CRANE") == (E,) * WORD_LENGTH
    assert evaluate("Erase", "sPeEd") == evaluate("ERASE", "SPEED")


@pytest.mark.parametrize("secret,guess,field", [
    ("CRANE", "", "guess"),
    ("CRANE", "CRAN", "guess"),
    ("CRANE", "CRANES", "guess"),
    ("CRAN", "CRANE", "secret"),
    ("CRANES", "CRANES", "secret"),
    ("", "", "secret"),
    (" CRANE", "CRANE", "secret"),
])
def test_invalid_length_rejected(secret, guess, field):
    with pytest.raises(InvalidLengthError) as exc:
        evaluate(secret, guess)
    assert exc.value.field == field
    assert isinstance(exc.value, ValueError)


def test_feedback_is_immutable_and_sized():
    fb = evaluate("CRANE", "SLATE")
    assert isinstance(fb, tuple)
    assert len(fb) == WORD_LENGTH


def test_feedback_tags():
    assert feedback_tags(evaluate("ERASE", "SPEED")) == [
        "present", "absent", "present", "present", "absent",
    ]


def test_is_solved():
    assert is_solved(evaluate("CRANE", "crane")) is True
    assert is_solved(evaluate("CRANE", "TRACE")) is False


@pytest.mark.parametrize("word,expected", [
    ("CRANE", True),
    ("crane", True),
    ("CRAN", False),
    ("CRANES", False),
    ("CR4NE", False),
    ("CR NE", False),
    (None, False),
    (12345, False),
])
def test_is_well_formed(word, expected):
    assert is_well_formed(word) is expected


# --- properties over generated words ---
# A small alphabet forces plenty of repeated letters.
def _random_word(rng, alphabet="AELST"):
    return "".join(rng.choice(alphabet) for _ in range(WORD_LENGTH))


_rng = random.Random(108)
PAIRS = [(_random_word(_rng), _random_word(_rng)) for _ in range(500)]


def test_deterministic():
    for secret, guess in PAIRS[:50]:
        assert evaluate(secret, guess) == evaluate(secret, guess)


def test_self_match_all_exact():
    for secret, _ in PAIRS:
        assert evaluate(secret, secret) == (E,) * WORD_LENGTH


def test_no_overlap_all_absent():
    rng = random.Random(7)
    for _ in range(100):
        secret = _random_word(rng, "ABCDE")
        guess = _random_word(rng, "VWXYZ")
        assert evaluate(secret, guess) == (A,) * WORD_LENGTH


def test_exact_iff_same_letter_at_position():
    for secret, guess in PAIRS:
        fb = evaluate(secret, guess)
        for i in range(WORD_LENGTH):
            assert (fb[i] is E) == (guess[i] == secret[i])


def test_credit_per_letter_is_min_of_counts():
    for secret, guess in PAIRS:
        fb = evaluate(secret, guess)
        credited = Counter(ch for ch, m in zip(guess, fb) if m is not A)
        secret_counts = Counter(secret)
        for letter, count in Counter(guess).items():
            assert credited[letter] == min(count, secret_counts[letter])


def test_present_marks_go_to_leftmost_occurrences():
    for secret, guess in PAIRS:
        fb = evaluate(secret, guess)
        for letter in set(guess):
            non_exact = [fb[i] for i in range(WORD_LENGTH) if guess[i] == letter and fb[i] is not E]
            # Once one occurrence is absent, every later one is too
            if A in non_exact:
                first_absent = non_exact.index(A)
                assert all(m is A for m in non_exact[first_absent:])
