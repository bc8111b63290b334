"""
Secret word selection.

The corpus lives in the `words` table and is seeded from a plain text file
with one word per line.
"""
import logging
import os
from datetime import date

from sqlalchemy import func, select

from db.models import Word
from game_logic import is_well_formed, normalize_word

logger = logging.getLogger(__name__)

DEFAULT_WORDS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "words.txt")


class EmptyCorpusError(LookupError):
    """Raised when a word is requested but the corpus has none."""

    def __init__(self):
        super().__init__("No words available")


def load_corpus(path=DEFAULT_WORDS_FILE):
    """
    Read playable words from a text file.

    Blank lines and lines starting with '#' are ignored. Entries that are not
    five alphabetic letters are skipped with a warning. Words are upper-cased
    and de-duplicated, keeping file order.
    """
    words = []
    seen = set()
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            entry = line.strip()
            if not entry or entry.startswith("#"):
                continue
            if not is_well_formed(entry):
                logger.warning("Skipping malformed word %r at %s:%d", entry, path, lineno)
                continue
            word = normalize_word(entry)
            if word not in seen:
                seen.add(word)
                words.append(word)
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


def seed_words(session, words):
    """Insert words missing from the table. Returns how many were added."""
    existing = set(session.scalars(select(Word.word)))
    added = 0
    for word in words:
        word = normalize_word(word)
        if word in existing:
            continue
        session.add(Word(word=word))
        existing.add(word)
        added += 1
    session.commit()
    if added:
        logger.info("Seeded %d words", added)
    return added


def random_word(session):
    """Pick a random secret word."""
    word = session.scalar(select(Word.word).order_by(func.random()).limit(1))
    if word is None:
        raise EmptyCorpusError()
    return word


def daily_word(session, day=None):
    """
    Pick the word for a calendar day.

    The same date always yields the same word for an unchanged corpus.
    """
    day = day or date.today()
    count = session.scalar(select(func.count(Word.id)))
    if not count:
        raise EmptyCorpusError()
    index = day.toordinal() % count
    return session.scalar(select(Word.word).order_by(Word.id).offset(index).limit(1))


def is_known_word(session, word):
    if not is_well_formed(word):
        return False
    found = session.scalar(select(Word.id).where(Word.word == normalize_word(word)))
    return found is not None
