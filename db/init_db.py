"""
Create all tables and seed the word corpus.

Run from the project root: python -m db.init_db [words_file]
"""
import logging
import sys

from config import Config
from db.database import get_db, init_database, make_engine, make_session_factory
from words import load_corpus, seed_words

logger = logging.getLogger(__name__)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    words_file = argv[0] if argv else Config.WORDS_FILE

    engine = make_engine(Config.DATABASE_URL)
    logger.info("Creating database tables...")
    init_database(engine)

    db_gen = get_db(make_session_factory(engine))
    db = next(db_gen)
    try:
        added = seed_words(db, load_corpus(words_file))
    finally:
        db_gen.close()
    logger.info("Database initialized at %s (%d new words)", Config.DATABASE_URL, added)
    return added


if __name__ == '__main__':
    logging.basicConfig(level=Config.LOG_LEVEL)
    main()
