"""
Application configuration.

Values come from the environment; a local .env file is loaded first so
development settings don't need to be exported by hand.
"""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_flag(name, default="0"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-in-production")
    DATABASE_URL = os.environ.get(
        "DATABASE_URL", "sqlite:///" + os.path.join(BASE_DIR, "db", "word_game.db")
    )
    # Server-side sessions in redis when set, signed cookies otherwise
    SESSION_REDIS_URL = os.environ.get("SESSION_REDIS_URL")
    WORDS_FILE = os.environ.get("WORDS_FILE", os.path.join(BASE_DIR, "data", "words.txt"))
    SEED_WORDS = _env_flag("SEED_WORDS", "1")
    REQUIRE_KNOWN_WORDS = _env_flag("REQUIRE_KNOWN_WORDS")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    TESTING = False
    DEBUG = False


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    DATABASE_URL = "sqlite://"
    SESSION_REDIS_URL = None
    REQUIRE_KNOWN_WORDS = False
    SEED_WORDS = True


class ProductionConfig(Config):
    pass


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}
