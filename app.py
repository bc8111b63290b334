import logging
import os
from datetime import date

from flask import Flask, g, jsonify, request
from flask_login import current_user, login_required, login_user, logout_user
from flask_session import Session
import redis
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from auth import hash_password, login_manager, normalize_email, verify_password
from config import config
from db import database
from db.models import User
from game_logic import InvalidLengthError, evaluate, feedback_tags, is_solved, is_well_formed
from words import EmptyCorpusError, daily_word, is_known_word, load_corpus, random_word, seed_words

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


# Flask app setup
def create_app(config_name=None):
    """Factory function to create and configure Flask app."""
    app = Flask(__name__)
    config_name = config_name or os.environ.get("FLASK_CONFIG", "default")
    app.config.from_object(config[config_name])

    # Redis-backed server-side sessions when configured
    redis_url = app.config.get("SESSION_REDIS_URL")
    if redis_url:
        app.config["SESSION_TYPE"] = "redis"
        app.config["SESSION_REDIS"] = redis.from_url(redis_url)
        app.config["SESSION_PERMANENT"] = False
        app.config["SESSION_USE_SIGNER"] = True
        Session(app)

    # Each app owns its engine and session factory
    engine = database.make_engine(app.config["DATABASE_URL"])
    database.init_database(engine)
    app.extensions["db"] = database.make_session_factory(engine)
    if app.config["SEED_WORDS"]:
        _seed_corpus(app)

    login_manager.init_app(app)
    _register_request_hooks(app)
    _register_error_handlers(app)
    _register_routes(app)
    return app


def _seed_corpus(app):
    db_gen = database.get_db(app.extensions["db"])
    db = next(db_gen)
    try:
        seed_words(db, load_corpus(app.config["WORDS_FILE"]))
    finally:
        db_gen.close()


def _register_request_hooks(app):
    @app.before_request
    def open_session():
        g.db = app.extensions["db"]()

    @app.teardown_appcontext
    def close_session(exc):
        db = g.pop("db", None)
        if db is not None:
            if exc is not None:
                db.rollback()
            db.close()


def _register_error_handlers(app):
    @app.errorhandler(InvalidLengthError)
    def invalid_length(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(EmptyCorpusError)
    def empty_corpus(e):
        logger.error("Word requested but the corpus is empty")
        return jsonify({"error": str(e)}), 503

    @app.errorhandler(SQLAlchemyError)
    def database_error(e):
        g.db.rollback()
        logger.exception("Database error")
        return jsonify({"error": "Server error"}), 500


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text_field(data, name):
    value = data.get(name)
    return value.strip() if isinstance(value, str) else ""


def _register_routes(app):
    # --------------------
    # Game routes
    # --------------------
    @app.route("/api/word", methods=["GET"])
    def get_word():
        """Serve a random secret word."""
        return jsonify(random_word(g.db))

    @app.route("/api/word/daily", methods=["GET"])
    def get_daily_word():
        """Serve today's word, the same for every caller."""
        today = date.today()
        return jsonify({"word": daily_word(g.db, today), "date": today.isoformat()})

    @app.route("/api/guess", methods=["POST"])
    def make_guess():
        """Evaluate a guess against the secret word it was made for."""
        data = _json_body()
        guess = _text_field(data, "guess")
        word = _text_field(data, "word")

        if not guess or not word:
            return jsonify({"error": "Fields 'guess' and 'word' are required"}), 400
        if not is_well_formed(guess) or not is_well_formed(word):
            return jsonify({"error": "Guess and word must be 5 letters"}), 400
        if app.config["REQUIRE_KNOWN_WORDS"] and not is_known_word(g.db, guess):
            return jsonify({"error": "Not in word list"}), 400

        feedback = evaluate(word, guess)
        return jsonify({"feedback": feedback_tags(feedback), "solved": is_solved(feedback)})

    # --------------------
    # Account routes
    # --------------------
    @app.route("/api/register", methods=["POST"])
    def register():
        """Create new user account and start a session."""
        data = _json_body()
        name = _text_field(data, "name")
        email = normalize_email(_text_field(data, "email"))
        password = data.get("password") if isinstance(data.get("password"), str) else ""

        if not name or not email or not password:
            return jsonify({"error": "Name, email and password required"}), 400
        if "@" not in email:
            return jsonify({"error": "Invalid email address"}), 400
        if len(password) < MIN_PASSWORD_LENGTH:
            return jsonify({"error": f"Password must be at least {MIN_PASSWORD_LENGTH} characters"}), 400
        if g.db.scalar(select(User.id).where(User.email == email)) is not None:
            return jsonify({"error": "Email already registered"}), 400

        user = User(name=name, email=email, password_hash=hash_password(password))
        g.db.add(user)
        try:
            g.db.commit()
        except IntegrityError:
            g.db.rollback()
            return jsonify({"error": "Email already registered"}), 400

        login_user(user)
        logger.info("Registered user %s; confirmation notice for %s", user.id, email)
        return jsonify({"message": "User registered successfully", "user": user.to_dict()}), 201

    @app.route("/api/login", methods=["POST"])
    def login():
        """Authenticate user and create session."""
        data = _json_body()
        email = normalize_email(_text_field(data, "email"))
        password = data.get("password") if isinstance(data.get("password"), str) else ""

        user = g.db.scalar(select(User).where(User.email == email)) if email else None
        if user is None or not verify_password(user.password_hash, password):
            logger.info("Failed login for %r", email)
            return jsonify({"error": "Invalid credentials"}), 401

        login_user(user)
        return jsonify({"message": "Logged in", "user": user.to_dict()})

    @app.route("/api/logout", methods=["POST"])
    @login_required
    def logout():
        """End user session."""
        logout_user()
        return jsonify({"success": True})

    @app.route("/api/profile", methods=["GET"])
    @login_required
    def get_profile():
        return jsonify({"name": current_user.name, "email": current_user.email})

    @app.route("/api/profile", methods=["PUT"])
    @login_required
    def update_profile():
        name = _text_field(_json_body(), "name")
        if not name:
            return jsonify({"error": "Name required"}), 400

        current_user.name = name
        g.db.commit()
        return jsonify({"message": "Profile updated successfully", "name": current_user.name})


if __name__ == "__main__":
    config_name = os.environ.get("FLASK_CONFIG", "default")
    logging.basicConfig(
        level=config[config_name].LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(config_name)
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])
