"""
Authentication utilities: password hashing and the Flask-Login manager.
"""
from flask import g, jsonify
from flask_login import LoginManager
from werkzeug.security import generate_password_hash, check_password_hash

from db.models import User

login_manager = LoginManager()


@login_manager.user_loader
def load_user(user_id):
    """Load user by ID for Flask-Login."""
    return g.db.get(User, int(user_id))


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({"error": "Authentication required"}), 401


def hash_password(password: str) -> str:
    """
    Hash a password using werkzeug's security functions.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        password_hash: Stored password hash
        password: Plain text password to verify

    Returns:
        True if password matches, False otherwise
    """
    return check_password_hash(password_hash, password)


def normalize_email(email: str) -> str:
    return email.strip().lower()
