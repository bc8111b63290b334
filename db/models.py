"""
Database models for the word game.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import declarative_base
from flask_login import UserMixin
from datetime import datetime

Base = declarative_base()


class User(UserMixin, Base):
    """Registered player."""
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email}

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"


class Word(Base):
    """Playable secret word, stored upper-case."""
    __tablename__ = 'words'

    id = Column(Integer, primary_key=True)
    word = Column(String(5), unique=True, nullable=False)

    def __repr__(self):
        return f"<Word(id={self.id}, word='{self.word}')>"
