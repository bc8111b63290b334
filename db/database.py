"""
Database connection and session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from config import Config
from db.models import Base


def make_engine(url=None):
    """Create an engine for `url`, defaulting to the configured database."""
    url = url or Config.DATABASE_URL
    kwargs = {}
    if url in ('sqlite://', 'sqlite:///:memory:'):
        # One shared connection, otherwise every session sees an empty database
        kwargs = {
            'connect_args': {'check_same_thread': False},
            'poolclass': StaticPool,
        }
    return create_engine(url, echo=False, **kwargs)


def make_session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


def get_db(session_factory):
    """Get database session."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


def init_database(engine):
    """Initialize database tables."""
    Base.metadata.create_all(engine)
