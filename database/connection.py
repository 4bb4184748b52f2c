"""
Database connection management for the Bizabode Operations API.
Handles SQLAlchemy engine creation, session management, and connection verification.
"""

import os
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# SQLAlchemy Base for model declarations
Base = declarative_base()

# Engine and SessionLocal are created on first use
engine = None
SessionLocal = None

_database_url = None
_engine_options = {}


def normalize_database_url(url):
    """Rewrite legacy postgres:// URLs to the postgresql:// scheme SQLAlchemy expects."""
    if url and url.startswith('postgres://'):
        return url.replace('postgres://', 'postgresql://', 1)
    return url


def configure_engine(database_url, **engine_options):
    """
    Point the module at a database. Any existing engine is disposed so the
    next call to get_engine() picks up the new URL.
    """
    global _database_url, _engine_options
    reset_engine()
    _database_url = normalize_database_url(database_url)
    _engine_options = dict(engine_options)


def get_engine():
    """Get or create the SQLAlchemy engine."""
    global engine

    if engine is not None:
        return engine

    database_url = _database_url or normalize_database_url(os.environ.get('DATABASE_URL'))
    if not database_url:
        logger.error("DATABASE_URL environment variable is not set!")
        raise RuntimeError(
            "DATABASE_URL not configured. Cannot connect to the database. "
            "Please set the DATABASE_URL environment variable."
        )

    options = dict(_engine_options)
    if database_url in ('sqlite://', 'sqlite:///:memory:'):
        # One shared connection, otherwise every session sees an empty database
        options = {
            'connect_args': {'check_same_thread': False},
            'poolclass': StaticPool,
        }

    try:
        engine = create_engine(database_url, **options)
        logger.info("Database engine created successfully")
        return engine
    except Exception as e:
        logger.error(f"Failed to create database engine: {e}")
        raise RuntimeError(f"Failed to connect to database: {e}")


def get_session_factory():
    """Get or create the session factory."""
    global SessionLocal

    if SessionLocal is not None:
        return SessionLocal

    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return SessionLocal


@contextmanager
def get_db_session():
    """
    Context manager for getting a database session.

    Example:
        with get_db_session() as db:
            items = db.query(InventoryItem).all()
    """
    session_factory = get_session_factory()
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def check_db_connection():
    """
    Verify that the database connection is working.
    Returns True if connection is successful, raises RuntimeError otherwise.
    """
    try:
        eng = get_engine()
        with eng.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        logger.debug("Database connection verified successfully")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        raise RuntimeError(f"Cannot connect to database: {e}")


def init_db():
    """Create all tables that do not exist yet."""
    # Import models to ensure they're registered with Base
    from database import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
    logger.info("Database tables created/verified")


def drop_db():
    """Drop all tables. Used by the test suite."""
    from database import models  # noqa: F401

    Base.metadata.drop_all(bind=get_engine())


def reset_engine():
    """Dispose the current engine and forget the session factory."""
    global engine, SessionLocal
    if engine is not None:
        engine.dispose()
    engine = None
    SessionLocal = None
