"""
Database setup - engine, session factory and the declarative base.

The engine is built from Settings.database_url. Each request gets its own
session through the get_db dependency so that services never reach for a
global session.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from recipebox.config import get_settings

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """Create an engine, enabling cross-thread use for SQLite."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = create_db_engine(get_settings().database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Import entities so they are registered on Base.metadata
    from recipebox.models import entities  # noqa: F401

    Base.metadata.create_all(bind=engine if bind is None else bind)


def get_db():
    """Yield a database session and close it when the request is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
