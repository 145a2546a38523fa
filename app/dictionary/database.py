# -*- coding: utf-8 -*-
"""
Engine and session factory for the dictionary database
"""
from pathlib import Path

from loguru import logger
from sqlalchemy import create_engine, Engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dictionary.models import Base


def _ensure_sqlite_file(url) -> None:
    if not url.get_backend_name() == "sqlite":
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_db_engine(database_url: str) -> Engine:
    """Create the engine, making sure the directory of a SQLite file exists"""
    url = make_url(database_url)
    _ensure_sqlite_file(url)

    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        # In-memory SQLite lives and dies with its single connection
        return create_engine(
            url, connect_args={"check_same_thread": False}, poolclass=StaticPool
        )

    return create_engine(url, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_database(engine: Engine) -> None:
    """Initialize database tables"""
    try:
        Base.metadata.create_all(bind=engine)
        logger.success("Database tables initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database tables: {e}")
        raise
