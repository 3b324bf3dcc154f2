"""Database connections package."""

from newsapi.db.postgres import create_engine, create_session_factory, init_db

__all__ = ["create_engine", "create_session_factory", "init_db"]
