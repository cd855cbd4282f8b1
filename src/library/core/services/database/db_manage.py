"""Schema management for local setup and tests."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def _register_tables(self) -> None:
        from src.library.entities.service.author.table import AuthorTable  # noqa: F401
        from src.library.entities.service.book.table import BookTable  # noqa: F401

    def create_all(self) -> None:
        """Create all database tables."""
        self._register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        self._register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")
