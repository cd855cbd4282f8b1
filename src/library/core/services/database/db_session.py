"""Database engine and session factory used by the access objects."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import Engine, StaticPool, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.library.core.exceptions import StoreUnavailableError
from src.library.runtime.config.config_data import ConfigData
from src.library.runtime.context import get_config


class DbSessionService:
    """Builds the shared engine and hands out one short-lived session per call."""

    def __init__(self, config: ConfigData | None = None, engine: Engine | None = None):
        self._config = config or get_config()
        if engine is not None:
            logger.info("Using injected database engine {}", engine.url)
            self._engine = engine
            return

        db_config = self._config.database
        logger.info(
            "Configuring database engine for environment: {}",
            self._config.app.environment,
        )
        engine_kwargs = self._get_engine_kwargs(self._config)
        try:
            self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        except (SQLAlchemyError, ImportError) as e:
            raise StoreUnavailableError(f"Could not create database engine: {e}", e) from e

        logger.info("Database engine initialized for {}", self._engine.url)

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_engine_kwargs(self, config: ConfigData) -> dict[str, Any]:
        """Get database-specific engine and connection arguments."""
        db_config = config.database
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "pool_pre_ping": True,  # Validate connections before use
        }

        if db_config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": 20,  # Lock timeout
            }
            if make_url(db_config.url).database in (None, "", ":memory:"):
                # One shared connection, otherwise every session sees an empty database.
                # Concurrent sessions would share its transaction too, so in-memory
                # stores are for tests and single-threaded use only.
                engine_kwargs["poolclass"] = StaticPool

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
            }
        )
        if make_url(db_config.url).get_backend_name() == "postgresql":
            engine_kwargs["connect_args"] = {
                "application_name": f"{config.app.environment}_library",
                "connect_timeout": 30,
            }
        return engine_kwargs

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        try:
            return Session(
                self._engine,
                expire_on_commit=False,  # Entities are read after commit
                autoflush=True,
            )
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Could not open a session: {e}", e) from e

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a fresh session and close it on every exit path.

        Unlike a unit-of-work that commits on exit, the scope never commits:
        writers demarcate their own transactions with ``run_in_transaction``.
        Anything still open when the body fails is rolled back before close.
        """
        db = self.get_session()
        try:
            yield db
        except Exception:
            if db.in_transaction():
                db.rollback()
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error(
                "Database health check failed",
                extra={
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()
