from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from sqlalchemy import Engine, StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.library.core.services.database.db_manage import DbManageService
from src.library.core.services.database.db_session import DbSessionService
from src.library.core.services.database.query_catalog import QueryCatalog
from src.library.entities import AuthorAccess, BookAccess, build_query_catalog
from src.library.runtime.config.config_data import AppConfig, ConfigData


@pytest.fixture
def library_config() -> ConfigData:
    return ConfigData(app=AppConfig(environment="test"))


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    DbManageService(engine).create_all()
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_service(engine: Engine, library_config: ConfigData) -> DbSessionService:
    return DbSessionService(config=library_config, engine=engine)


@pytest.fixture
def catalog() -> QueryCatalog:
    return build_query_catalog()


@pytest.fixture
def author_access(session_service: DbSessionService, catalog: QueryCatalog) -> AuthorAccess:
    return AuthorAccess(session_service, catalog)


@pytest.fixture
def book_access(session_service: DbSessionService, catalog: QueryCatalog) -> BookAccess:
    return BookAccess(session_service, catalog)


@pytest.fixture
def seed(engine: Engine) -> Callable[..., list[SQLModel]]:
    """Insert rows directly, bypassing the access objects, and commit them."""

    def _seed(*rows: SQLModel) -> list[SQLModel]:
        with Session(engine, expire_on_commit=False) as session:
            session.add_all(rows)
            session.commit()
        return list(rows)

    return _seed
