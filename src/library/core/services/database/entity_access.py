"""Generic access object shared by every entity type.

Each public operation opens its own session through the session factory,
runs its body, and closes the session on every exit path. Writes run inside
``run_in_transaction`` so a failure is rolled back before it reaches the
caller, and SQLAlchemy failures are surfaced as data-access errors.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from loguru import logger
from sqlalchemy import bindparam
from sqlmodel import Session, SQLModel, col, select

from src.library.core.exceptions import NotFoundError
from src.library.core.services.database.db_session import DbSessionService
from src.library.core.services.database.db_utils import run_in_transaction, translate_errors
from src.library.core.services.database.query_catalog import QueryCatalog
from src.library.core.services.database.query_strategies import (
    ExactMatchStrategy,
    require_values,
)

if TYPE_CHECKING:
    from src.library.entities._base import Entity

EntityT = TypeVar("EntityT", bound="Entity")
TableT = TypeVar("TableT", bound=SQLModel)


class EntityAccess(Generic[EntityT, TableT]):
    """CRUD and lookup operations for one entity/table pair."""

    entity_type: type[Entity]
    table_type: type[SQLModel]
    find_all_query: str

    def __init__(self, session_service: DbSessionService, catalog: QueryCatalog) -> None:
        self._sessions = session_service
        self._catalog = catalog

    @property
    def entity_name(self) -> str:
        return self.entity_type.__name__

    @contextmanager
    def _unit_of_work(self) -> Iterator[Session]:
        with self._sessions.session_scope() as session, translate_errors(self.entity_name):
            yield session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _to_row(self, entity: EntityT) -> TableT:
        return self.table_type.model_validate(entity.model_dump())  # type: ignore[return-value]

    def get_by_id(self, entity_id: int) -> EntityT:
        """Load an entity by primary key, raising NotFoundError when absent."""
        with self._unit_of_work() as session:
            row = session.get(self.table_type, entity_id)
            if row is None:
                raise NotFoundError(self.entity_name, entity_id)
            return self._to_entity(row)

    def find_one(self, strategy: ExactMatchStrategy, **criteria: Any) -> EntityT:
        """Run a singleton lookup; zero rows or several rows are errors."""
        require_values(criteria)
        with self._unit_of_work() as session:
            return self._to_entity(strategy.find_one(session, **criteria))

    def find_by_prefix(self, field: str, prefix: str) -> list[EntityT]:
        """Entities whose ``field`` starts with ``prefix``, in storage order.

        ``prefix`` is bound as-is with a trailing ``%``; LIKE wildcards in it
        are not escaped and case sensitivity follows the store's collation.
        """
        if field not in self.table_type.model_fields:
            raise ValueError(f"{self.table_type.__name__} has no field '{field}'")
        statement = select(self.table_type).where(
            col(getattr(self.table_type, field)).like(bindparam(field))
        )
        with self._unit_of_work() as session:
            rows = session.exec(statement, params={field: f"{prefix}%"}).all()
            return [self._to_entity(row) for row in rows]

    def find_all(self) -> list[EntityT]:
        query = self._catalog.get(self.find_all_query)
        with self._unit_of_work() as session:
            logger.debug("Executing named query {}", query.name)
            rows = session.exec(query.statement, params=query.bind({})).all()
            return [self._to_entity(row) for row in rows]

    def save_new(self, entity: EntityT) -> EntityT:
        """Insert a transient entity and return it with its assigned identity."""
        if not entity.is_transient:
            raise ValueError(
                f"{self.entity_name} already has identity {entity.id}; use update()"
            )

        def insert(session: Session) -> EntityT:
            row = self._to_row(entity)
            session.add(row)
            # Flush before commit so the store-assigned identity is visible now
            session.flush()
            return self._to_entity(row)

        with self._unit_of_work() as session:
            created = run_in_transaction(session, insert)
        logger.info("Created {} with id {}", self.entity_name, created.id)
        return created

    def update(self, entity: EntityT) -> EntityT:
        """Merge a detached entity into its persistent row and return the reloaded state."""
        if entity.id is None:
            raise ValueError(f"Cannot update a {self.entity_name} without an identity")

        def merge(session: Session) -> EntityT:
            if session.get(self.table_type, entity.id) is None:
                raise NotFoundError(self.entity_name, entity.id)
            session.merge(self._to_row(entity))
            session.flush()
            session.expunge_all()
            row = session.get(self.table_type, entity.id)
            if row is None:
                raise NotFoundError(self.entity_name, entity.id)
            return self._to_entity(row)

        with self._unit_of_work() as session:
            updated = run_in_transaction(session, merge)
        logger.info("Updated {} with id {}", self.entity_name, updated.id)
        return updated

    def delete_by_id(self, entity_id: int) -> None:
        def remove(session: Session) -> None:
            row = session.get(self.table_type, entity_id)
            if row is None:
                raise NotFoundError(self.entity_name, entity_id)
            session.delete(row)
            session.flush()

        with self._unit_of_work() as session:
            run_in_transaction(session, remove)
        logger.info("Deleted {} with id {}", self.entity_name, entity_id)
