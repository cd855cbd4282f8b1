"""Exact-match query strategies.

The same singleton lookup can be expressed three ways: as a precompiled named
query, as a predicate tree built at call time, or as ad-hoc SQL text. Each
strategy returns exactly one row and lets SQLAlchemy raise ``NoResultFound``
or ``MultipleResultsFound`` otherwise.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from loguru import logger
from sqlalchemy import and_, bindparam, text
from sqlalchemy.engine import ScalarResult
from sqlmodel import Session, SQLModel, col, select

from src.library.core.services.database.query_catalog import (
    QueryCatalog,
    statement_parameters,
)

TableT = TypeVar("TableT", bound=SQLModel)


def require_values(criteria: Mapping[str, Any]) -> None:
    """Exact matching against NULL never matches a row, so reject it up front."""
    if not criteria:
        raise ValueError("Exact match requires at least one criterion")
    null_fields = sorted(name for name, value in criteria.items() if value is None)
    if null_fields:
        raise ValueError(f"Exact match requires non-null values for {null_fields}")


class ExactMatchStrategy(ABC, Generic[TableT]):
    """One query-execution interface for singleton lookups."""

    @abstractmethod
    def execute(self, session: Session, criteria: Mapping[str, Any]) -> ScalarResult[TableT]:
        """Run the lookup and return the raw scalar result."""

    def find_one(self, session: Session, **criteria: Any) -> TableT:
        require_values(criteria)
        return self.execute(session, criteria).one()


class PrecompiledExactMatch(ExactMatchStrategy[TableT]):
    """Executes a named query from the catalog."""

    def __init__(self, catalog: QueryCatalog, query_name: str) -> None:
        self._query = catalog.get(query_name)

    def execute(self, session: Session, criteria: Mapping[str, Any]) -> ScalarResult[TableT]:
        logger.debug("Executing named query {}", self._query.name)
        return session.exec(self._query.statement, params=self._query.bind(criteria))


class DynamicExactMatch(ExactMatchStrategy[TableT]):
    """Builds an AND of per-field equality predicates at call time."""

    def __init__(self, table: type[TableT], fields: Iterable[str]) -> None:
        self._table = table
        self._fields = frozenset(fields)
        unknown = sorted(self._fields - set(table.model_fields))
        if unknown:
            raise ValueError(f"{table.__name__} has no fields {unknown}")

    def execute(self, session: Session, criteria: Mapping[str, Any]) -> ScalarResult[TableT]:
        if set(criteria) != self._fields:
            raise ValueError(
                f"Expected criteria {sorted(self._fields)}, got {sorted(criteria)}"
            )
        predicates = [
            col(getattr(self._table, field)) == bindparam(field) for field in criteria
        ]
        statement = select(self._table).where(and_(*predicates))
        logger.debug("Executing dynamic lookup on {} by {}", self._table.__name__, sorted(criteria))
        return session.exec(statement, params=dict(criteria))


class TextExactMatch(ExactMatchStrategy[TableT]):
    """Maps ad-hoc SQL text with named parameters onto ``table`` rows."""

    def __init__(self, table: type[TableT], sql: str) -> None:
        self._table = table
        clause = text(sql)
        self._statement = select(table).from_statement(clause)
        self._parameters = statement_parameters(clause)

    def execute(self, session: Session, criteria: Mapping[str, Any]) -> ScalarResult[TableT]:
        if set(criteria) != self._parameters:
            raise ValueError(
                f"Expected parameters {sorted(self._parameters)}, got {sorted(criteria)}"
            )
        logger.debug("Executing text lookup on {}", self._table.__name__)
        return session.exec(self._statement, params=dict(criteria)).scalars()
