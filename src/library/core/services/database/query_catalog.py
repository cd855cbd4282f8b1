"""Registry of precompiled named queries, keyed by logical name."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from loguru import logger
from sqlalchemy.sql import Executable
from sqlmodel import SQLModel


@dataclass(frozen=True)
class NamedQuery:
    """A statement registered ahead of time and bound by parameter name at call time."""

    name: str
    table: type[SQLModel]
    statement: Executable
    parameters: frozenset[str]

    def bind(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Validate ``params`` against the declared parameters and return them."""
        supplied = set(params)
        missing = self.parameters - supplied
        unexpected = supplied - self.parameters
        if missing or unexpected:
            raise ValueError(
                f"Query '{self.name}' expects parameters {sorted(self.parameters)}; "
                f"missing {sorted(missing)}, unexpected {sorted(unexpected)}"
            )
        return dict(params)


def statement_parameters(statement: Executable) -> frozenset[str]:
    """Names of the bound parameters a statement declares."""
    return frozenset(statement.compile().params)


class QueryCatalog:
    """Named queries registered against each table."""

    def __init__(self) -> None:
        self._queries: dict[str, NamedQuery] = {}

    def register(
        self, name: str, table: type[SQLModel], statement: Executable
    ) -> NamedQuery:
        if name in self._queries:
            raise ValueError(f"Query '{name}' is already registered")
        query = NamedQuery(
            name=name,
            table=table,
            statement=statement,
            parameters=statement_parameters(statement),
        )
        self._queries[name] = query
        logger.debug(
            "Registered named query {} on {} with parameters {}",
            name,
            table.__name__,
            sorted(query.parameters),
        )
        return query

    def get(self, name: str) -> NamedQuery:
        try:
            return self._queries[name]
        except KeyError:
            raise KeyError(f"No query registered under '{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self._queries

    def __iter__(self) -> Iterator[str]:
        return iter(self._queries)

    def __len__(self) -> int:
        return len(self._queries)
