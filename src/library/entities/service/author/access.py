"""Data access for authors."""

from src.library.core.services.database.db_session import DbSessionService
from src.library.core.services.database.entity_access import EntityAccess
from src.library.core.services.database.query_catalog import QueryCatalog
from src.library.core.services.database.query_strategies import (
    DynamicExactMatch,
    PrecompiledExactMatch,
)
from src.library.entities.service.author.entity import Author
from src.library.entities.service.author.queries import AUTHOR_FIND_ALL, FIND_BY_NAME
from src.library.entities.service.author.table import AuthorTable


class AuthorAccess(EntityAccess[Author, AuthorTable]):
    """CRUD plus name lookups for authors."""

    entity_type = Author
    table_type = AuthorTable
    find_all_query = AUTHOR_FIND_ALL

    def __init__(self, session_service: DbSessionService, catalog: QueryCatalog) -> None:
        super().__init__(session_service, catalog)
        self.by_name = PrecompiledExactMatch(catalog, FIND_BY_NAME)
        self.by_name_criteria = DynamicExactMatch(AuthorTable, ("first_name", "last_name"))

    def find_by_name(self, first_name: str, last_name: str) -> Author:
        return self.find_one(self.by_name, first_name=first_name, last_name=last_name)

    def find_by_name_criteria(self, first_name: str, last_name: str) -> Author:
        return self.find_one(
            self.by_name_criteria, first_name=first_name, last_name=last_name
        )

    def list_by_last_name_like(self, last_name: str) -> list[Author]:
        return self.find_by_prefix("last_name", last_name)
