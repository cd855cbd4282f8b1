"""Data access for books."""

from src.library.core.services.database.db_session import DbSessionService
from src.library.core.services.database.entity_access import EntityAccess
from src.library.core.services.database.query_catalog import QueryCatalog
from src.library.core.services.database.query_strategies import (
    DynamicExactMatch,
    PrecompiledExactMatch,
    TextExactMatch,
)
from src.library.entities.service.book.entity import Book
from src.library.entities.service.book.queries import (
    BOOK_FIND_ALL,
    FIND_BY_ISBN_SQL,
    FIND_BY_TITLE,
)
from src.library.entities.service.book.table import BookTable


class BookAccess(EntityAccess[Book, BookTable]):
    """CRUD plus title and ISBN lookups for books."""

    entity_type = Book
    table_type = BookTable
    find_all_query = BOOK_FIND_ALL

    def __init__(self, session_service: DbSessionService, catalog: QueryCatalog) -> None:
        super().__init__(session_service, catalog)
        self.by_title = PrecompiledExactMatch(catalog, FIND_BY_TITLE)
        self.by_title_criteria = DynamicExactMatch(BookTable, ("title",))
        self.by_isbn = TextExactMatch(BookTable, FIND_BY_ISBN_SQL)

    def find_by_title(self, title: str) -> Book:
        return self.find_one(self.by_title, title=title)

    def find_by_title_criteria(self, title: str) -> Book:
        return self.find_one(self.by_title_criteria, title=title)

    def find_by_isbn(self, isbn: str) -> Book:
        return self.find_one(self.by_isbn, isbn=isbn)
