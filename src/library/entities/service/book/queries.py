"""Named queries registered against the book table."""

from sqlalchemy import bindparam
from sqlmodel import col, select

from src.library.core.services.database.query_catalog import QueryCatalog
from src.library.entities.service.book.table import BookTable

FIND_BY_TITLE = "find_by_title"
BOOK_FIND_ALL = "book_find_all"

# Ad-hoc text, not registered in the catalog
FIND_BY_ISBN_SQL = "SELECT * FROM book WHERE isbn = :isbn"


def register_book_queries(catalog: QueryCatalog) -> None:
    catalog.register(
        FIND_BY_TITLE,
        BookTable,
        select(BookTable).where(col(BookTable.title) == bindparam("title")),
    )
    catalog.register(BOOK_FIND_ALL, BookTable, select(BookTable))
