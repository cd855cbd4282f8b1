"""Named queries registered against the author table."""

from sqlalchemy import bindparam
from sqlmodel import col, select

from src.library.core.services.database.query_catalog import QueryCatalog
from src.library.entities.service.author.table import AuthorTable

FIND_BY_NAME = "find_by_name"
AUTHOR_FIND_ALL = "author_find_all"


def register_author_queries(catalog: QueryCatalog) -> None:
    catalog.register(
        FIND_BY_NAME,
        AuthorTable,
        select(AuthorTable).where(
            col(AuthorTable.first_name) == bindparam("first_name"),
            col(AuthorTable.last_name) == bindparam("last_name"),
        ),
    )
    catalog.register(AUTHOR_FIND_ALL, AuthorTable, select(AuthorTable))
