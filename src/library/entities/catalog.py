"""Wiring for the query catalog shared by the access objects."""

from src.library.core.services.database.query_catalog import QueryCatalog
from src.library.entities.service.author.queries import register_author_queries
from src.library.entities.service.book.queries import register_book_queries


def build_query_catalog() -> QueryCatalog:
    """Return a catalog holding every named query the access objects use."""
    catalog = QueryCatalog()
    register_author_queries(catalog)
    register_book_queries(catalog)
    return catalog
