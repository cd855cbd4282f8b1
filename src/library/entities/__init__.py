"""Entities module with hybrid entity-centric structure.

This module organizes entities by business concept rather than technical layer.
Each entity has its own package containing:
- entity.py: Domain model handed to callers
- table.py: Database persistence model
- queries.py: Named queries registered in the query catalog
- access.py: Data access object
"""

from .catalog import build_query_catalog
from .service.author import Author, AuthorAccess, AuthorTable
from .service.book import Book, BookAccess, BookTable

__all__ = [
    "Author",
    "AuthorAccess",
    "AuthorTable",
    "Book",
    "BookAccess",
    "BookTable",
    "build_query_catalog",
]
