"""Entity package: Book."""

from .access import BookAccess
from .entity import Book
from .table import BookTable

__all__ = ["Book", "BookAccess", "BookTable"]
