"""Entity package: Author."""

from .access import AuthorAccess
from .entity import Author
from .table import AuthorTable

__all__ = ["Author", "AuthorAccess", "AuthorTable"]
