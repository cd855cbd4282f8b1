"""Entity: Book."""

from pydantic import Field

from src.library.entities._base import Entity


class Book(Entity):
    """Book entity representing a title in the catalog.

    ``author_id`` is a plain reference; this layer does not load or enforce
    the association.
    """

    title: str = Field(description="Title")
    isbn: str = Field(description="ISBN, expected to be unique per catalog")
    publisher: str | None = Field(default=None, description="Publisher")
    author_id: int | None = Field(default=None, description="Identity of the author")
