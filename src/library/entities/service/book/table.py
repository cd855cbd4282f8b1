"""Book database table model."""

from sqlmodel import Field

from src.library.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "book"  # type: ignore[assignment]

    title: str = Field(index=True)
    isbn: str = Field(index=True)
    publisher: str | None = None
    author_id: int | None = None
