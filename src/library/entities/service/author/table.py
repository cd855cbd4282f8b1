"""Author database table model."""

from sqlmodel import Field

from src.library.entities._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors.

    This represents how the Author entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "author"  # type: ignore[assignment]

    first_name: str
    last_name: str = Field(index=True)
