"""Entity: Author."""

from pydantic import Field

from src.library.entities._base import Entity


class Author(Entity):
    """Author entity representing a writer in the catalog.

    This is the domain model handed to callers. Instances are detached from
    any session: the access layer copies row values into them before the
    session that loaded the row is closed.
    """

    first_name: str = Field(description="Author's first name")
    last_name: str = Field(description="Author's last name")
