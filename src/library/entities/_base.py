from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base domain entity identified by a store-assigned surrogate key."""

    id: int | None = PydanticField(
        default=None,
        description="Surrogate key assigned by the store on first persist",
    )

    @property
    def is_transient(self) -> bool:
        """True until the entity has been persisted and carries an identity."""
        return self.id is None


class EntityTable(SQLModel, table=False):
    """Base persistence model with an auto-incrementing integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Surrogate key assigned by the store on first persist",
    )
