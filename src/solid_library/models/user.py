"""
User model for the SOLID Library demo.

Users are immutable once created: the model is frozen, which also makes
instances hashable so they can key dictionaries and sets.
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A library member who can borrow books."""

    name: str = Field(
        ...,
        description="Display name, also used as the notification recipient",
        min_length=1,
        max_length=200,
        examples=["Ana García", "Carlos López"],
    )

    user_id: str = Field(
        ...,
        description="Unique identifier for the user",
        min_length=1,
        examples=["U001", "U002"],
    )

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={"example": {"name": "Ana García", "user_id": "U001"}},
    )
