"""
Book model for the SOLID Library demo.

A book is a passive catalog entry. Its identifying fields never change
after creation; only the ``available`` flag moves, and only the loan
manager moves it (on loan and on return).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Book(BaseModel):
    """A single copy of a book in the catalog."""

    title: str = Field(
        ...,
        description="The title of the book",
        min_length=1,
        max_length=500,
        examples=["1984", "One Hundred Years of Solitude"],
    )

    author: str = Field(
        ...,
        description="Name of the book's author",
        min_length=1,
        max_length=200,
        examples=["George Orwell", "Gabriel García Márquez"],
    )

    isbn: str = Field(
        ...,
        description="International Standard Book Number, kept as given",
        min_length=1,
        frozen=True,
        examples=["978-0-452-28423-4", "978-84-376-0494-7"],
    )

    available: bool = Field(
        default=True,
        description="Whether the book can be lent right now",
    )

    @field_validator("title", "author")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """Titles and authors must contain more than whitespace."""
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v

    model_config = ConfigDict(
        # Re-validate on assignment so `available` stays a real bool
        validate_assignment=True,
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "1984",
                "author": "George Orwell",
                "isbn": "978-0-452-28423-4",
                "available": True,
            }
        },
    )
