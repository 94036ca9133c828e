"""
Loan model for the SOLID Library demo.

A loan links one book to one user for a bounded period. Loans have two
states: active (``returned=False``) and returned (``returned=True``).
The only transition is active -> returned, performed by the loan
manager; loans are never deleted.

The ``book`` and ``user`` fields hold the very instances passed in, not
copies, so marking a book available through ``loan.book`` is visible to
every other holder of that book.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .book import Book
from .user import User


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class Loan(BaseModel):
    """A record of one book lent to one user."""

    book: Book = Field(
        ...,
        description="The book on loan",
    )

    user: User = Field(
        ...,
        description="The borrowing user",
    )

    loan_date: datetime = Field(
        default_factory=datetime.now,
        description="When the book was lent",
        frozen=True,
    )

    due_date: datetime = Field(
        ...,
        description="When the book should be back; may be overwritten",
    )

    returned: bool = Field(
        default=False,
        description="Whether the loan has been closed",
    )

    renewal_count: int = Field(
        default=0,
        description="Number of times this loan has been renewed",
        ge=0,
    )

    @field_validator("loan_date", "due_date")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        """Store all loan times as naive local time, like the default clock."""
        return to_local_naive(v)

    def is_overdue(self, at: datetime) -> bool:
        """Check whether an active loan is past its due date at ``at``."""
        if self.returned:
            return False
        return to_local_naive(at) > self.due_date

    def days_late(self, at: datetime) -> int:
        """Whole days between the due date and ``at``, or 0 if not late."""
        at = to_local_naive(at)
        if at <= self.due_date:
            return 0
        return (at - self.due_date).days

    model_config = ConfigDict(
        # due_date may be overwritten (e.g. back-dated), but stays a datetime
        validate_assignment=True,
        extra="forbid",
    )
