"""
Narrow loan capabilities.

Each protocol names a single thing a client may ask of a loan service.
Code that only lends books depends on ``LoanIssuer`` and never sees the
return or renewal operations. ``LoanManager`` satisfies all three.
"""

from typing import Protocol, runtime_checkable

from .models import Book, Loan, User


@runtime_checkable
class LoanIssuer(Protocol):
    """Something that can lend a book to a user."""

    def create_loan(self, book: Book, user: User) -> Loan | None: ...


@runtime_checkable
class LoanReceiver(Protocol):
    """Something that can take a lent book back."""

    def return_loan(self, loan: Loan) -> None: ...


@runtime_checkable
class LoanRenewer(Protocol):
    """Something that can extend an active loan."""

    def renew_loan(self, loan: Loan) -> bool: ...
