"""
SOLID Library models.

Pydantic models for the three catalog entities:
- Book: a lendable copy with an availability flag
- User: an immutable borrower
- Loan: one book lent to one user
"""

from .book import Book
from .loan import Loan
from .user import User

__all__ = [
    "Book",
    "Loan",
    "User",
]
