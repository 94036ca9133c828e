"""
SOLID Library.

A small library-loan workflow that illustrates the five SOLID design
principles with books, users, loans, fines and notifications.

Key Components:
- models: Pydantic models for books, users and loans
- fines: pluggable fine policies (open/closed)
- notifications: interchangeable notification channels (Liskov substitution)
- capabilities: narrow loan protocols (interface segregation)
- loans: the loan manager (dependency inversion)
- config: settings with Pydantic v2
"""

__version__ = "0.1.0"

from .fines import (
    DailyRateFinePolicy,
    DiscountedFinePolicy,
    FinePolicy,
    StandardFinePolicy,
    WaivedFinePolicy,
)
from .loans import LoanManager
from .models import Book, Loan, User
from .notifications import (
    EmailNotificationChannel,
    NotificationChannel,
    SmsNotificationChannel,
)

__all__ = [
    "Book",
    "DailyRateFinePolicy",
    "DiscountedFinePolicy",
    "EmailNotificationChannel",
    "FinePolicy",
    "Loan",
    "LoanManager",
    "NotificationChannel",
    "SmsNotificationChannel",
    "StandardFinePolicy",
    "User",
    "WaivedFinePolicy",
    "__version__",
]
