"""
Loan management for the SOLID Library demo.

``LoanManager`` runs the lending workflow:
1. create_loan: lend an available book and notify the borrower
2. return_loan: close a loan, computing a fine if it is late
3. renew_loan: push an active loan's due date out by one loan period

The manager depends only on the ``FinePolicy`` and ``NotificationChannel``
abstractions. Concrete policies and channels are chosen by whoever builds
the manager and passed in; the manager never creates them itself.

Expected refusals (book unavailable, loan already returned, renewal not
allowed) are not errors: they are logged as warnings and signaled by the
return value.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from .fines import FinePolicy
from .models import Book, Loan, User
from .models.loan import to_local_naive
from .notifications import NotificationChannel

logger = logging.getLogger(__name__)

DEFAULT_LOAN_PERIOD = timedelta(days=14)
DEFAULT_MAX_RENEWALS = 3


class LoanManager:
    """Creates, returns and renews loans, keeping a history of every loan."""

    def __init__(
        self,
        fine_policy: FinePolicy,
        notifier: NotificationChannel,
        *,
        loan_period: timedelta = DEFAULT_LOAN_PERIOD,
        max_renewals: int = DEFAULT_MAX_RENEWALS,
        due_date_format: str = "%Y-%m-%d",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        if loan_period <= timedelta(0):
            raise ValueError("Loan period must be positive")
        if max_renewals < 0:
            raise ValueError("Max renewals cannot be negative")

        self._fine_policy = fine_policy
        self._notifier = notifier
        self._loan_period = loan_period
        self._max_renewals = max_renewals
        self._due_date_format = due_date_format
        self._clock = clock
        # Append-only, in creation order
        self._loans: list[Loan] = []

    @property
    def fine_policy(self) -> FinePolicy:
        return self._fine_policy

    @property
    def notifier(self) -> NotificationChannel:
        return self._notifier

    @property
    def loans(self) -> tuple[Loan, ...]:
        """Every loan this manager has created, oldest first."""
        return tuple(self._loans)

    def active_loans(self) -> list[Loan]:
        """Loans that have not been returned yet, oldest first."""
        return [loan for loan in self._loans if not loan.returned]

    def create_loan(self, book: Book, user: User) -> Loan | None:
        """
        Lend ``book`` to ``user``.

        Returns:
            The new loan, or None if the book is not available. A refused
            loan changes nothing and sends no notification.
        """
        if not book.available:
            logger.warning("Book '%s' is not available", book.title)
            return None

        now = self._now()
        book.available = False
        loan = Loan(book=book, user=user, loan_date=now, due_date=now + self._loan_period)
        self._loans.append(loan)

        message = (
            f"You borrowed '{book.title}'. "
            f"Due date: {loan.due_date.strftime(self._due_date_format)}"
        )
        self._notify(message, user)

        logger.info("Loan created: '%s' for %s", book.title, user.name)
        return loan

    def return_loan(self, loan: Loan) -> None:
        """
        Close ``loan`` and make its book available again.

        A late return computes a fine with the configured policy. The fine
        is reported in the log only; it is not stored or charged. Returning
        an already returned loan does nothing.
        """
        if loan.returned:
            logger.warning("Loan of '%s' was already returned", loan.book.title)
            return

        now = self._now()
        if now > loan.due_date:
            days_late = loan.days_late(now)
            fine = self._fine_policy.compute(days_late)
            logger.info("Returned %d day(s) late. Fine: %d", days_late, fine)
        else:
            logger.info("Returned on time")

        loan.returned = True
        loan.book.available = True
        logger.info("'%s' returned by %s", loan.book.title, loan.user.name)

    def renew_loan(self, loan: Loan) -> bool:
        """
        Extend an active loan by one loan period.

        Returns:
            True if renewed. False, with nothing changed, if the loan is
            returned, overdue, or has used all its renewals.
        """
        if loan.returned:
            logger.warning("Cannot renew '%s': loan already returned", loan.book.title)
            return False

        if loan.is_overdue(self._now()):
            logger.warning("Cannot renew '%s': loan is overdue", loan.book.title)
            return False

        if loan.renewal_count >= self._max_renewals:
            logger.warning(
                "Cannot renew '%s': renewal limit (%d) reached",
                loan.book.title,
                self._max_renewals,
            )
            return False

        loan.due_date = loan.due_date + self._loan_period
        loan.renewal_count += 1

        message = (
            f"Your loan of '{loan.book.title}' was renewed. "
            f"New due date: {loan.due_date.strftime(self._due_date_format)}"
        )
        self._notify(message, loan.user)

        logger.info("Loan renewed: '%s' for %s", loan.book.title, loan.user.name)
        return True

    def _now(self) -> datetime:
        return to_local_naive(self._clock())

    def _notify(self, message: str, user: User) -> None:
        # Fire and forget: a refused send is logged, never retried
        if not self._notifier.send(message, user.name):
            logger.warning("Notification to %s was not accepted", user.name)
