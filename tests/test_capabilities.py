"""Tests for the narrow loan capabilities."""

from datetime import datetime, timedelta

from solid_library.capabilities import LoanIssuer, LoanReceiver, LoanRenewer
from solid_library.models import Book, Loan, User


class LendOnlyDesk:
    """A client-facing service that can only lend."""

    def __init__(self) -> None:
        self.lent: list[Loan] = []

    def create_loan(self, book: Book, user: User) -> Loan | None:
        book.available = False
        loan = Loan(book=book, user=user, due_date=datetime.now() + timedelta(days=7))
        self.lent.append(loan)
        return loan


class TestCapabilities:
    """LoanManager offers every capability; narrower services offer fewer."""

    def test_manager_satisfies_all_capabilities(self, manager):
        assert isinstance(manager, LoanIssuer)
        assert isinstance(manager, LoanReceiver)
        assert isinstance(manager, LoanRenewer)

    def test_partial_implementation(self):
        desk = LendOnlyDesk()

        assert isinstance(desk, LoanIssuer)
        assert not isinstance(desk, LoanReceiver)
        assert not isinstance(desk, LoanRenewer)

    def test_client_depends_on_issuer_only(self, book, user):
        def lend_all(issuer: LoanIssuer, books: list[Book], borrower: User) -> list[Loan]:
            return [loan for b in books if (loan := issuer.create_loan(b, borrower)) is not None]

        desk = LendOnlyDesk()

        loans = lend_all(desk, [book], user)

        assert loans == desk.lent
        assert book.available is False
