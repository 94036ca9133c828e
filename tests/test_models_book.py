"""
Tests for the Book model.

These tests verify that books:
1. Start out available
2. Keep their ISBN fixed
3. Reject blank or malformed data
"""

import pytest
from pydantic import ValidationError

from solid_library.models import Book


class TestBook:
    """Test suite for Book model."""

    def test_create_valid_book(self):
        """New books are available by default."""
        book = Book(title="1984", author="George Orwell", isbn="978-0-452-28423-4")

        assert book.title == "1984"
        assert book.author == "George Orwell"
        assert book.isbn == "978-0-452-28423-4"
        assert book.available is True

    def test_availability_is_mutable(self, book):
        book.available = False
        assert book.available is False

        book.available = True
        assert book.available is True

    def test_isbn_is_frozen(self, book):
        """The ISBN identifies the book and cannot be reassigned."""
        with pytest.raises(ValidationError):
            book.isbn = "978-0-000-00000-0"

        assert book.isbn == "978-0-452-28423-4"

    def test_whitespace_is_stripped(self):
        book = Book(title="  1984 ", author=" George Orwell", isbn="978-0-452-28423-4")

        assert book.title == "1984"
        assert book.author == "George Orwell"

    @pytest.mark.parametrize("field", ["title", "author", "isbn"])
    def test_blank_fields_rejected(self, field):
        data = {"title": "1984", "author": "George Orwell", "isbn": "978-0-452-28423-4"}
        data[field] = "   "

        with pytest.raises(ValidationError):
            Book(**data)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            Book(title="1984", author="George Orwell", isbn="1", genre="Dystopia")

    def test_assignment_is_validated(self, book):
        with pytest.raises(ValidationError):
            book.available = "maybe"
