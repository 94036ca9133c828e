"""Test configuration and fixtures for the SOLID Library.

Fixtures provide:
1. A controllable clock so "now" is deterministic
2. Test doubles for the fine policy and notification channel
3. Fresh books and users for every test
4. Configuration isolation from the real environment
"""

import os
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest

from solid_library.config import reset_config
from solid_library.fines import StandardFinePolicy
from solid_library.loans import LoanManager
from solid_library.models import Book, User

from .doubles import FixedClock, RecordingChannel, SpyFinePolicy

# === Environment Fixtures ===


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Keep tests independent of the caller's environment and .env files."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.upper().startswith("SOLID_LIBRARY_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


# === Domain Fixtures ===


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 1, 10, 30))


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def fine_policy() -> SpyFinePolicy:
    return SpyFinePolicy(StandardFinePolicy())


@pytest.fixture
def manager(fine_policy: SpyFinePolicy, channel: RecordingChannel, clock: FixedClock) -> LoanManager:
    return LoanManager(fine_policy, channel, clock=clock)


@pytest.fixture
def book() -> Book:
    return Book(title="1984", author="George Orwell", isbn="978-0-452-28423-4")


@pytest.fixture
def other_book() -> Book:
    return Book(
        title="One Hundred Years of Solitude",
        author="Gabriel García Márquez",
        isbn="978-84-376-0494-7",
    )


@pytest.fixture
def user() -> User:
    return User(name="Ana García", user_id="U001")


@pytest.fixture
def other_user() -> User:
    return User(name="Carlos López", user_id="U002")
