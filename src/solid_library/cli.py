"""
Command line entry point for the SOLID Library demo.

Usage:
    solid-library demo [--log-level LEVEL] [--late-days N]

The demo builds two loan managers with different fine policies and
notification channels, lends a book from each, returns the first one
late (by back-dating its due date) and the second one on time.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import datetime, timedelta

from .capabilities import LoanIssuer, LoanReceiver
from .config import LibraryConfig, get_config
from .fines import DiscountedFinePolicy, FinePolicy, StandardFinePolicy
from .loans import LoanManager
from .models import Book, Loan, User
from .notifications import (
    EmailNotificationChannel,
    NotificationChannel,
    SmsNotificationChannel,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout only carries notifications."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def build_manager(
    fine_policy: FinePolicy, notifier: NotificationChannel, config: LibraryConfig
) -> LoanManager:
    """Wire a loan manager from concrete parts and configured loan rules."""
    return LoanManager(
        fine_policy,
        notifier,
        loan_period=config.loan_period,
        max_renewals=config.max_renewals,
        due_date_format=config.due_date_format,
    )


def lend(issuer: LoanIssuer, book: Book, user: User) -> Loan | None:
    return issuer.create_loan(book, user)


def give_back(receiver: LoanReceiver, loan: Loan | None) -> None:
    if loan is not None:
        receiver.return_loan(loan)


def run_demo(config: LibraryConfig, late_days: int = 3) -> int:
    """Run the lending scenario. Returns a process exit code."""
    nineteen_eighty_four = Book(
        title="1984", author="George Orwell", isbn="978-0-452-28423-4"
    )
    solitude = Book(
        title="One Hundred Years of Solitude",
        author="Gabriel García Márquez",
        isbn="978-84-376-0494-7",
    )
    ana = User(name="Ana García", user_id="U001")
    carlos = User(name="Carlos López", user_id="U002")

    logger.info("Regular members: standard fines, e-mail notifications")
    regular = build_manager(
        StandardFinePolicy(config.standard_daily_rate), EmailNotificationChannel(), config
    )

    logger.info("Students: discounted fines, SMS notifications")
    students = build_manager(
        DiscountedFinePolicy(config.discounted_daily_rate), SmsNotificationChannel(), config
    )

    first = lend(regular, nineteen_eighty_four, ana)
    second = lend(students, solitude, carlos)

    logger.info("Simulating a late return")
    if first is not None:
        first.due_date = datetime.now() - timedelta(days=late_days)
        give_back(regular, first)

    logger.info("Simulating an on-time return")
    give_back(students, second)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solid-library",
        description="Library loans illustrating the SOLID principles",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Run the lending demonstration")
    demo.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override the configured log level",
    )
    demo.add_argument(
        "--late-days",
        type=int,
        default=3,
        help="How many days late the first book is returned (default: 3)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = get_config()

    level = args.log_level or ("DEBUG" if config.is_development else config.log_level)
    configure_logging(level)

    if args.late_days < 0:
        logger.error("--late-days cannot be negative")
        return 2

    return run_demo(config, late_days=args.late_days)
