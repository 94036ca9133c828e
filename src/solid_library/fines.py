"""
Fine policies for late returns.

A fine policy turns a number of whole days late into a fine amount. The
loan manager only knows the abstract ``FinePolicy``; new policies are
added by subclassing it, never by editing the existing ones.
"""

from abc import ABC, abstractmethod


class FinePolicy(ABC):
    """Strategy for computing a late fee from days overdue."""

    @abstractmethod
    def compute(self, days_late: int) -> int:
        """
        Compute the fine for a return ``days_late`` whole days late.

        Args:
            days_late: Non-negative number of days past the due date

        Returns:
            Non-negative fine amount

        Raises:
            ValueError: If days_late is negative
        """


def _check_days(days_late: int) -> None:
    if days_late < 0:
        raise ValueError("Days late cannot be negative")


class DailyRateFinePolicy(FinePolicy):
    """Linear fine: a fixed amount per late day."""

    def __init__(self, daily_rate: int) -> None:
        if daily_rate < 0:
            raise ValueError("Daily rate cannot be negative")
        self.daily_rate = daily_rate

    def compute(self, days_late: int) -> int:
        _check_days(days_late)
        return days_late * self.daily_rate

    def __repr__(self) -> str:
        return f"{type(self).__name__}(daily_rate={self.daily_rate})"


class StandardFinePolicy(DailyRateFinePolicy):
    """Regular members: 10 units per late day."""

    def __init__(self, daily_rate: int = 10) -> None:
        super().__init__(daily_rate)


class DiscountedFinePolicy(DailyRateFinePolicy):
    """Students: 5 units per late day."""

    def __init__(self, daily_rate: int = 5) -> None:
        super().__init__(daily_rate)


class WaivedFinePolicy(FinePolicy):
    """VIP members are never fined."""

    def compute(self, days_late: int) -> int:
        _check_days(days_late)
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
