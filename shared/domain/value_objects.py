"""
Common Value Objects

DateRange: a closed interval of calendar dates used for booking periods
and conflict checks.
"""

from dataclasses import dataclass
from datetime import date

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents the closed range [start_date, end_date]: both bounds are
    days of the stay. Construction never validates ordering; callers ask
    ``has_valid_ordering`` and report a validation error themselves.
    """
    start_date: date
    end_date: date

    @staticmethod
    def is_valid_ordering(start_date: date, end_date: date) -> bool:
        """True iff end_date is strictly later than start_date."""
        return end_date > start_date

    @property
    def has_valid_ordering(self) -> bool:
        return self.is_valid_ordering(self.start_date, self.end_date)

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Bounds are inclusive, so ranges sharing a single boundary day
        overlap: a checkout on the 5th conflicts with a check-in on the 5th.

        Examples:
            - DateRange(1, 5) overlaps with DateRange(5, 8) -> True
            - DateRange(1, 5) overlaps with DateRange(6, 8) -> False
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return (self.start_date <= other.end_date and
                self.end_date >= other.start_date)

    def contains(self, check_date: date) -> bool:
        """Check if a date falls within this range (both ends inclusive)"""
        return self.start_date <= check_date <= self.end_date

    def start_collides_with(self, other: 'DateRange') -> bool:
        """True when this range's first day is taken by ``other``."""
        return other.contains(self.start_date)

    def end_collides_with(self, other: 'DateRange') -> bool:
        """True when this range's last day is taken by ``other``."""
        return other.contains(self.end_date)

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"


def overlaps(a: DateRange, b: DateRange) -> bool:
    """Symmetric inclusive overlap test for two ranges."""
    return a.overlaps_with(b)
