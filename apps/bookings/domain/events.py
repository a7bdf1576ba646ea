"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent
from shared.domain.value_objects import DateRange


@dataclass(kw_only=True)
class BookingCreated(DomainEvent):
    """
    Event: A new booking was admitted

    Triggers:
    - Audit log entry
    """
    booking_id: int
    spot_id: int
    user_id: int
    dates: DateRange

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            booking_id=self.booking_id,
            spot_id=self.spot_id,
            user_id=self.user_id,
            start_date=self.dates.start_date.isoformat(),
            end_date=self.dates.end_date.isoformat(),
        )
        return data
