"""Expected outcomes of booking admission.

Views translate these into the error envelope; none of them is retried.
"""

from __future__ import annotations

from typing import Mapping

from apps.spots.services import SPOT_NOT_FOUND

BOOKING_CONFLICT = "Sorry, this spot is already booked for the specified dates"
START_DATE_CONFLICT = "Start date conflicts with an existing booking"
END_DATE_CONFLICT = "End date conflicts with an existing booking"
END_BEFORE_START = "endDate cannot be on or before startDate"


class BookingError(Exception):
    """Base class carrying the envelope message and per-field errors."""

    message = "Booking error"

    def __init__(self, message: str | None = None, errors: Mapping[str, str] | None = None):
        self.message = message or self.message
        self.errors = dict(errors or {})
        super().__init__(self.message)


class SpotNotFound(BookingError):
    message = SPOT_NOT_FOUND


class BookingValidationError(BookingError):
    message = "Validation error"


class BookingConflict(BookingError):
    message = BOOKING_CONFLICT

    @classmethod
    def for_boundaries(cls, start: bool, end: bool) -> "BookingConflict":
        errors = {}
        if start:
            errors["startDate"] = START_DATE_CONFLICT
        if end:
            errors["endDate"] = END_DATE_CONFLICT
        return cls(errors=errors)
