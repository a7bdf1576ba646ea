"""Domain services for booking admission.

Admission walks a fixed sequence of gates and stops at the first failure:
the spot must exist, the dates must parse and be ordered, and the range
must not overlap any booking of that spot. The check and the insert run
in one transaction that holds a row lock on the spot.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

import structlog
from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from django.utils.dateparse import parse_date  # type: ignore

from apps.spots.models import Spot
from shared.application.uow import DjangoUnitOfWork
from shared.domain.value_objects import DateRange

from .domain.events import BookingCreated
from .exceptions import END_BEFORE_START, BookingConflict, BookingValidationError, SpotNotFound
from .models import Booking

logger = structlog.get_logger(__name__)

# Name of the PostgreSQL exclusion constraint added by migration 0002
EXCLUSION_CONSTRAINT = "booking_no_overlap"


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def is_overlap_violation(exc: IntegrityError) -> bool:
    """True when ``exc`` was raised by the exclusion constraint.

    psycopg exposes the violated constraint on ``diag``; other drivers only
    name it in the message.
    """
    diag = getattr(exc.__cause__, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None)
    if constraint_name is not None:
        return constraint_name == EXCLUSION_CONSTRAINT
    return EXCLUSION_CONSTRAINT in str(exc)


def overlap_filter(candidate: DateRange) -> Q:
    """Rows whose range shares at least one day with ``candidate``."""
    return Q(start_date__lte=candidate.end_date) & Q(end_date__gte=candidate.start_date)


def find_conflicts(spot_id: int, candidate: DateRange) -> QuerySet:
    return (
        Booking.objects.filter(spot_id=spot_id)
        .filter(overlap_filter(candidate))
        .order_by("start_date", "id")
    )


def find_conflict(spot_id: int, candidate: DateRange) -> Booking | None:
    """Earliest booking of the spot overlapping ``candidate``, if any.

    ``candidate`` must already have a valid ordering. Database errors
    propagate to the caller.
    """
    return find_conflicts(spot_id, candidate).first()


def conflict_for(candidate: DateRange, existing: Iterable[DateRange]) -> BookingConflict:
    """Build the conflict error, naming the boundaries that collided.

    Both boundaries are reported when the candidate engulfs an existing
    booking, since neither of its own days falls inside one.
    """
    ranges = list(existing)
    start = any(candidate.start_collides_with(other) for other in ranges)
    end = any(candidate.end_collides_with(other) for other in ranges)
    if not (start or end):
        start = end = True
    return BookingConflict.for_boundaries(start=start, end=end)


def parse_booking_date(value: date | str | None, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or value == "":
        raise BookingValidationError(errors={field: f"{field} is required"})

    try:
        parsed = parse_date(str(value))
    except ValueError:
        parsed = None
    if parsed is None:
        raise BookingValidationError(errors={field: f"{field} must be a valid date (YYYY-MM-DD)"})
    return parsed


def get_spot_or_raise(spot_id: int, *, lock: bool = False) -> Spot:
    queryset = Spot.objects.filter(pk=spot_id)
    if lock:
        queryset = _lock_queryset_if_possible(queryset)
    spot = queryset.first()
    if spot is None:
        raise SpotNotFound()
    return spot


def admit_booking(
    spot_id: int,
    user_id: int,
    start_date: date | str | None,
    end_date: date | str | None,
) -> Booking:
    """Admit a booking for ``user_id`` at ``spot_id`` or raise a BookingError.

    Gate order: SpotNotFound, then BookingValidationError, then
    BookingConflict. A failed admission changes nothing, so repeating it
    fails the same way.
    """

    log = logger.bind(spot_id=spot_id, user_id=user_id)

    with DjangoUnitOfWork() as uow:
        try:
            spot = get_spot_or_raise(spot_id, lock=True)
        except SpotNotFound:
            log.info("booking.rejected", reason="spot_not_found")
            raise

        try:
            candidate = DateRange(
                parse_booking_date(start_date, "startDate"),
                parse_booking_date(end_date, "endDate"),
            )
            if not candidate.has_valid_ordering:
                raise BookingValidationError(errors={"endDate": END_BEFORE_START})
        except BookingValidationError as exc:
            log.info("booking.rejected", reason="invalid_dates", errors=exc.errors)
            raise

        conflicts = [booking.date_range for booking in find_conflicts(spot.pk, candidate)]
        if conflicts:
            error = conflict_for(candidate, conflicts)
            log.info("booking.conflict", dates=str(candidate), errors=error.errors)
            raise error

        try:
            # Savepoint, so a constraint violation leaves the outer block usable
            with transaction.atomic():
                booking = Booking.objects.create(
                    spot=spot,
                    user_id=user_id,
                    start_date=candidate.start_date,
                    end_date=candidate.end_date,
                )
        except IntegrityError as exc:
            if not is_overlap_violation(exc):
                raise
            log.info("booking.conflict", dates=str(candidate), detected="insert")
            raise BookingConflict.for_boundaries(start=True, end=True) from exc

        uow.record(
            BookingCreated(
                booking_id=booking.pk,
                spot_id=spot.pk,
                user_id=user_id,
                dates=candidate,
            )
        )

    log.info("booking.admitted", booking_id=booking.pk, dates=str(candidate), nights=candidate.nights)
    return booking


def spot_bookings(spot_id: int) -> tuple[Spot, QuerySet]:
    """The spot and its bookings in date order; SpotNotFound when missing."""
    spot = get_spot_or_raise(spot_id)
    bookings = Booking.objects.filter(spot=spot).select_related("user").order_by("start_date", "id")
    return spot, bookings
