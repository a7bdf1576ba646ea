"""Message bus subscribers for booking events."""

from __future__ import annotations

import structlog

from .domain.events import BookingCreated

logger = structlog.get_logger(__name__)


def log_booking_created(event: BookingCreated) -> None:
    logger.info("booking.created", **event.to_dict())
