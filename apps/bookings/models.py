"""Booking domain models for SpotBnB."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.exceptions import ValidationError  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import DateRange


class Booking(models.Model):
    """A stay at a spot over the closed date range ``[start_date, end_date]``.

    Rows are created only by the admission service and never updated by it;
    they go away with their spot or user.
    """

    spot = models.ForeignKey(
        "spots.Spot",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    start_date = models.DateField()
    end_date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("booking")
        verbose_name_plural = _("bookings")
        ordering = ["start_date", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F("start_date")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["spot", "start_date", "end_date"], name="booking_spot_dates_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} for spot {self.spot_id} ({self.date_range})"

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    def clean(self) -> None:
        if not DateRange.is_valid_ordering(self.start_date, self.end_date):
            raise ValidationError({"end_date": _("endDate cannot be on or before startDate")})
