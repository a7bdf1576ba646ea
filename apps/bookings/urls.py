"""URL routing for bookings (mounted under ``api/v1/spots/``)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import SpotBookingListCreateView

app_name = "bookings"

urlpatterns = [
    path("<int:spot_id>/bookings/", SpotBookingListCreateView.as_view(), name="spot-bookings"),
]
