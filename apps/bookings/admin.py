"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("id", "spot", "user", "start_date", "end_date", "created_at")
    list_filter = ("start_date", "end_date")
    search_fields = ("spot__name", "user__email")
    readonly_fields = ("created_at", "updated_at")
    date_hierarchy = "start_date"
