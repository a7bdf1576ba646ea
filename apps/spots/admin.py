"""Admin registrations for the spots domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Spot, SpotImage


class SpotImageInline(admin.TabularInline):
    model = SpotImage
    extra = 0
    fields = ("url", "preview")


@admin.register(Spot)
class SpotAdmin(admin.ModelAdmin):
    list_display = ("name", "owner", "city", "country", "price", "created_at")
    list_filter = ("country", "state")
    search_fields = ("name", "city", "address", "owner__email")
    readonly_fields = ("created_at", "updated_at")
    inlines = [SpotImageInline]
