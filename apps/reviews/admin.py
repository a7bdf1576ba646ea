"""Admin registrations for reviews."""

from __future__ import annotations

from django.contrib import admin

from .models import Review, ReviewImage


class ReviewImageInline(admin.TabularInline):
    model = ReviewImage
    extra = 0


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "spot", "user", "stars", "created_at")
    list_filter = ("stars",)
    search_fields = ("review", "spot__name", "user__email")
    readonly_fields = ("created_at", "updated_at")
    inlines = [ReviewImageInline]
