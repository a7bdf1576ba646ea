"""Read-side helpers for spot listings and details."""

from __future__ import annotations

from django.db.models import Avg, Count, Prefetch, QuerySet  # type: ignore

from .models import Spot, SpotImage

SPOT_NOT_FOUND = "Spot couldn't be found"
NO_PREVIEW_IMAGE = "No preview image available."


def spot_listing_queryset() -> QuerySet:
    """Spots annotated with rating aggregates and their preview images."""
    return (
        Spot.objects.select_related("owner")
        .annotate(
            avg_rating=Avg("reviews__stars"),
            num_reviews=Count("reviews", distinct=True),
        )
        .prefetch_related(
            Prefetch(
                "images",
                queryset=SpotImage.objects.filter(preview=True).order_by("id"),
                to_attr="preview_images",
            )
        )
        .order_by("id")
    )


def preview_image_for(spot: Spot) -> str:
    """URL of the most recently added preview image, or the placeholder text."""
    previews = getattr(spot, "preview_images", None)
    if previews is None:
        previews = list(spot.images.filter(preview=True).order_by("id"))
    if not previews:
        return NO_PREVIEW_IMAGE
    return previews[-1].url


def paginate(queryset: QuerySet, page: int, size: int) -> QuerySet:
    offset = size * (page - 1)
    return queryset[offset : offset + size]
