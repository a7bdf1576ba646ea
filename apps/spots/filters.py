"""Query parameter validation and FilterSet for the spot listing."""

from __future__ import annotations

import django_filters  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import Spot

MAX_PAGE = 10
MAX_PAGE_SIZE = 20


def _messages(text: str) -> dict[str, str]:
    return {key: text for key in ("invalid", "min_value", "max_value", "max_string_length", "null")}


class SpotQuerySerializer(serializers.Serializer):
    """Validates listing query parameters before they reach the FilterSet."""

    page = serializers.IntegerField(
        required=False,
        default=1,
        min_value=1,
        max_value=MAX_PAGE,
        error_messages=_messages("Page must be greater than or equal to 1"),
    )
    size = serializers.IntegerField(
        required=False,
        default=MAX_PAGE_SIZE,
        min_value=1,
        error_messages=_messages("Size must be greater than or equal to 1"),
    )
    minLat = serializers.FloatField(
        required=False, min_value=-90, max_value=90, error_messages=_messages("Minimum latitude is invalid")
    )
    maxLat = serializers.FloatField(
        required=False, min_value=-90, max_value=90, error_messages=_messages("Maximum latitude is invalid")
    )
    minLng = serializers.FloatField(
        required=False, min_value=-180, max_value=180, error_messages=_messages("Minimum longitude is invalid")
    )
    maxLng = serializers.FloatField(
        required=False, min_value=-180, max_value=180, error_messages=_messages("Maximum longitude is invalid")
    )
    minPrice = serializers.FloatField(
        required=False, min_value=0, error_messages=_messages("Minimum price must be greater than or equal to 0")
    )
    maxPrice = serializers.FloatField(
        required=False, min_value=0, error_messages=_messages("Maximum price must be greater than or equal to 0")
    )

    def validate_size(self, value: int) -> int:
        # Oversized pages are clamped, not rejected
        return min(value, MAX_PAGE_SIZE)


class SpotFilterSet(django_filters.FilterSet):
    """Bounding-box and price filters used by the public listing."""

    minLat = django_filters.NumberFilter(field_name="lat", lookup_expr="gte")
    maxLat = django_filters.NumberFilter(field_name="lat", lookup_expr="lte")
    minLng = django_filters.NumberFilter(field_name="lng", lookup_expr="gte")
    maxLng = django_filters.NumberFilter(field_name="lng", lookup_expr="lte")
    minPrice = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    maxPrice = django_filters.NumberFilter(field_name="price", lookup_expr="lte")

    class Meta:
        model = Spot
        fields: list[str] = []
