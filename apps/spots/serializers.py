"""Serializers for spots and spot images."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserSummarySerializer

from .models import Spot, SpotImage
from .services import preview_image_for


def _messages(text: str) -> dict[str, str]:
    keys = (
        "required",
        "null",
        "blank",
        "invalid",
        "max_length",
        "min_value",
        "max_value",
        "max_digits",
        "max_decimal_places",
        "max_whole_digits",
        "max_string_length",
    )
    return {key: text for key in keys}


class SpotImageSerializer(serializers.ModelSerializer):
    url = serializers.URLField(max_length=500, error_messages=_messages("Image url is required"))
    preview = serializers.BooleanField(default=False)

    class Meta:
        model = SpotImage
        fields = ["id", "url", "preview"]
        read_only_fields = ["id"]


class SpotSerializer(serializers.ModelSerializer):
    """Spot as created, updated and embedded in other payloads."""

    ownerId = serializers.IntegerField(source="owner_id", read_only=True)
    address = serializers.CharField(max_length=255, error_messages=_messages("Street address is required"))
    city = serializers.CharField(max_length=120, error_messages=_messages("City is required"))
    state = serializers.CharField(max_length=120, error_messages=_messages("State is required"))
    country = serializers.CharField(max_length=120, error_messages=_messages("Country is required"))
    lat = serializers.FloatField(min_value=-90, max_value=90, error_messages=_messages("Latitude is not valid"))
    lng = serializers.FloatField(min_value=-180, max_value=180, error_messages=_messages("Longitude is not valid"))
    name = serializers.CharField(max_length=49, error_messages=_messages("Name must be less than 50 characters"))
    description = serializers.CharField(error_messages=_messages("Description is required"))
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, error_messages=_messages("Price per day is required")
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Spot
        fields = [
            "id",
            "ownerId",
            "address",
            "city",
            "state",
            "country",
            "lat",
            "lng",
            "name",
            "description",
            "price",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]


class SpotListSerializer(SpotSerializer):
    """Listing row: the spot plus its rating and headline image."""

    avgRating = serializers.SerializerMethodField()
    previewImage = serializers.SerializerMethodField()

    class Meta(SpotSerializer.Meta):
        fields = SpotSerializer.Meta.fields + ["avgRating", "previewImage"]

    def get_avgRating(self, obj: Spot) -> float | None:
        return getattr(obj, "avg_rating", None)

    def get_previewImage(self, obj: Spot) -> str:
        return preview_image_for(obj)


class SpotDetailSerializer(SpotSerializer):
    numReviews = serializers.SerializerMethodField()
    avgStarRating = serializers.SerializerMethodField()
    SpotImages = SpotImageSerializer(source="images", many=True, read_only=True)
    Owner = UserSummarySerializer(source="owner", read_only=True)

    class Meta(SpotSerializer.Meta):
        fields = SpotSerializer.Meta.fields + ["numReviews", "avgStarRating", "SpotImages", "Owner"]

    def get_numReviews(self, obj: Spot) -> int:
        num_reviews = getattr(obj, "num_reviews", None)
        return num_reviews if num_reviews is not None else obj.reviews.count()

    def get_avgStarRating(self, obj: Spot) -> float | None:
        return getattr(obj, "avg_rating", None)
