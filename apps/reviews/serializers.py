"""Serializers for the review API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserSummarySerializer

from .models import Review, ReviewImage

REVIEW_TEXT_REQUIRED = "Review text is required"
STARS_INVALID = "Stars must be an integer from 1 to 5"


class ReviewImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ReviewImage
        fields = ["id", "url"]
        read_only_fields = fields


class ReviewSerializer(serializers.ModelSerializer):
    """Review as created; also validates the request body."""

    userId = serializers.IntegerField(source="user_id", read_only=True)
    spotId = serializers.IntegerField(source="spot_id", read_only=True)
    review = serializers.CharField(
        error_messages={key: REVIEW_TEXT_REQUIRED for key in ("required", "null", "blank", "invalid")}
    )
    stars = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages={
            key: STARS_INVALID for key in ("required", "null", "invalid", "min_value", "max_value", "max_string_length")
        },
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Review
        fields = ["id", "userId", "spotId", "review", "stars", "createdAt", "updatedAt"]
        read_only_fields = ["id"]


class SpotReviewSerializer(ReviewSerializer):
    """Review as listed under a spot, with its author and images."""

    User = UserSummarySerializer(source="user", read_only=True)
    ReviewImages = ReviewImageSerializer(source="images", many=True, read_only=True)

    class Meta(ReviewSerializer.Meta):
        fields = ReviewSerializer.Meta.fields + ["User", "ReviewImages"]
