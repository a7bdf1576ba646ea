"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserSummarySerializer

from .models import Booking


class BookingRequestSerializer(serializers.Serializer):
    """Documents the admission body; the service parses and validates the dates."""

    startDate = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    endDate = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class BookingSerializer(serializers.ModelSerializer):
    """Full booking row as returned on creation and to the spot owner."""

    spotId = serializers.IntegerField(source="spot_id", read_only=True)
    userId = serializers.IntegerField(source="user_id", read_only=True)
    startDate = serializers.DateField(source="start_date", read_only=True)
    endDate = serializers.DateField(source="end_date", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Booking
        fields = ["id", "spotId", "userId", "startDate", "endDate", "createdAt", "updatedAt"]
        read_only_fields = fields


class OwnerBookingSerializer(BookingSerializer):
    User = UserSummarySerializer(source="user", read_only=True)

    class Meta(BookingSerializer.Meta):
        fields = ["User"] + BookingSerializer.Meta.fields
        read_only_fields = fields


class PublicBookingSerializer(serializers.ModelSerializer):
    """What non-owners may see: only which dates are taken."""

    spotId = serializers.IntegerField(source="spot_id", read_only=True)
    startDate = serializers.DateField(source="start_date", read_only=True)
    endDate = serializers.DateField(source="end_date", read_only=True)

    class Meta:
        model = Booking
        fields = ["spotId", "startDate", "endDate"]
        read_only_fields = fields
