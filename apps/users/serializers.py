"""Serializers for user-related API payloads."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """The current user as returned by auth endpoints."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName", "email", "username"]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """``{id, firstName, lastName}`` nested under owners, reviewers and guests."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName"]
        read_only_fields = fields
