"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Q  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"invalid": "Invalid email", "required": "Invalid email"})
    username = serializers.CharField(max_length=150, error_messages={"required": "Username is required"})
    firstName = serializers.CharField(
        source="first_name", max_length=150, error_messages={"required": "First Name is required"}
    )
    lastName = serializers.CharField(
        source="last_name", max_length=150, error_messages={"required": "Last Name is required"}
    )
    password = serializers.CharField(min_length=6, write_only=True)

    def validate_email(self, value: str) -> str:
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User with that email already exists")
        return value

    def validate_username(self, value: str) -> str:
        if User.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError("User with that username already exists")
        return value

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    """Accepts either the email or the username as ``credential``."""

    credential = serializers.CharField(error_messages={"required": "Email or username is required"})
    password = serializers.CharField(write_only=True, error_messages={"required": "Password is required"})

    def authenticate(self):  # type: ignore
        """Return the matching active user, or ``None`` for bad credentials."""
        credential = self.validated_data["credential"]
        user = User.objects.filter(Q(email__iexact=credential) | Q(username__iexact=credential)).first()
        if user is None or not user.is_active:
            return None
        if not user.check_password(self.validated_data["password"]):
            return None
        return user
