"""Object permissions for spot management."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


class IsSpotOwnerOrReadOnly(permissions.BasePermission):
    """Anyone may read a spot; only its owner may change it."""

    def has_object_permission(self, request, view, obj):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.owner_id == getattr(request.user, "id", None)
