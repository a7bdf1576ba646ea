"""API views for the reviews of a spot."""

from __future__ import annotations

import structlog
from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import generics, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.spots.models import Spot
from apps.spots.services import SPOT_NOT_FOUND
from shared.api.exceptions import error_response

from .models import Review
from .serializers import ReviewSerializer, SpotReviewSerializer

logger = structlog.get_logger(__name__)

DUPLICATE_REVIEW = "User already has a review for this spot"


class SpotReviewListCreateView(generics.GenericAPIView):
    """``GET``/``POST`` on ``spots/<spot_id>/reviews/``."""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly]
    serializer_class = ReviewSerializer

    def get_serializer_class(self):  # type: ignore
        if self.request.method == "GET":
            return SpotReviewSerializer
        return ReviewSerializer

    def get(self, request, spot_id: int):  # type: ignore
        if not Spot.objects.filter(pk=spot_id).exists():
            return error_response(SPOT_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        reviews = (
            Review.objects.filter(spot_id=spot_id)
            .select_related("user")
            .prefetch_related("images")
            .order_by("id")
        )
        return Response({"Reviews": self.get_serializer(reviews, many=True).data})

    def post(self, request, spot_id: int):  # type: ignore
        if not Spot.objects.filter(pk=spot_id).exists():
            return error_response(SPOT_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if Review.objects.filter(spot_id=spot_id, user=request.user).exists():
            return error_response(DUPLICATE_REVIEW, status.HTTP_403_FORBIDDEN)

        try:
            with transaction.atomic():
                review = serializer.save(spot_id=spot_id, user=request.user)
        except IntegrityError:
            # A concurrent request won the unique (user, spot) constraint
            return error_response(DUPLICATE_REVIEW, status.HTTP_403_FORBIDDEN)

        logger.info("review.created", review_id=review.pk, spot_id=spot_id, user_id=request.user.id)
        return Response(serializer.data, status=status.HTTP_201_CREATED)
