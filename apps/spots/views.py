"""Spot API views."""

from __future__ import annotations

import structlog
from django.http import Http404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import SpotFilterSet, SpotQuerySerializer
from .models import Spot
from .permissions import IsSpotOwnerOrReadOnly
from .serializers import SpotDetailSerializer, SpotImageSerializer, SpotListSerializer, SpotSerializer
from .services import SPOT_NOT_FOUND, paginate, spot_listing_queryset

logger = structlog.get_logger(__name__)


class SpotViewSet(viewsets.ModelViewSet):
    """Listing, detail and owner management of spots."""

    queryset = Spot.objects.select_related("owner")
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsSpotOwnerOrReadOnly]
    filter_backends = [DjangoFilterBackend]
    filterset_class = SpotFilterSet
    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def get_queryset(self):  # type: ignore
        if self.action in {"list", "current", "retrieve"}:
            return spot_listing_queryset()
        return super().get_queryset()

    def get_serializer_class(self):  # type: ignore
        if self.action in {"list", "current"}:
            return SpotListSerializer
        if self.action == "retrieve":
            return SpotDetailSerializer
        if self.action == "images":
            return SpotImageSerializer
        return SpotSerializer

    def get_object(self):  # type: ignore
        try:
            return super().get_object()
        except Http404:
            raise NotFound(SPOT_NOT_FOUND)

    def list(self, request, *args, **kwargs):  # type: ignore
        query = SpotQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page = query.validated_data["page"]
        size = query.validated_data["size"]

        spots = paginate(self.filter_queryset(self.get_queryset()), page, size)
        data = self.get_serializer(spots, many=True).data
        return Response({"Spots": data, "page": page, "size": size})

    @action(detail=False, methods=["get"], permission_classes=[permissions.IsAuthenticated])
    def current(self, request):  # type: ignore
        spots = self.get_queryset().filter(owner=request.user)
        return Response({"Spots": self.get_serializer(spots, many=True).data})

    def perform_create(self, serializer):  # type: ignore
        spot = serializer.save(owner=self.request.user)
        logger.info("spot.created", spot_id=spot.pk, owner_id=spot.owner_id)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        spot = self.get_object()
        spot_id = spot.pk
        self.perform_destroy(spot)
        logger.info("spot.deleted", spot_id=spot_id, owner_id=request.user.id)
        return Response({"message": "Successfully deleted", "statusCode": status.HTTP_200_OK})

    @action(detail=True, methods=["post"], url_path="images")
    def images(self, request, pk=None):  # type: ignore
        spot = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save(spot=spot)
        return Response(serializer.data, status=status.HTTP_200_OK)
