"""API views for the booking domain."""

from __future__ import annotations

from typing import Mapping

from rest_framework import generics, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.exceptions import error_response

from .exceptions import BookingConflict, BookingError, BookingValidationError, SpotNotFound
from .serializers import (
    BookingRequestSerializer,
    BookingSerializer,
    OwnerBookingSerializer,
    PublicBookingSerializer,
)
from .services import admit_booking, spot_bookings

ERROR_STATUS = {
    SpotNotFound: status.HTTP_404_NOT_FOUND,
    BookingValidationError: status.HTTP_400_BAD_REQUEST,
    BookingConflict: status.HTTP_403_FORBIDDEN,
}


def booking_error_response(exc: BookingError) -> Response:
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return error_response(exc.message, status_code, exc.errors)


class SpotBookingListCreateView(generics.GenericAPIView):
    """``GET``/``POST`` on ``spots/<spot_id>/bookings/``."""

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = BookingRequestSerializer

    def get(self, request, spot_id: int):  # type: ignore
        try:
            spot, bookings = spot_bookings(spot_id)
        except BookingError as exc:
            return booking_error_response(exc)

        serializer_class = OwnerBookingSerializer if spot.owner_id == request.user.id else PublicBookingSerializer
        return Response({"Bookings": serializer_class(bookings, many=True).data})

    def post(self, request, spot_id: int):  # type: ignore
        # Dates are validated by admission, after the spot existence check
        payload = request.data if isinstance(request.data, Mapping) else {}

        try:
            booking = admit_booking(
                spot_id=spot_id,
                user_id=request.user.id,
                start_date=payload.get("startDate"),
                end_date=payload.get("endDate"),
            )
        except BookingError as exc:
            return booking_error_response(exc)

        return Response(BookingSerializer(booking).data, status=status.HTTP_200_OK)
