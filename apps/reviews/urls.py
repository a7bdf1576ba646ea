"""URL routing for reviews (mounted under ``api/v1/spots/``)."""

from django.urls import path  # type: ignore

from .views import SpotReviewListCreateView

app_name = "reviews"

urlpatterns = [
    path("<int:spot_id>/reviews/", SpotReviewListCreateView.as_view(), name="spot-reviews"),
]
