"""API tests for reviews of a spot."""

from __future__ import annotations

from decimal import Decimal
from unittest import mock

from django.db import IntegrityError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.reviews.models import Review, ReviewImage
from apps.spots.models import Spot
from apps.users.models import User


class SpotReviewAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com", username="owner", first_name="Olive", last_name="Owner", password="pw123456"
        )
        self.guest = User.objects.create_user(
            email="guest@example.com", username="guest", first_name="Gus", last_name="Guest", password="pw123456"
        )
        self.spot = Spot.objects.create(
            owner=self.owner,
            address="5 Hill Rd",
            city="Denver",
            state="Colorado",
            country="USA",
            lat=39.7,
            lng=-104.9,
            name="Mountain view",
            description="Cozy",
            price=Decimal("90.00"),
        )
        self.url = reverse("reviews:spot-reviews", args=[self.spot.id])

    def test_list_reviews_with_user_and_images(self) -> None:
        review = Review.objects.create(user=self.guest, spot=self.spot, review="Loved it", stars=5)
        image = ReviewImage.objects.create(review=review, url="https://img.example.com/r.jpg")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        (item,) = response.data["Reviews"]
        self.assertEqual(item["userId"], self.guest.id)
        self.assertEqual(item["spotId"], self.spot.id)
        self.assertEqual(item["stars"], 5)
        self.assertEqual(item["User"], {"id": self.guest.id, "firstName": "Gus", "lastName": "Guest"})
        self.assertEqual(item["ReviewImages"], [{"id": image.id, "url": "https://img.example.com/r.jpg"}])

    def test_list_for_missing_spot(self) -> None:
        response = self.client.get(reverse("reviews:spot-reviews", args=[9999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": "Spot couldn't be found", "statusCode": 404})

    def test_create_review(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(self.url, {"review": "Great stay", "stars": 4}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["userId"], self.guest.id)
        self.assertEqual(response.data["spotId"], self.spot.id)
        self.assertEqual(Review.objects.filter(spot=self.spot).count(), 1)

    def test_missing_spot_is_checked_before_body(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(reverse("reviews:spot-reviews", args=[9999]), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_validation_messages(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(self.url, {"review": "", "stars": 6}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"],
            {"review": "Review text is required", "stars": "Stars must be an integer from 1 to 5"},
        )

    def test_duplicate_review_is_forbidden(self) -> None:
        Review.objects.create(user=self.guest, spot=self.spot, review="First", stars=3)
        self.client.force_authenticate(self.guest)

        response = self.client.post(self.url, {"review": "Second", "stars": 5}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(
            response.data, {"message": "User already has a review for this spot", "statusCode": 403}
        )

    def test_duplicate_detected_by_unique_constraint(self) -> None:
        self.client.force_authenticate(self.guest)

        with mock.patch(
            "apps.reviews.serializers.ReviewSerializer.save",
            side_effect=IntegrityError("UNIQUE constraint failed: review_one_per_user_spot"),
        ):
            response = self.client.post(self.url, {"review": "Racing", "stars": 5}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], "User already has a review for this spot")

    def test_create_requires_authentication(self) -> None:
        response = self.client.post(self.url, {"review": "Anon", "stars": 5}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
