"""Tests for spot listing, details and owner management."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.reviews.models import Review
from apps.spots.models import Spot, SpotImage
from apps.users.models import User


def make_user(email: str, username: str) -> User:
    return User.objects.create_user(
        email=email, username=username, first_name=username.title(), last_name="Tester", password="StrongPass123"
    )


def make_spot(owner: User, **overrides) -> Spot:
    fields = {
        "address": "123 Disney Lane",
        "city": "San Francisco",
        "state": "California",
        "country": "United States of America",
        "lat": 37.7645358,
        "lng": -122.4730327,
        "name": "App Academy",
        "description": "Place where web developers are created",
        "price": Decimal("123.00"),
    }
    fields.update(overrides)
    return Spot.objects.create(owner=owner, **fields)


SPOT_PAYLOAD = {
    "address": "1 Ocean Drive",
    "city": "Miami",
    "state": "Florida",
    "country": "United States of America",
    "lat": 25.7617,
    "lng": -80.1918,
    "name": "Beach House",
    "description": "Steps from the sand",
    "price": 250,
}


class SpotListAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_user("owner@example.com", "owner")
        self.guest = make_user("guest@example.com", "guest")
        self.spot = make_spot(self.owner)
        self.cheap_spot = make_spot(self.owner, name="Cabin", price=Decimal("40.00"), lat=45.0, lng=-110.0)
        self.list_url = reverse("spot-list")

    def test_list_includes_rating_and_preview(self) -> None:
        SpotImage.objects.create(spot=self.spot, url="https://img.example.com/1.jpg", preview=True)
        SpotImage.objects.create(spot=self.spot, url="https://img.example.com/2.jpg", preview=True)
        SpotImage.objects.create(spot=self.spot, url="https://img.example.com/3.jpg", preview=False)
        Review.objects.create(user=self.guest, spot=self.spot, review="Great", stars=5)
        Review.objects.create(user=self.owner, spot=self.spot, review="Fine", stars=4)

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["page"], 1)
        self.assertEqual(response.data["size"], 20)
        first, second = response.data["Spots"]
        self.assertEqual(first["id"], self.spot.id)
        self.assertEqual(first["ownerId"], self.owner.id)
        self.assertEqual(first["avgRating"], 4.5)
        self.assertEqual(first["previewImage"], "https://img.example.com/2.jpg")
        self.assertIsNone(second["avgRating"])
        self.assertEqual(second["previewImage"], "No preview image available.")

    def test_filters_by_price_and_bounding_box(self) -> None:
        response = self.client.get(self.list_url, {"maxPrice": "50"})
        self.assertEqual([spot["id"] for spot in response.data["Spots"]], [self.cheap_spot.id])

        response = self.client.get(self.list_url, {"minLat": "40", "maxLng": "-100"})
        self.assertEqual([spot["id"] for spot in response.data["Spots"]], [self.cheap_spot.id])

    def test_pagination_and_size_clamp(self) -> None:
        response = self.client.get(self.list_url, {"page": 2, "size": 1})
        self.assertEqual([spot["id"] for spot in response.data["Spots"]], [self.cheap_spot.id])

        response = self.client.get(self.list_url, {"size": 500})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["size"], 20)

    def test_invalid_query_params(self) -> None:
        response = self.client.get(self.list_url, {"page": 0, "size": 0, "minPrice": -1, "maxLat": "north"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Validation error")
        self.assertEqual(response.data["statusCode"], 400)
        self.assertEqual(
            response.data["errors"],
            {
                "page": "Page must be greater than or equal to 1",
                "size": "Size must be greater than or equal to 1",
                "minPrice": "Minimum price must be greater than or equal to 0",
                "maxLat": "Maximum latitude is invalid",
            },
        )

    def test_current_lists_only_callers_spots(self) -> None:
        make_spot(self.guest, name="Guest flat")
        self.client.force_authenticate(self.guest)

        response = self.client.get(reverse("spot-current"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([spot["name"] for spot in response.data["Spots"]], ["Guest flat"])

    def test_current_requires_authentication(self) -> None:
        response = self.client.get(reverse("spot-current"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class SpotDetailAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_user("owner@example.com", "owner")
        self.other = make_user("other@example.com", "other")
        self.spot = make_spot(self.owner)
        self.other_spot = make_spot(self.other, name="Elsewhere")
        SpotImage.objects.create(spot=self.other_spot, url="https://img.example.com/other.jpg", preview=True)

    def test_detail_uses_the_spots_own_images_and_owner(self) -> None:
        image = SpotImage.objects.create(spot=self.spot, url="https://img.example.com/mine.jpg", preview=True)
        Review.objects.create(user=self.other, spot=self.spot, review="Lovely", stars=3)

        response = self.client.get(reverse("spot-detail", args=[self.spot.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["numReviews"], 1)
        self.assertEqual(response.data["avgStarRating"], 3)
        self.assertEqual(
            response.data["SpotImages"], [{"id": image.id, "url": "https://img.example.com/mine.jpg", "preview": True}]
        )
        self.assertEqual(
            response.data["Owner"], {"id": self.owner.id, "firstName": "Owner", "lastName": "Tester"}
        )

    def test_missing_spot_is_404(self) -> None:
        response = self.client.get(reverse("spot-detail", args=[9999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": "Spot couldn't be found", "statusCode": 404})


class SpotManagementAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_user("owner@example.com", "owner")
        self.stranger = make_user("stranger@example.com", "stranger")
        self.spot = make_spot(self.owner)

    def test_create_spot(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(reverse("spot-list"), SPOT_PAYLOAD, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["ownerId"], self.owner.id)
        self.assertEqual(response.data["name"], "Beach House")
        self.assertTrue(Spot.objects.filter(name="Beach House", owner=self.owner).exists())

    def test_create_requires_authentication(self) -> None:
        response = self.client.post(reverse("spot-list"), SPOT_PAYLOAD, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["message"], "Authentication required")

    def test_create_validation_messages(self) -> None:
        self.client.force_authenticate(self.owner)
        payload = dict(SPOT_PAYLOAD, address="", lat="north", name="x" * 60)
        del payload["price"]

        response = self.client.post(reverse("spot-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"],
            {
                "address": "Street address is required",
                "lat": "Latitude is not valid",
                "name": "Name must be less than 50 characters",
                "price": "Price per day is required",
            },
        )

    def test_owner_can_update(self) -> None:
        self.client.force_authenticate(self.owner)
        payload = dict(SPOT_PAYLOAD, name="Renamed")

        response = self.client.put(reverse("spot-detail", args=[self.spot.id]), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.spot.refresh_from_db()
        self.assertEqual(self.spot.name, "Renamed")

    def test_non_owner_is_forbidden(self) -> None:
        self.client.force_authenticate(self.stranger)

        update = self.client.put(reverse("spot-detail", args=[self.spot.id]), SPOT_PAYLOAD, format="json")
        delete = self.client.delete(reverse("spot-detail", args=[self.spot.id]))

        self.assertEqual(update.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(update.data, {"message": "Forbidden", "statusCode": 403})
        self.assertEqual(delete.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Spot.objects.filter(pk=self.spot.pk).exists())

    def test_owner_can_delete(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.delete(reverse("spot-detail", args=[self.spot.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"message": "Successfully deleted", "statusCode": 200})
        self.assertFalse(Spot.objects.filter(pk=self.spot.pk).exists())

    def test_add_image(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            reverse("spot-images", args=[self.spot.id]),
            {"url": "https://img.example.com/new.jpg", "preview": True},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(set(response.data), {"id", "url", "preview"})
        self.assertTrue(self.spot.images.filter(url="https://img.example.com/new.jpg", preview=True).exists())

    def test_add_image_to_missing_spot(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            reverse("spot-images", args=[9999]), {"url": "https://img.example.com/new.jpg"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Spot couldn't be found")
