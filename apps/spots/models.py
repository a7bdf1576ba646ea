"""Spot domain models for SpotBnB."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Spot(models.Model):
    """A place an owner rents out by the night."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="spots",
    )
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=120)
    state = models.CharField(max_length=120)
    country = models.CharField(max_length=120)
    lat = models.FloatField(validators=[MinValueValidator(-90), MaxValueValidator(90)])
    lng = models.FloatField(validators=[MinValueValidator(-180), MaxValueValidator(180)])
    name = models.CharField(max_length=49)
    description = models.TextField()
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("spot")
        verbose_name_plural = _("spots")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["owner"], name="spot_owner_idx"),
            models.Index(fields=["lat", "lng"], name="spot_lat_lng_idx"),
            models.Index(fields=["price"], name="spot_price_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class SpotImage(models.Model):
    """Image URL attached to a spot; ``preview`` images headline listings."""

    spot = models.ForeignKey(Spot, on_delete=models.CASCADE, related_name="images")
    url = models.URLField(max_length=500)
    preview = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("spot image")
        verbose_name_plural = _("spot images")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.url
