"""URL configuration for the SpotBnB project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the versioned API of each app and the generated OpenAPI documentation.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

from shared.api.views import healthz

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('healthz/', healthz, name='healthz'),
    # Application URLs
    path('api/v1/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/v1/spots/', include(('apps.reviews.urls', 'reviews'), namespace='reviews')),
    path('api/v1/spots/', include(('apps.bookings.urls', 'bookings'), namespace='bookings')),
    path('api/v1/spots/', include('apps.spots.urls')),
    # API documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
