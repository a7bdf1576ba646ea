import pytest
from django.urls import reverse


@pytest.mark.django_db
def test_healthz_reports_database(client):
    response = client.get(reverse("healthz"))

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


def test_schema_is_served(client, db):
    response = client.get(reverse("schema"))

    assert response.status_code == 200
