import pytest
from rest_framework.test import APIClient
from apps.core.persistence import get_adapter


@pytest.fixture
def api_client():
    """Return an API client (the API is unauthenticated)."""
    return APIClient()


@pytest.fixture
def adapter(db):
    """Adapter for the default connection."""
    return get_adapter()
