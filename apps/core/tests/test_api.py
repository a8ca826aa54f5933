import pytest
from rest_framework import status


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health/"""

    def test_health_check(self, api_client):
        response = api_client.get('/api/health/')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok', 'database': 'sqlite'}


@pytest.mark.django_db
class TestErrorHandlers:
    """Tests for the JSON error handlers."""

    def test_unknown_route_is_json_404(self, api_client):
        response = api_client.get('/no-existe')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'Recurso no encontrado'}


@pytest.mark.django_db
class TestApiSchema:
    """Tests for the OpenAPI schema."""

    def test_schema_lists_routes(self, api_client):
        response = api_client.get('/api/schema/', {'format': 'json'})

        assert response.status_code == status.HTTP_200_OK
        paths = response.json()['paths']
        assert '/ordenes' in paths
        assert '/ordenes/{id}/estado' in paths
        assert '/usuarios/{cedula}/qr' in paths
