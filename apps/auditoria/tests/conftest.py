import pytest
from rest_framework.test import APIClient
from apps.auditoria.services import record_audit, seed_parameters


@pytest.fixture
def api_client():
    """Return an API client (the API is unauthenticated)."""
    return APIClient()


@pytest.fixture
def parametros(db):
    """Ensure the default regulatory parameters exist."""
    seed_parameters()


@pytest.fixture
def audit_entries(db):
    """Create three audit entries, oldest first."""
    return [
        record_audit(
            tabla='productos',
            id_registro=f'prod-{i}',
            accion='INSERT',
            datos_nuevos={'codigo': f'P-{i}'},
        )
        for i in range(3)
    ]
