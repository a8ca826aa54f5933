import pytest
from rest_framework.test import APIClient
from apps.catalogo.models import PuntoVenta, TipoServicio
from apps.usuarios.models import EstadoUsuario, Usuario


@pytest.fixture
def api_client():
    """Return an API client (the API is unauthenticated)."""
    return APIClient()


@pytest.fixture
def usuario(db):
    """Create and return an active user with a QR token."""
    return Usuario.objects.create(
        cedula='1020304050',
        nombre='Laura Gómez',
        telefono='3001234567',
        correo='laura.gomez@example.com',
        codigo_qr='UDINING:1020304050:1700000000000:ABC123',
    )


@pytest.fixture
def usuario_bloqueado(db):
    """Create and return a blocked user."""
    return Usuario.objects.create(
        cedula='9988776655',
        nombre='Andrés Pérez',
        correo='andres.perez@example.com',
        codigo_qr='UDINING:9988776655:1700000000000:ZZZ999',
        estado=EstadoUsuario.BLOQUEADO,
    )


@pytest.fixture
def punto_venta(db):
    """Create and return a test point of sale."""
    return PuntoVenta.objects.create(
        codigo='PV-TEST-01',
        nombre='Cafetería de Pruebas',
        tipo_servicio=TipoServicio.CAFETERIA,
        ubicacion='Bloque de Pruebas',
    )
