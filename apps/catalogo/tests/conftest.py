import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.catalogo.models import PuntoVenta, Producto, TipoServicio


@pytest.fixture
def api_client():
    """Return an API client (the API is unauthenticated)."""
    return APIClient()


@pytest.fixture
def punto_venta(db):
    """Create and return a test point of sale."""
    return PuntoVenta.objects.create(
        codigo='PV-TEST-01',
        nombre='Cafetería de Pruebas',
        tipo_servicio=TipoServicio.CAFETERIA,
        ubicacion='Bloque de Pruebas',
    )


@pytest.fixture
def producto(db):
    """Create and return an available product."""
    return Producto.objects.create(
        codigo='CAF-001',
        nombre='Café Americano',
        descripcion='Taza de 8 onzas',
        categoria='Bebidas Calientes',
        precio=Decimal('3500.00'),
    )


@pytest.fixture
def otro_producto(db):
    """Create and return an unavailable product in another category."""
    return Producto.objects.create(
        codigo='EMP-002',
        nombre='Empanada de Pipián',
        categoria='Snacks',
        precio=Decimal('2800.00'),
        disponible=False,
    )
