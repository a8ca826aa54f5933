import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.catalogo.models import PuntoVenta, Producto, TipoServicio
from apps.usuarios.models import Usuario


@pytest.fixture
def api_client():
    """Return an API client (the API is unauthenticated)."""
    return APIClient()


@pytest.fixture
def usuario(db):
    """Create and return an active user."""
    return Usuario.objects.create(
        cedula='111',
        nombre='Ana',
        correo='a@x.com',
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


@pytest.fixture
def producto(db):
    """Create and return a product."""
    return Producto.objects.create(
        codigo='ALM-001',
        nombre='Almuerzo Ejecutivo',
        categoria='Almuerzos',
        precio=Decimal('5000.00'),
    )


@pytest.fixture
def bebida(db):
    """Create and return a second product."""
    return Producto.objects.create(
        codigo='BEB-001',
        nombre='Limonada',
        categoria='Bebidas',
        precio=Decimal('3333.33'),
    )


@pytest.fixture
def order_payload(usuario, punto_venta, producto):
    """Valid POST /ordenes body: one line, 2 x 5000."""
    return {
        'cedula': usuario.cedula,
        'id_punto_venta': punto_venta.id,
        'metodo_pago': 'EFECTIVO',
        'metodo_validacion': 'CEDULA',
        'items': [
            {'id_producto': producto.id, 'cantidad': 2, 'precio_unitario': 5000},
        ],
    }


@pytest.fixture
def orden(order_payload):
    """Create and return an order through the intake workflow."""
    from apps.ordenes.services import create_order

    orden, _ = create_order(**order_payload)
    return orden
