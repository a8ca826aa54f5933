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
def orden(db):
    """Create and return an order (with its equivalent document) for 2 x 5000."""
    from apps.ordenes.services import create_order

    usuario = Usuario.objects.create(cedula='111', nombre='Ana', correo='a@x.com')
    punto_venta = PuntoVenta.objects.create(
        codigo='PV-TEST-01',
        nombre='Cafetería de Pruebas',
        tipo_servicio=TipoServicio.CAFETERIA,
        ubicacion='Bloque de Pruebas',
    )
    producto = Producto.objects.create(
        codigo='ALM-001',
        nombre='Almuerzo Ejecutivo',
        categoria='Almuerzos',
        precio=Decimal('5000.00'),
    )
    orden, _ = create_order(
        cedula=usuario.cedula,
        id_punto_venta=punto_venta.id,
        items=[{'id_producto': producto.id, 'cantidad': 2, 'precio_unitario': 5000}],
    )
    return orden
