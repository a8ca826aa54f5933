"""
Service layer tests for the catalog app.

Tests cover:
- Product creation and price validation
- Duplicate codes
- Partial updates with audit snapshots
- Text search across engines
- Point of sale seeding
"""

import pytest
from decimal import Decimal

from apps.auditoria.models import Auditoria
from apps.catalogo.models import PuntoVenta, Producto
from apps.catalogo.services import (
    DEFAULT_POINTS_OF_SALE,
    create_product,
    list_points_of_sale,
    search_products,
    seed_points_of_sale,
    update_product,
)
from apps.core.exceptions import ConflictError, NotFoundError, ValidacionError


# =============================================================================
# Product Creation
# =============================================================================

@pytest.mark.django_db
class TestCreateProduct:
    """Tests for create_product()."""

    def test_create_product_success(self):
        """Product is stored and an INSERT audit row is written."""
        producto = create_product(
            codigo='JUG-010',
            nombre='Jugo de Lulo',
            categoria='Bebidas Frías',
            precio=Decimal('4200'),
            ip='10.0.0.5',
        )

        assert producto.disponible is True
        assert Producto.objects.filter(codigo='JUG-010').exists()

        entry = Auditoria.objects.get(tabla='productos', id_registro=producto.id)
        assert entry.accion == 'INSERT'
        assert entry.datos_anteriores == {}
        assert entry.datos_nuevos['codigo'] == 'JUG-010'
        assert entry.ip_origen == '10.0.0.5'

    @pytest.mark.parametrize('precio', [Decimal('0'), Decimal('-100')])
    def test_create_product_non_positive_price(self, precio):
        """Zero or negative prices are rejected."""
        with pytest.raises(ValidacionError):
            create_product(codigo='X-1', nombre='X', categoria='Y', precio=precio)

        assert not Producto.objects.filter(codigo='X-1').exists()

    def test_create_product_duplicate_code(self, producto):
        """Reusing a product code raises ConflictError."""
        with pytest.raises(ConflictError) as exc_info:
            create_product(
                codigo=producto.codigo,
                nombre='Otro',
                categoria='Bebidas Calientes',
                precio=Decimal('1000'),
            )

        assert 'ya existe' in str(exc_info.value.detail)
        assert Producto.objects.filter(codigo=producto.codigo).count() == 1


# =============================================================================
# Product Updates
# =============================================================================

@pytest.mark.django_db
class TestUpdateProduct:
    """Tests for update_product()."""

    def test_update_price(self, producto):
        """Price changes and the audit row keeps both snapshots."""
        updated = update_product(product_id=producto.id, precio=Decimal('3900.00'))

        assert updated.precio == Decimal('3900.00')
        entry = Auditoria.objects.get(tabla='productos', accion='UPDATE')
        assert Decimal(str(entry.datos_anteriores['precio'])) == Decimal('3500.00')
        assert Decimal(str(entry.datos_nuevos['precio'])) == Decimal('3900.00')

    def test_update_availability_only(self, producto):
        """Omitted fields keep their value."""
        updated = update_product(product_id=producto.id, disponible=False)

        producto.refresh_from_db()
        assert updated.disponible is False
        assert producto.disponible is False
        assert producto.precio == Decimal('3500.00')

    def test_update_unknown_product(self):
        """Unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            update_product(product_id='no-existe', precio=Decimal('10'))

    def test_update_non_positive_price(self, producto):
        """Price must stay positive."""
        with pytest.raises(ValidacionError):
            update_product(product_id=producto.id, precio=Decimal('0'))

        producto.refresh_from_db()
        assert producto.precio == Decimal('3500.00')


# =============================================================================
# Search
# =============================================================================

@pytest.mark.django_db
class TestSearchProducts:
    """Tests for search_products()."""

    def test_search_without_filters(self, producto, otro_producto):
        """All products ordered by category then name."""
        rows = search_products()

        codigos = [row['codigo'] for row in rows]
        assert codigos == ['CAF-001', 'EMP-002']

    def test_search_is_case_insensitive(self, producto, otro_producto):
        """Text match ignores case."""
        rows = search_products(q='americano')

        assert [row['codigo'] for row in rows] == ['CAF-001']

    def test_search_matches_category(self, producto, otro_producto):
        """Category is part of the searched text."""
        rows = search_products(q='snacks')

        assert [row['codigo'] for row in rows] == ['EMP-002']

    def test_search_by_availability(self, producto, otro_producto):
        """disponible filters available/unavailable products."""
        available = search_products(disponible=True)
        unavailable = search_products(disponible=False)

        assert [row['codigo'] for row in available] == ['CAF-001']
        assert [row['codigo'] for row in unavailable] == ['EMP-002']

    def test_search_pattern_is_parameterized(self, producto):
        """Quotes in the search text are data, not SQL."""
        rows = search_products(q="' OR '1'='1")

        assert rows == []

    def test_search_wildcards_match_literally(self, producto, otro_producto):
        """% and _ in the search text are not LIKE wildcards."""
        Producto.objects.create(
            codigo='PRO_50',
            nombre='Combo 50% descuento',
            categoria='Promociones',
            precio=Decimal('6000.00'),
        )

        assert [row['codigo'] for row in search_products(q='%')] == ['PRO_50']
        assert [row['codigo'] for row in search_products(q='_')] == ['PRO_50']
        assert search_products(q='CAF_001') == []


# =============================================================================
# Points of Sale
# =============================================================================

@pytest.mark.django_db
class TestPointsOfSale:
    """Tests for point of sale seeding."""

    def test_seed_is_idempotent(self):
        """Seeding twice leaves exactly one row per default code."""
        seed_points_of_sale()
        seed_points_of_sale()

        codigos = [data['codigo'] for data in DEFAULT_POINTS_OF_SALE]
        assert PuntoVenta.objects.filter(codigo__in=codigos).count() == len(codigos)

    def test_seeded_ids_are_stable(self):
        """Seeded rows keep their well-known ids."""
        seed_points_of_sale()

        assert PuntoVenta.objects.get(id='pv-1').codigo == 'PV-CC-01'

    def test_list_ordered_by_code(self, punto_venta):
        """Listing is ordered by codigo."""
        seed_points_of_sale()
        codigos = list(list_points_of_sale().values_list('codigo', flat=True))

        assert codigos == sorted(codigos)
        assert 'PV-TEST-01' in codigos
