"""
Service layer tests for the audit and configuration app.

Tests cover:
- Audit entries and snapshots
- Fail-open behaviour when the audit write fails
- Regulatory parameter lookups and seeding
"""

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from apps.auditoria.models import Auditoria, ConfiguracionNormativa
from apps.auditoria.services import (
    DEFAULT_PARAMETERS,
    SYSTEM_USER,
    get_parameter,
    latest_entries,
    list_active_parameters,
    record_audit,
    seed_parameters,
    snapshot,
)
from apps.catalogo.models import Producto
from apps.catalogo.services import create_product


@pytest.mark.django_db
class TestRecordAudit:
    """Tests for record_audit()."""

    def test_record_audit_stores_entry(self):
        entry = record_audit(
            tabla='ordenes',
            id_registro='abc',
            accion='UPDATE',
            datos_anteriores={'estado': 'COMPLETADA'},
            datos_nuevos={'estado': 'CANCELADA'},
            cedula='111',
            ip='127.0.0.1',
        )

        entry.refresh_from_db()
        assert entry.usuario == SYSTEM_USER
        assert entry.cedula_relacionada == '111'
        assert entry.datos_anteriores == {'estado': 'COMPLETADA'}
        assert entry.datos_nuevos == {'estado': 'CANCELADA'}
        assert entry.fecha_hora is not None

    def test_decimal_and_datetime_are_serialized(self):
        """Snapshots with Decimal and datetime values are stored as JSON."""
        entry = record_audit(
            tabla='ordenes',
            id_registro='abc',
            accion='INSERT',
            datos_nuevos={
                'total': Decimal('11900.00'),
                'fecha': datetime(2025, 3, 14, 12, 0, tzinfo=dt_timezone.utc),
            },
        )

        entry.refresh_from_db()
        assert entry.datos_nuevos['total'] == '11900.00'
        assert entry.datos_nuevos['fecha'].startswith('2025-03-14T12:00:00')

    def test_invalid_action_raises(self):
        with pytest.raises(ValueError):
            record_audit(tabla='ordenes', id_registro='abc', accion='UPSERT')

        assert not Auditoria.objects.exists()

    def test_audit_failure_is_fail_open(self):
        """A failed audit write is logged and returns None."""
        with patch.object(Auditoria.objects, 'create', side_effect=DatabaseError('disk full')), \
                patch('apps.auditoria.services.audit.logger') as mock_logger:
            entry = record_audit(tabla='ordenes', id_registro='abc', accion='INSERT')

        assert entry is None
        mock_logger.exception.assert_called_once()

    def test_audit_failure_does_not_block_mutation(self):
        """The audited operation commits even when its audit entry cannot be written."""
        with patch.object(Auditoria.objects, 'create', side_effect=DatabaseError('disk full')), \
                patch('apps.auditoria.services.audit.logger'):
            producto = create_product(
                codigo='JUG-001',
                nombre='Jugo de Mora',
                categoria='Bebidas Frías',
                precio=Decimal('4000'),
            )

        assert Producto.objects.filter(id=producto.id).exists()
        assert not Auditoria.objects.exists()

    def test_latest_entries_newest_first(self, audit_entries):
        entries = list(latest_entries(limit=2))

        assert len(entries) == 2
        assert entries[0].fecha_hora >= entries[1].fecha_hora


@pytest.mark.django_db
class TestSnapshot:
    """Tests for snapshot()."""

    def test_snapshot_uses_column_names(self):
        producto = Producto.objects.create(
            codigo='SNK-001',
            nombre='Papas',
            categoria='Snacks',
            precio=Decimal('2500.00'),
        )

        data = snapshot(producto, exclude=('fecha_creacion',))

        assert data['codigo'] == 'SNK-001'
        assert data['precio'] == Decimal('2500.00')
        assert 'fecha_creacion' not in data


@pytest.mark.django_db
class TestConfiguration:
    """Tests for regulatory parameters."""

    def test_seed_is_idempotent(self):
        seed_parameters()
        seed_parameters()

        nombres = [params['parametro'] for params in DEFAULT_PARAMETERS]
        assert ConfiguracionNormativa.objects.filter(parametro__in=nombres).count() == len(nombres)

    def test_get_parameter(self, parametros):
        assert get_parameter('PREFIJO_DOCUMENTO') == 'UDINING'
        assert get_parameter('TARIFA_IVA') == '0.19'

    def test_get_parameter_default(self, db):
        assert get_parameter('NO_EXISTE', default='x') == 'x'

    def test_inactive_parameter_is_ignored(self, parametros):
        ConfiguracionNormativa.objects.filter(parametro='NIT_EMPRESA').update(activo=False)

        assert get_parameter('NIT_EMPRESA') is None
        assert 'NIT_EMPRESA' not in list_active_parameters().values_list('parametro', flat=True)
