"""
Service layer tests for the fiscal documents app.

Tests cover:
- CUFE purity and sensitivity to every input
- Daily document numbering and its 6-digit bound
- The read-only next number preview
- Issuing a document for an order
"""

import re
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest
from django.test import override_settings

from apps.auditoria.models import ConfiguracionNormativa
from apps.core.exceptions import SequenceExhaustedError
from apps.core.models import Secuencia
from apps.core.sequences import current_sequence_value
from apps.facturacion.services import (
    MAX_CONSECUTIVE,
    allocate_document_number,
    company_nit,
    document_date,
    format_emission_date,
    format_total,
    generate_cufe,
    peek_next_document_number,
)

CUFE_ARGS = ('UDINING-20250314-000001', '2025-03-14T12:30:05-05:00', '11900.00', '860012357-6')


# =============================================================================
# CUFE
# =============================================================================

class TestGenerateCufe:
    """Tests for generate_cufe()."""

    def test_cufe_is_uppercase_sha256(self):
        cufe = generate_cufe(*CUFE_ARGS)

        assert re.fullmatch(r'[0-9A-F]{64}', cufe)

    def test_cufe_is_pure(self):
        """Same inputs, same output."""
        assert generate_cufe(*CUFE_ARGS) == generate_cufe(*CUFE_ARGS)

    def test_cufe_known_value(self):
        """Hash of the plain concatenation of the inputs."""
        import hashlib

        expected = hashlib.sha256(''.join(CUFE_ARGS).encode()).hexdigest().upper()
        assert generate_cufe(*CUFE_ARGS) == expected

    @pytest.mark.parametrize('position', range(4))
    def test_cufe_changes_with_every_input(self, position):
        """Changing any single input changes the CUFE."""
        changed = list(CUFE_ARGS)
        changed[position] = changed[position] + 'X'

        assert generate_cufe(*changed) != generate_cufe(*CUFE_ARGS)

    def test_format_total_two_decimals(self):
        assert format_total(Decimal('11900')) == '11900.00'
        assert format_total(Decimal('0.5')) == '0.50'

    def test_format_emission_date_local(self):
        """Timestamps are rendered in local time with seconds."""
        utc = datetime(2025, 3, 14, 17, 30, 5, 123456, tzinfo=ZoneInfo('UTC'))

        assert format_emission_date(utc) == '2025-03-14T12:30:05-05:00'


@pytest.mark.django_db
class TestCompanyNit:
    """Tests for company_nit()."""

    def test_nit_from_active_parameter(self):
        ConfiguracionNormativa.objects.update_or_create(
            parametro='NIT_EMPRESA',
            defaults={'valor': '900123456-1', 'activo': True},
        )

        assert company_nit() == '900123456-1'

    @override_settings(COMPANY_NIT='800000000-0')
    def test_nit_falls_back_to_setting(self):
        ConfiguracionNormativa.objects.filter(parametro='NIT_EMPRESA').update(activo=False)

        assert company_nit() == '800000000-0'


# =============================================================================
# Numbering
# =============================================================================

@pytest.mark.django_db
class TestAllocateDocumentNumber:
    """Tests for allocate_document_number()."""

    @override_settings(TIME_ZONE='America/Bogota')
    def test_document_date_is_local_date(self):
        """At 20:00 in Bogota the UTC date is already the next day."""
        ahora = datetime(2025, 3, 15, 1, 0, tzinfo=ZoneInfo('UTC'))
        with patch('django.utils.timezone.now', return_value=ahora):
            assert document_date() == '20250314'

    def test_first_number_of_the_day(self):
        numero = allocate_document_number(today=date(2025, 3, 14))

        assert numero == 'UDINING-20250314-000001'

    def test_numbers_increase_by_one(self):
        dia = date(2025, 3, 14)
        numeros = [allocate_document_number(today=dia) for _ in range(3)]

        assert numeros == [
            'UDINING-20250314-000001',
            'UDINING-20250314-000002',
            'UDINING-20250314-000003',
        ]

    def test_each_day_restarts(self):
        allocate_document_number(today=date(2025, 3, 14))
        allocate_document_number(today=date(2025, 3, 14))

        assert allocate_document_number(today=date(2025, 3, 15)) == 'UDINING-20250315-000001'

    def test_custom_prefix(self):
        assert allocate_document_number('POS', today=date(2025, 1, 2)) == 'POS-20250102-000001'

    @override_settings(DOCUMENT_PREFIX='CAFE')
    def test_prefix_from_settings(self):
        assert allocate_document_number(today=date(2025, 1, 2)) == 'CAFE-20250102-000001'

    def test_exhausted_day_raises(self):
        """The consecutive never grows past 6 digits."""
        Secuencia.objects.create(clave='UDINING-20250314', valor=MAX_CONSECUTIVE)

        with pytest.raises(SequenceExhaustedError):
            allocate_document_number(today=date(2025, 3, 14))

        assert current_sequence_value('UDINING-20250314') == MAX_CONSECUTIVE

    def test_last_number_of_the_day(self):
        Secuencia.objects.create(clave='UDINING-20250314', valor=MAX_CONSECUTIVE - 1)

        assert allocate_document_number(today=date(2025, 3, 14)) == 'UDINING-20250314-999999'


@pytest.mark.django_db
class TestPeekNextDocumentNumber:
    """Tests for peek_next_document_number()."""

    def test_peek_without_documents(self):
        assert peek_next_document_number(today=date(2025, 3, 14)) == 'UDINING-20250314-000001'

    def test_peek_follows_latest_document(self, orden):
        numero = orden.documento.numero_documento
        fecha = date(int(numero[8:12]), int(numero[12:14]), int(numero[14:16]))

        assert peek_next_document_number(today=fecha).endswith('-000002')

    def test_peek_reserves_nothing(self, orden):
        numero = orden.documento.numero_documento
        fecha = date(int(numero[8:12]), int(numero[12:14]), int(numero[14:16]))

        assert peek_next_document_number(today=fecha) == peek_next_document_number(today=fecha)


# =============================================================================
# Issuing
# =============================================================================

@pytest.mark.django_db
class TestIssueEquivalentDocument:
    """Tests for the document stored by the order workflow."""

    def test_document_fields(self, orden):
        documento = orden.documento

        assert documento.estado_envio == 'PENDIENTE'
        assert documento.tipo_documento == 'DOCUMENTO_EQUIVALENTE'
        assert documento.cumple_resolucion_000165 is True
        assert documento.intentos_envio == 0

    def test_cufe_recomputable_from_stored_fields(self, orden):
        """The stored CUFE matches the stored number, emission time and total."""
        documento = orden.documento
        documento.refresh_from_db()

        expected = generate_cufe(
            documento.numero_documento,
            format_emission_date(documento.fecha_emision),
            format_total(orden.total),
            company_nit(),
        )
        assert documento.cufe == expected

    def test_qr_payload_contains_cufe(self, orden):
        documento = orden.documento

        assert documento.numero_documento in documento.qr_documento
        assert f'CUFE: {documento.cufe}' in documento.qr_documento
        assert 'ValTotal: 11900.00' in documento.qr_documento
