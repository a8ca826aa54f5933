"""Issuing and listing equivalent documents."""

import logging
from typing import Optional

from django.utils import timezone

from ..models import DocumentoEquivalente, EstadoEnvio
from .cufe import (
    build_document_qr,
    company_nit,
    format_emission_date,
    format_total,
    generate_cufe,
)
from .numbering import allocate_document_number

logger = logging.getLogger(__name__)


def issue_equivalent_document(orden, *, prefix: Optional[str] = None) -> DocumentoEquivalente:
    """
    Number, fingerprint and store the equivalent document of an order.

    Must run inside the caller's transaction so the document, the order
    and the consumed number commit or roll back together.

    Args:
        orden: Saved ``Orden`` with its final total
        prefix: Document prefix override

    Returns:
        DocumentoEquivalente in PENDIENTE send state
    """
    numero_documento = allocate_document_number(prefix)
    fecha_emision = timezone.now().replace(microsecond=0)
    fecha = format_emission_date(fecha_emision)
    total = format_total(orden.total)
    nit = company_nit()

    cufe = generate_cufe(numero_documento, fecha, total, nit)
    documento = DocumentoEquivalente.objects.create(
        orden=orden,
        numero_documento=numero_documento,
        cufe=cufe,
        qr_documento=build_document_qr(numero_documento, fecha, total, nit, cufe),
        fecha_emision=fecha_emision,
        estado_envio=EstadoEnvio.PENDIENTE,
    )

    logger.info('Equivalent document %s issued for order %s', numero_documento, orden.numero)
    return documento


def list_documents():
    return DocumentoEquivalente.objects.select_related('orden').all()
