"""
CUFE (código único de factura electrónica) and document QR payload.

The CUFE here is a content fingerprint: uppercase hex SHA-256 of the
document number, emission timestamp, total and company NIT concatenated
without separators. It is not the DIAN signed CUFE.
"""
import hashlib
from datetime import datetime
from decimal import Decimal

from django.conf import settings
from django.utils import timezone

from apps.auditoria.services import get_parameter


def generate_cufe(numero_documento: str, fecha_emision: str, total: str, nit_empresa: str) -> str:
    """
    Fingerprint a document.

    Pure function of its four string inputs.

    Returns:
        str: 64 uppercase hex characters
    """
    data = f"{numero_documento}{fecha_emision}{total}{nit_empresa}"
    return hashlib.sha256(data.encode('utf-8')).hexdigest().upper()


def format_emission_date(fecha_emision: datetime) -> str:
    """Local ISO-8601 timestamp with seconds, e.g. ``2025-03-14T12:30:05-05:00``."""
    return timezone.localtime(fecha_emision).isoformat(timespec='seconds')


def format_total(total) -> str:
    return f"{Decimal(total):.2f}"


def company_nit() -> str:
    """NIT from the active NIT_EMPRESA parameter, else ``settings.COMPANY_NIT``."""
    return get_parameter('NIT_EMPRESA', default=settings.COMPANY_NIT)


def build_document_qr(numero_documento: str, fecha_emision: str, total: str, nit_empresa: str, cufe: str) -> str:
    """Text encoded in the document's printed QR."""
    return '\n'.join([
        f"NumDoc: {numero_documento}",
        f"FecDoc: {fecha_emision}",
        f"NitEmisor: {nit_empresa}",
        f"ValTotal: {total}",
        f"CUFE: {cufe}",
    ])
