"""
Equivalent document numbering.

Numbers have the form ``PREFIX-YYYYMMDD-NNNNNN``: the issuing prefix, the
local calendar date and a 6-digit consecutive that restarts every day.
The consecutive comes from the atomic counter keyed ``PREFIX-YYYYMMDD``,
so concurrent allocations on the same day never repeat a number.

The date is the date in ``TIME_ZONE`` (America/Bogota by default), not
the UTC date. Between 19:00 and midnight local time the two differ, so
numbers issued in that window are keyed under the local day; a counter
history kept under UTC dates does not carry over for those hours.
"""
from datetime import date
from typing import Optional

from django.conf import settings
from django.utils import timezone

from apps.core.persistence import get_adapter
from apps.core.sequences import next_sequence_value

SEQUENCE_DIGITS = 6
MAX_CONSECUTIVE = 10 ** SEQUENCE_DIGITS - 1


def document_date(today: Optional[date] = None) -> str:
    """``YYYYMMDD`` of ``today``, or of the current local date."""
    return (today or timezone.localdate()).strftime('%Y%m%d')


def format_document_number(prefix: str, fecha: str, consecutivo: int) -> str:
    return f"{prefix}-{fecha}-{consecutivo:0{SEQUENCE_DIGITS}d}"


def allocate_document_number(prefix: Optional[str] = None, today: Optional[date] = None) -> str:
    """
    Allocate the next document number for the day.

    Call inside the transaction that stores the document: a rollback
    returns the number to the counter.

    Args:
        prefix: Issuing prefix, ``settings.DOCUMENT_PREFIX`` when omitted
        today: Date to number under, the current local date when omitted

    Returns:
        str: e.g. ``'UDINING-20250314-000001'``

    Raises:
        SequenceExhaustedError: If the day already has 999999 documents
    """
    prefix = prefix or settings.DOCUMENT_PREFIX
    fecha = document_date(today)
    consecutivo = next_sequence_value(f"{prefix}-{fecha}", max_value=MAX_CONSECUTIVE)
    return format_document_number(prefix, fecha, consecutivo)


def peek_next_document_number(prefix: Optional[str] = None, today: Optional[date] = None) -> str:
    """
    Number that follows the latest stored document of the day.

    Read-only diagnostic: it reserves nothing, so two callers can get the
    same answer. Use ``allocate_document_number`` to issue numbers.
    """
    prefix = prefix or settings.DOCUMENT_PREFIX
    fecha = document_date(today)

    row = get_adapter().get(
        """
        SELECT numero_documento
        FROM documentos_equivalentes
        WHERE numero_documento LIKE %s
        ORDER BY numero_documento DESC
        LIMIT 1
        """,
        [f"{prefix}-{fecha}-%"],
    )

    consecutivo = 1
    if row:
        consecutivo = int(row['numero_documento'].rsplit('-', 1)[1]) + 1
    return format_document_number(prefix, fecha, consecutivo)
