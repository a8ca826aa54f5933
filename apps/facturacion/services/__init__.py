"""Services for equivalent documents: numbering, CUFE and issuing."""

from .cufe import (
    build_document_qr,
    company_nit,
    format_emission_date,
    format_total,
    generate_cufe,
)
from .documents import (
    issue_equivalent_document,
    list_documents,
)
from .numbering import (
    MAX_CONSECUTIVE,
    allocate_document_number,
    document_date,
    peek_next_document_number,
)

__all__ = [
    # CUFE
    'build_document_qr',
    'company_nit',
    'format_emission_date',
    'format_total',
    'generate_cufe',
    # Documents
    'issue_equivalent_document',
    'list_documents',
    # Numbering
    'MAX_CONSECUTIVE',
    'allocate_document_number',
    'document_date',
    'peek_next_document_number',
]
