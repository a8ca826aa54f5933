"""Services for audit and regulatory configuration."""

from .audit import (
    SYSTEM_USER,
    latest_entries,
    record_audit,
    snapshot,
)
from .configuration import (
    DEFAULT_PARAMETERS,
    get_parameter,
    list_active_parameters,
    seed_parameters,
)

__all__ = [
    # Audit
    'SYSTEM_USER',
    'latest_entries',
    'record_audit',
    'snapshot',
    # Configuration
    'DEFAULT_PARAMETERS',
    'get_parameter',
    'list_active_parameters',
    'seed_parameters',
]
