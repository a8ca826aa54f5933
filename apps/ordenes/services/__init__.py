"""Services for the order intake workflow and order queries."""

from .order_intake import (
    TAX_RATE,
    calculate_totals,
    create_order,
)
from .order_status import change_order_status
from .selectors import (
    get_order,
    list_orders,
)

__all__ = [
    # Intake
    'TAX_RATE',
    'calculate_totals',
    'create_order',
    # Status
    'change_order_status',
    # Queries
    'get_order',
    'list_orders',
]
