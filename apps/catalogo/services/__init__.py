"""Services for the points of sale and product catalog."""

from .points_of_sale import (
    DEFAULT_POINTS_OF_SALE,
    list_points_of_sale,
    seed_points_of_sale,
)
from .products import (
    create_product,
    search_products,
    update_product,
)

__all__ = [
    # Points of sale
    'DEFAULT_POINTS_OF_SALE',
    'list_points_of_sale',
    'seed_points_of_sale',
    # Products
    'create_product',
    'search_products',
    'update_product',
]
