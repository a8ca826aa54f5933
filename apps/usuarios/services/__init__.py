"""Services for users, QR tokens and access validation."""

from .access import (
    latest_validations,
    validate_access,
)
from .qr import (
    make_qr_png,
    render_user_qr,
)
from .registration import (
    generate_qr_token,
    get_user,
    list_users,
    register_user,
    update_user,
)

__all__ = [
    # Registration
    'generate_qr_token',
    'get_user',
    'list_users',
    'register_user',
    'update_user',
    # QR
    'make_qr_png',
    'render_user_qr',
    # Access validation
    'latest_validations',
    'validate_access',
]
