"""QR code images for user tokens."""

from io import BytesIO

import qrcode

from apps.core.exceptions import NotFoundError

from .registration import get_user


def make_qr_png(data: str) -> bytes:
    """
    Encode ``data`` as a QR code and return the PNG bytes.

    Uses error correction level M (15% recovery), readable from a phone
    screen at the point of sale.
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    img.save(buffer)
    return buffer.getvalue()


def render_user_qr(cedula: str) -> bytes:
    """
    PNG image of a user's QR token.

    Raises:
        NotFoundError: If the user doesn't exist or has no token
    """
    usuario = get_user(cedula)
    if not usuario.codigo_qr:
        raise NotFoundError('Usuario sin código QR')
    return make_qr_png(usuario.codigo_qr)
