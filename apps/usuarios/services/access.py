"""
Access validation at the points of sale.

A user presents a cedula or their QR token; the check succeeds only for an
existing user in ACTIVO state. Every attempt, successful or not, is
appended to ``validaciones_acceso``.
"""
import logging
from typing import Optional, Tuple

from apps.catalogo.models import PuntoVenta
from apps.core.exceptions import ValidacionError

from ..models import EstadoUsuario, Usuario, ValidacionAcceso

logger = logging.getLogger(__name__)


def _resolve_user(cedula, codigo_qr):
    lookup = {'codigo_qr': codigo_qr} if codigo_qr else {'cedula': cedula}
    return Usuario.objects.filter(**lookup).first()


def validate_access(
    *,
    metodo_validacion: str,
    cedula: Optional[str] = None,
    codigo_qr: Optional[str] = None,
    id_punto_venta: Optional[str] = None,
    ip: Optional[str] = None
) -> Tuple[bool, Optional[Usuario], str]:
    """
    Check whether a user may be served.

    Args:
        metodo_validacion: How the user identified (QR, CEDULA, MANUAL)
        cedula: National id, used when no QR token is given
        codigo_qr: Scanned QR token, takes precedence over cedula
        id_punto_venta: Point of sale where the check happens
        ip: Origin address of the terminal

    Returns:
        Tuple of (valid, user or None, message)

    Raises:
        ValidacionError: If neither cedula nor codigo_qr is given, or the
            point of sale is unknown
    """
    if not cedula and not codigo_qr:
        raise ValidacionError('Indique cedula o codigo_qr')

    punto_venta = None
    if id_punto_venta:
        punto_venta = PuntoVenta.objects.filter(id=id_punto_venta).first()
        if punto_venta is None:
            raise ValidacionError('Punto de venta no válido')

    usuario = _resolve_user(cedula, codigo_qr)

    if usuario is None:
        valid, mensaje = False, 'Usuario no encontrado'
    elif usuario.estado != EstadoUsuario.ACTIVO:
        valid, mensaje = False, f'Usuario en estado {usuario.estado}'
    else:
        valid, mensaje = True, 'Acceso autorizado'

    ValidacionAcceso.objects.create(
        cedula=usuario.cedula if usuario else (cedula or ''),
        metodo_validacion=metodo_validacion,
        punto_venta=punto_venta,
        exitosa=valid,
        ip_validacion=ip,
        mensaje_error=None if valid else mensaje,
    )

    if valid:
        logger.info('Access granted to %s (%s)', usuario.cedula, metodo_validacion)
    else:
        logger.warning('Access denied (%s): %s', metodo_validacion, mensaje)

    return valid, usuario, mensaje


def latest_validations(limit: int = 100):
    return ValidacionAcceso.objects.select_related('punto_venta')[:limit]
