"""Order status transitions service."""

import logging
from typing import Optional

from django.db import transaction

from apps.auditoria.services import record_audit, snapshot
from apps.core.exceptions import NotFoundError, ValidacionError

from ..models import EstadoOrden, Orden

logger = logging.getLogger(__name__)


@transaction.atomic
def change_order_status(*, order_id: str, estado: str, ip: Optional[str] = None) -> Orden:
    """
    Set an order's status.

    Any of the four states may follow any other.

    Raises:
        ValidacionError: If estado is not PENDIENTE, PREPARANDO, COMPLETADA
            or CANCELADA (checked before the order lookup)
        NotFoundError: If the order doesn't exist
    """
    if estado not in EstadoOrden.values:
        raise ValidacionError('Estado no válido')

    try:
        orden = Orden.objects.select_for_update().get(id=order_id)
    except Orden.DoesNotExist:
        raise NotFoundError('Orden no encontrada')

    anterior = snapshot(orden)
    orden.estado = estado
    orden.save(update_fields=['estado'])

    logger.info('Order #%s: %s -> %s', orden.numero, anterior['estado'], estado)
    record_audit(
        tabla='ordenes',
        id_registro=orden.id,
        accion='UPDATE',
        datos_anteriores=anterior,
        datos_nuevos={'estado': estado},
        cedula=orden.usuario_id,
        ip=ip,
    )
    return orden
