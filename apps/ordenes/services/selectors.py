"""Read-side order queries."""

from apps.core.exceptions import NotFoundError
from apps.core.persistence import get_adapter

ORDER_LIST_SQL = """
    SELECT o.id, o.numero, o.cedula, o.id_punto_venta, o.fecha,
           o.subtotal, o.impuestos, o.total, o.metodo_pago,
           o.metodo_validacion, o.estado,
           u.nombre AS nombre_usuario,
           p.nombre AS punto_venta
    FROM ordenes o
    JOIN usuarios u ON o.cedula = u.cedula
    JOIN puntos_venta p ON o.id_punto_venta = p.id
"""


def list_orders():
    """Every order joined with its user's and point of sale's names, newest first."""
    return get_adapter().all(f"{ORDER_LIST_SQL} ORDER BY o.numero DESC")


def get_order(order_id):
    """
    One order with its lines under ``detalles``.

    Raises:
        NotFoundError: If the order doesn't exist
    """
    db = get_adapter()
    orden = db.get(f"{ORDER_LIST_SQL} WHERE o.id = %s", [order_id])
    if orden is None:
        raise NotFoundError('Orden no encontrada')

    orden['detalles'] = db.all(
        """
        SELECT d.id, d.id_orden, d.id_producto, d.cantidad,
               d.precio_unitario, d.subtotal, d.notas,
               pr.nombre AS nombre_producto
        FROM detalle_ordenes d
        JOIN productos pr ON d.id_producto = pr.id
        WHERE d.id_orden = %s
        ORDER BY pr.nombre
        """,
        [order_id],
    )
    return orden
