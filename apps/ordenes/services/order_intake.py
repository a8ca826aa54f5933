"""
Order intake workflow.

Creating an order is one transaction:

    1. allocate the order ``numero`` (atomic counter ``ordenes``)
    2. insert the order and its lines
    3. issue the equivalent document (number, CUFE, QR payload)
    4. append the audit entry

Any failure rolls back every step, including both consumed counter values.
"""
import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from django.db import transaction

from apps.auditoria.services import record_audit, snapshot
from apps.catalogo.models import Producto, PuntoVenta
from apps.core.exceptions import NotFoundError, ValidacionError
from apps.core.sequences import next_sequence_value
from apps.facturacion.services import issue_equivalent_document
from apps.usuarios.models import Usuario

from ..models import DetalleOrden, Orden

logger = logging.getLogger(__name__)

TAX_RATE = Decimal('0.19')
CENTS = Decimal('0.01')
ORDER_SEQUENCE_KEY = 'ordenes'


def _money(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def _clean_items(items):
    """Normalize line items; raises ValidacionError on the first bad one."""
    cleaned = []
    for position, item in enumerate(items, start=1):
        id_producto = item.get('id_producto')
        cantidad = item.get('cantidad')
        precio_unitario = item.get('precio_unitario')

        if not id_producto or cantidad is None or precio_unitario is None:
            raise ValidacionError(
                f'Ítem {position}: campos requeridos id_producto, cantidad, precio_unitario'
            )
        if isinstance(cantidad, bool) or not isinstance(cantidad, int) or cantidad <= 0:
            raise ValidacionError(f'Ítem {position}: la cantidad debe ser un entero positivo')
        try:
            precio_unitario = Decimal(str(precio_unitario))
        except InvalidOperation:
            raise ValidacionError(f'Ítem {position}: precio_unitario no es un número')
        if precio_unitario < 0:
            raise ValidacionError(f'Ítem {position}: precio_unitario no puede ser negativo')

        cleaned.append({
            'id_producto': id_producto,
            'cantidad': cantidad,
            'precio_unitario': _money(precio_unitario),
            'notas': item.get('notas'),
        })
    return cleaned


def calculate_totals(items) -> dict:
    """
    Order money fields from cleaned line items.

    Returns:
        dict: ``subtotal``, ``impuestos`` (19% of subtotal, half-up to
        cents) and ``total``
    """
    subtotal = _money(sum(
        (item['cantidad'] * item['precio_unitario'] for item in items),
        Decimal('0')
    ))
    impuestos = _money(subtotal * TAX_RATE)
    return {
        'subtotal': subtotal,
        'impuestos': impuestos,
        'total': subtotal + impuestos,
    }


def create_order(
    *,
    cedula: str,
    id_punto_venta: str,
    items: list,
    metodo_pago: Optional[str] = None,
    metodo_validacion: Optional[str] = None,
    ip: Optional[str] = None
):
    """
    Create an order, its lines and its equivalent document.

    Unit prices are taken from the request as given; they are not checked
    against the catalog price.

    Args:
        cedula: Buyer's cedula
        id_punto_venta: Point of sale id
        items: Dicts with ``id_producto``, ``cantidad``, ``precio_unitario``
            and optional ``notas``
        metodo_pago: Payment method label
        metodo_validacion: How the buyer was identified
        ip: Origin address, for the audit entry

    Returns:
        tuple: (Orden, DocumentoEquivalente)

    Raises:
        ValidacionError: Missing fields, empty or malformed items, unknown
            point of sale or product
        NotFoundError: If the user doesn't exist
    """
    if not cedula or not id_punto_venta or not items:
        raise ValidacionError('Campos requeridos: cedula, id_punto_venta, items')

    cleaned = _clean_items(items)

    usuario = Usuario.objects.filter(cedula=cedula).first()
    if usuario is None:
        raise NotFoundError('Usuario no encontrado')

    punto_venta = PuntoVenta.objects.filter(id=id_punto_venta).first()
    if punto_venta is None:
        raise ValidacionError('Punto de venta no válido')

    product_ids = {item['id_producto'] for item in cleaned}
    productos = Producto.objects.in_bulk(product_ids)
    unknown = sorted(product_ids - set(productos))
    if unknown:
        raise ValidacionError(f"Producto no encontrado: {', '.join(unknown)}")

    totals = calculate_totals(cleaned)

    with transaction.atomic():
        orden = Orden.objects.create(
            numero=next_sequence_value(ORDER_SEQUENCE_KEY),
            usuario=usuario,
            punto_venta=punto_venta,
            metodo_pago=metodo_pago,
            metodo_validacion=metodo_validacion,
            **totals
        )

        DetalleOrden.objects.bulk_create([
            DetalleOrden(
                orden=orden,
                producto=productos[item['id_producto']],
                cantidad=item['cantidad'],
                precio_unitario=item['precio_unitario'],
                subtotal=_money(item['cantidad'] * item['precio_unitario']),
                notas=item['notas'],
            )
            for item in cleaned
        ])

        documento = issue_equivalent_document(orden)

        datos_nuevos = snapshot(orden)
        datos_nuevos['items'] = cleaned
        datos_nuevos['numero_documento'] = documento.numero_documento
        record_audit(
            tabla='ordenes',
            id_registro=orden.id,
            accion='INSERT',
            datos_nuevos=datos_nuevos,
            cedula=usuario.cedula,
            ip=ip,
        )

    logger.info(
        'Order #%s created for %s at %s: total %s, document %s',
        orden.numero, usuario.cedula, punto_venta.codigo,
        orden.total, documento.numero_documento
    )
    return orden, documento
