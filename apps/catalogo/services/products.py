"""Product catalog operations service."""

import logging
from decimal import Decimal
from typing import Optional

from django.db import IntegrityError, transaction

from apps.auditoria.services import record_audit, snapshot
from apps.core.exceptions import ConflictError, NotFoundError, ValidacionError
from apps.core.persistence import get_adapter

from ..models import Producto

logger = logging.getLogger(__name__)


def create_product(
    *,
    codigo: str,
    nombre: str,
    categoria: str,
    precio: Decimal,
    descripcion: Optional[str] = None,
    ip: Optional[str] = None
) -> Producto:
    """
    Add a product to the catalog.

    Args:
        codigo: Unique product code
        nombre: Display name
        categoria: Free-text category
        precio: Unit price, must be positive
        descripcion: Optional description
        ip: Origin address, for the audit entry

    Returns:
        Created product

    Raises:
        ValidacionError: If the price is not positive
        ConflictError: If a product with the same code exists
    """
    if precio is None or precio <= 0:
        raise ValidacionError('El precio debe ser mayor que cero')

    try:
        with transaction.atomic():
            producto = Producto.objects.create(
                codigo=codigo,
                nombre=nombre,
                descripcion=descripcion,
                categoria=categoria,
                precio=precio,
            )
    except IntegrityError:
        raise ConflictError('Error al crear producto o ya existe')

    logger.info('Product created: %s (%s)', producto.codigo, producto.id)
    record_audit(
        tabla='productos',
        id_registro=producto.id,
        accion='INSERT',
        datos_nuevos=snapshot(producto),
        ip=ip,
    )
    return producto


@transaction.atomic
def update_product(
    *,
    product_id: str,
    precio: Optional[Decimal] = None,
    disponible: Optional[bool] = None,
    ip: Optional[str] = None
) -> Producto:
    """
    Change a product's price or availability.

    Raises:
        NotFoundError: If the product doesn't exist
        ValidacionError: If the new price is not positive
    """
    try:
        producto = Producto.objects.select_for_update().get(id=product_id)
    except Producto.DoesNotExist:
        raise NotFoundError('Producto no encontrado')

    anterior = snapshot(producto)

    if precio is not None:
        if precio <= 0:
            raise ValidacionError('El precio debe ser mayor que cero')
        producto.precio = precio

    if disponible is not None:
        producto.disponible = disponible

    producto.save(update_fields=['precio', 'disponible'])

    record_audit(
        tabla='productos',
        id_registro=producto.id,
        accion='UPDATE',
        datos_anteriores=anterior,
        datos_nuevos=snapshot(producto),
        ip=ip,
    )
    return producto


def search_products(q: Optional[str] = None, disponible: Optional[bool] = None) -> list:
    """
    Catalog rows matching a case-insensitive text search.

    Args:
        q: Matched against codigo, nombre and categoria
        disponible: Restrict to available (True) or unavailable (False)

    Returns:
        List of product rows as dicts, ordered by category and name
    """
    db = get_adapter()
    like = f"{db.like_operator} %s {db.like_escape}"
    conditions = []
    params = []

    if q:
        pattern = f"%{db.escape_like(q.strip())}%"
        conditions.append(
            f"(codigo {like} OR nombre {like} OR categoria {like})"
        )
        params.extend([pattern, pattern, pattern])

    if disponible is not None:
        conditions.append("disponible = %s")
        params.append(disponible)

    where = f"WHERE {' AND '.join(conditions)}" if conditions else ''
    return db.all(
        f"""
        SELECT id, codigo, nombre, descripcion, categoria, precio,
               disponible, fecha_creacion
        FROM productos
        {where}
        ORDER BY categoria, nombre
        """,
        params,
    )
