"""
Audit recorder.

Appends one immutable ``Auditoria`` row per mutation with JSON snapshots of
the record before and after the change.

Failure policy is fail-open: the insert runs in its own savepoint, and a
database error is logged at ERROR level on ``apps.auditoria`` (routed to
the console and to ``mail_admins``) instead of being raised. The operation
that triggered the audit entry is never blocked by it.
"""
import logging
from typing import Any, Optional

from django.db import DatabaseError, transaction

from ..models import AccionAuditoria, Auditoria

logger = logging.getLogger(__name__)

SYSTEM_USER = 'SISTEMA'


def snapshot(instance, exclude=()) -> dict:
    """
    Serializable dict of a model instance's concrete fields.

    Keys are column names, so the snapshot mirrors the table row; foreign
    keys hold the raw referenced id.
    """
    data = {}
    for field in instance._meta.concrete_fields:
        if field.name in exclude:
            continue
        data[field.column] = field.value_from_object(instance)
    return data


def record_audit(
    *,
    tabla: str,
    id_registro: Any,
    accion: str,
    datos_anteriores: Optional[dict] = None,
    datos_nuevos: Optional[dict] = None,
    usuario: str = SYSTEM_USER,
    cedula: Optional[str] = None,
    ip: Optional[str] = None,
) -> Optional[Auditoria]:
    """
    Append an audit entry.

    Args:
        tabla: Table that was mutated, e.g. ``'ordenes'``.
        id_registro: Primary key of the mutated row.
        accion: One of ``AccionAuditoria`` (INSERT, UPDATE, DELETE).
        datos_anteriores: State before the change (empty for INSERT).
        datos_nuevos: State or payload after the change.
        usuario: Acting user, ``'SISTEMA'`` when not known.
        cedula: Cedula of the user the record relates to, if any.
        ip: Origin address of the request.

    Returns:
        The created entry, or None if the write failed.

    Raises:
        ValueError: If ``accion`` is not a valid action. This is a caller
            bug, not an audit failure, so it is not swallowed.
    """
    if accion not in AccionAuditoria.values:
        raise ValueError(f"Invalid audit action: {accion}")

    try:
        with transaction.atomic():
            return Auditoria.objects.create(
                tabla=tabla,
                id_registro=str(id_registro),
                accion=accion,
                usuario=usuario,
                cedula_relacionada=cedula,
                datos_anteriores=datos_anteriores or {},
                datos_nuevos=datos_nuevos or {},
                ip_origen=ip,
            )
    except DatabaseError:
        logger.exception(
            'Audit write failed for %s %s:%s (usuario=%s)',
            accion, tabla, id_registro, usuario,
        )
        return None


def latest_entries(limit: int = 100):
    """Newest audit entries first."""
    return Auditoria.objects.order_by('-fecha_hora')[:limit]
