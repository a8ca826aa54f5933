"""User registration and profile updates service."""

import logging
import secrets
import string
import time
from typing import Optional

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.auditoria.services import record_audit, snapshot
from apps.core.exceptions import ConflictError, NotFoundError, ValidacionError

from ..models import EstadoUsuario, TipoDocumento, Usuario

logger = logging.getLogger(__name__)

QR_PREFIX = 'UDINING'
QR_RANDOM_ALPHABET = string.ascii_uppercase + string.digits


def generate_qr_token(cedula: str) -> str:
    """
    Build the token printed in a user's QR code.

    Format: ``UDINING:{cedula}:{epoch_ms}:{RAND6}``
    """
    epoch_ms = int(time.time() * 1000)
    random_part = ''.join(secrets.choice(QR_RANDOM_ALPHABET) for _ in range(6))
    return f"{QR_PREFIX}:{cedula}:{epoch_ms}:{random_part}"


def list_users():
    return Usuario.objects.all()


def get_user(cedula: str) -> Usuario:
    """
    Raises:
        NotFoundError: If no user has this cedula
    """
    try:
        return Usuario.objects.get(cedula=cedula)
    except Usuario.DoesNotExist:
        raise NotFoundError('Usuario no encontrado')


def register_user(
    *,
    cedula: str,
    nombre: str,
    correo: str,
    tipo_documento: Optional[str] = None,
    telefono: Optional[str] = None,
    terminos_aceptados: bool = False,
    validacion_legal: bool = False,
    ip: Optional[str] = None
) -> Usuario:
    """
    Register a new user and issue their QR token.

    Args:
        cedula: National id, primary key
        nombre: Full name
        correo: Email address
        tipo_documento: Document type, CC when omitted
        telefono: Optional phone number
        terminos_aceptados: Terms of service accepted at registration
        validacion_legal: Personal data processing authorized
        ip: Origin address, for the audit entry

    Returns:
        Created user

    Raises:
        ValidacionError: If a required field is blank
        ConflictError: If the cedula (or QR token) is already registered
    """
    missing = [
        name for name, value in (('cedula', cedula), ('nombre', nombre), ('correo', correo))
        if not value
    ]
    if missing:
        raise ValidacionError(f"Campos requeridos: {', '.join(missing)}")

    now = timezone.now()
    usuario = Usuario(
        cedula=cedula,
        tipo_documento=tipo_documento or TipoDocumento.CC,
        nombre=nombre,
        telefono=telefono,
        correo=correo,
        codigo_qr=generate_qr_token(cedula),
        terminos_aceptados=terminos_aceptados,
        fecha_aceptacion_terminos=now if terminos_aceptados else None,
        validacion_legal=validacion_legal,
        fecha_validacion_legal=now if validacion_legal else None,
    )

    try:
        with transaction.atomic():
            # An existing cedula must fail, never be overwritten
            usuario.save(force_insert=True)
    except IntegrityError:
        raise ConflictError('Error al crear usuario o ya existe')

    logger.info('User registered: %s', usuario.cedula)
    record_audit(
        tabla='usuarios',
        id_registro=usuario.cedula,
        accion='INSERT',
        datos_nuevos=snapshot(usuario),
        cedula=usuario.cedula,
        ip=ip,
    )
    return usuario


UPDATABLE_FIELDS = ('nombre', 'telefono', 'correo', 'estado')


@transaction.atomic
def update_user(cedula: str, *, ip: Optional[str] = None, **changes) -> Usuario:
    """
    Update a user's profile.

    Only ``nombre``, ``telefono``, ``correo`` and ``estado`` can change;
    fields that are omitted or empty keep their current value.

    Raises:
        NotFoundError: If the user doesn't exist
        ValidacionError: If estado is not a known state
    """
    try:
        usuario = Usuario.objects.select_for_update().get(cedula=cedula)
    except Usuario.DoesNotExist:
        raise NotFoundError('Usuario no encontrado')

    estado = changes.get('estado')
    if estado and estado not in EstadoUsuario.values:
        raise ValidacionError('Estado no válido')

    anterior = snapshot(usuario)

    updated_fields = []
    for field in UPDATABLE_FIELDS:
        value = changes.get(field)
        if value:
            setattr(usuario, field, value)
            updated_fields.append(field)

    if updated_fields:
        usuario.save(update_fields=updated_fields)
        logger.info('User %s updated: %s', cedula, ', '.join(updated_fields))

    record_audit(
        tabla='usuarios',
        id_registro=usuario.cedula,
        accion='UPDATE',
        datos_anteriores=anterior,
        datos_nuevos=snapshot(usuario),
        cedula=usuario.cedula,
        ip=ip,
    )
    return usuario
