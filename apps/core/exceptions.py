"""
Domain exceptions shared by every app.

Exception Hierarchy:
    APIException (DRF)
    ├── ValidacionError        400  missing or malformed request fields
    ├── NotFoundError          404  unknown id
    ├── ConflictError          400  uniqueness violation on insert
    └── SequenceExhaustedError 500  counter ran past its fixed width

Services raise these directly; views let them propagate and
``api_exception_handler`` renders every handled error as a single
``{"error": "..."}`` body. Anything else falls through to Django's
``handler500``.

Usage:
    from apps.core.exceptions import NotFoundError

    if usuario is None:
        raise NotFoundError('Usuario no encontrado')
"""
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.views import exception_handler as drf_exception_handler


REQUIRED_CODES = {'required', 'blank', 'null'}


class ValidacionError(APIException):
    """Missing or malformed request fields."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Datos inválidos.'
    default_code = 'validation_error'


class NotFoundError(APIException):
    """Referenced record does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Registro no encontrado.'
    default_code = 'not_found'


class ConflictError(APIException):
    """Uniqueness constraint violated on insert."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'El registro ya existe.'
    default_code = 'conflict'


class SequenceExhaustedError(APIException):
    """A fixed-width counter has no numbers left for its key."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Consecutivo agotado.'
    default_code = 'sequence_exhausted'


def _missing_fields(codes, prefix=''):
    """Dotted names of fields whose error codes say they were not supplied."""
    missing = []
    if isinstance(codes, dict):
        for field, field_codes in codes.items():
            # List serializers key item errors by index
            if isinstance(field, int):
                missing.extend(_missing_fields(field_codes, prefix=prefix))
                continue
            name = f'{prefix}{field}'
            if isinstance(field_codes, list) and REQUIRED_CODES & {
                code for code in field_codes if isinstance(code, str)
            }:
                missing.append(name)
            else:
                missing.extend(_missing_fields(field_codes, prefix=f'{name}.'))
    elif isinstance(codes, list):
        for item_codes in codes:
            missing.extend(_missing_fields(item_codes, prefix=prefix))
    # Nested list items repeat the same names
    return list(dict.fromkeys(missing))


def _messages(detail, prefix=''):
    if isinstance(detail, dict):
        for field, errors in detail.items():
            if isinstance(field, int) or field == 'non_field_errors':
                name = prefix.rstrip('.')
            else:
                name = f'{prefix}{field}'
            yield from _messages(errors, prefix=f'{name}.' if name else '')
    elif isinstance(detail, list):
        for error in detail:
            yield from _messages(error, prefix=prefix)
    else:
        label = prefix.rstrip('.')
        yield f'{label}: {detail}' if label else str(detail)


def _flatten_validation(exc):
    """Collapse a serializer ValidationError into one message."""
    missing = _missing_fields(exc.get_codes())
    if missing:
        return f"Campos requeridos: {', '.join(missing)}"
    return ' | '.join(_messages(exc.detail))


def api_exception_handler(exc, context):
    """
    DRF exception handler producing ``{"error": "<message>"}`` bodies.

    Returns ``None`` for exceptions DRF does not handle so Django's 500
    handler takes over.
    """
    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        message = _flatten_validation(exc)
    elif isinstance(exc, APIException):
        message = str(exc.detail)
    else:
        message = str(response.data.get('detail', response.data))

    response.data = {'error': message}
    return response
