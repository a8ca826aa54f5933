"""Regulatory configuration lookups and seed data."""
from datetime import date

from ..models import ConfiguracionNormativa


DEFAULT_PARAMETERS = [
    {
        'parametro': 'NIT_EMPRESA',
        'valor': '860012357-6',
        'descripcion': 'NIT de la institución emisora del documento equivalente',
        'resolucion_aplicable': 'DIAN 000165 de 2023',
    },
    {
        'parametro': 'PREFIJO_DOCUMENTO',
        'valor': 'UDINING',
        'descripcion': 'Prefijo de numeración de documentos equivalentes POS',
        'resolucion_aplicable': 'DIAN 000165 de 2023',
    },
    {
        'parametro': 'TARIFA_IVA',
        'valor': '0.19',
        'descripcion': 'Tarifa general del impuesto sobre las ventas',
        'resolucion_aplicable': 'Estatuto Tributario art. 468',
    },
    {
        'parametro': 'RESOLUCION_DOCUMENTO_EQUIVALENTE',
        'valor': '000165',
        'descripcion': 'Resolución que regula el documento equivalente electrónico',
        'resolucion_aplicable': 'DIAN 000165 de 2023',
        'fecha_vigencia': date(2023, 11, 1),
    },
]


def list_active_parameters():
    """Active configuration rows, ordered by parameter name."""
    return ConfiguracionNormativa.objects.filter(activo=True).order_by('parametro')


def get_parameter(nombre, default=None):
    """Value of an active parameter, or ``default`` if absent or inactive."""
    valor = (
        ConfiguracionNormativa.objects
        .filter(parametro=nombre, activo=True)
        .values_list('valor', flat=True)
        .first()
    )
    return default if valor is None else valor


def seed_parameters(model=ConfiguracionNormativa):
    """
    Insert the default parameters, leaving existing ones untouched.

    ``model`` lets data migrations pass their historical model.
    """
    model.objects.bulk_create(
        [model(**params) for params in DEFAULT_PARAMETERS],
        ignore_conflicts=True,
    )
