"""Points of sale: reference data, seeded once."""
from ..models import PuntoVenta, TipoServicio


# Fixed ids, referenced by the POS terminals
DEFAULT_POINTS_OF_SALE = [
    {
        'id': 'pv-1',
        'codigo': 'PV-CC-01',
        'nombre': 'Punto Café Zona Central',
        'tipo_servicio': TipoServicio.CAFETERIA,
        'ubicacion': 'Campus Central',
    },
    {
        'id': 'pv-2',
        'codigo': 'PV-CC-02',
        'nombre': 'Punto Cipreses',
        'tipo_servicio': TipoServicio.CAFETERIA,
        'ubicacion': 'Campus Central',
    },
    {
        'id': 'pv-3',
        'codigo': 'PV-CC-03',
        'nombre': 'Café de La Bolsa',
        'tipo_servicio': TipoServicio.CAFETERIA,
        'ubicacion': 'Campus Central',
    },
]


def list_points_of_sale():
    return PuntoVenta.objects.order_by('codigo')


def seed_points_of_sale(model=PuntoVenta):
    """
    Insert the default points of sale, skipping any that already exist.

    ``model`` lets data migrations pass their historical model.
    """
    model.objects.bulk_create(
        [model(**data) for data in DEFAULT_POINTS_OF_SALE],
        ignore_conflicts=True,
    )
