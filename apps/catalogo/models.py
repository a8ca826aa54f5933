from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal

from apps.core.models import new_id


class TipoServicio(models.TextChoices):
    CAFETERIA = 'CAFETERIA', 'Cafetería'
    RESTAURANTE = 'RESTAURANTE', 'Restaurante'
    ESPECIALIZADO = 'ESPECIALIZADO', 'Especializado'
    CATERING_INTERNO = 'CATERING_INTERNO', 'Catering interno'
    CATERING_EXTERNO = 'CATERING_EXTERNO', 'Catering externo'
    VENDING = 'VENDING', 'Vending'


class EstadoPuntoVenta(models.TextChoices):
    ACTIVO = 'ACTIVO', 'Activo'
    INACTIVO = 'INACTIVO', 'Inactivo'


class PuntoVenta(models.Model):
    """Physical or logical sales location. Seeded reference data."""

    id = models.CharField(primary_key=True, max_length=36, default=new_id)
    codigo = models.CharField(max_length=20, unique=True)
    nombre = models.CharField(max_length=200)
    tipo_servicio = models.CharField(max_length=20, choices=TipoServicio.choices)
    ubicacion = models.CharField(max_length=200)
    estado = models.CharField(
        max_length=10,
        choices=EstadoPuntoVenta.choices,
        default=EstadoPuntoVenta.ACTIVO
    )
    fecha_creacion = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'puntos_venta'
        ordering = ['codigo']
        verbose_name = 'punto de venta'
        verbose_name_plural = 'puntos de venta'

    def __str__(self):
        return f"{self.codigo} - {self.nombre}"


class Producto(models.Model):
    """Catalog item sold at the points of sale."""

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    codigo = models.CharField(max_length=50, unique=True)
    nombre = models.CharField(max_length=200)
    descripcion = models.TextField(blank=True, null=True)
    categoria = models.CharField(max_length=100, db_index=True)
    precio = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    disponible = models.BooleanField(default=True)
    fecha_creacion = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'productos'
        ordering = ['categoria', 'nombre']

    def __str__(self):
        return f"{self.codigo} - {self.nombre} ({self.precio})"
