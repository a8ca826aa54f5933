from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal

from apps.core.models import new_id


class EstadoOrden(models.TextChoices):
    PENDIENTE = 'PENDIENTE', 'Pendiente'
    PREPARANDO = 'PREPARANDO', 'Preparando'
    COMPLETADA = 'COMPLETADA', 'Completada'
    CANCELADA = 'CANCELADA', 'Cancelada'


class Orden(models.Model):
    """
    Sale to a user at a point of sale.

    Invariant: total == subtotal + impuestos, with impuestos the 19% tax
    on subtotal rounded to cents at creation time.
    """

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    numero = models.PositiveBigIntegerField(unique=True)
    usuario = models.ForeignKey(
        'usuarios.Usuario',
        on_delete=models.PROTECT,
        db_column='cedula',
        related_name='ordenes'
    )
    punto_venta = models.ForeignKey(
        'catalogo.PuntoVenta',
        on_delete=models.PROTECT,
        db_column='id_punto_venta',
        related_name='ordenes'
    )
    fecha = models.DateTimeField(auto_now_add=True)
    subtotal = models.DecimalField(max_digits=14, decimal_places=2)
    impuestos = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0'))
    total = models.DecimalField(max_digits=14, decimal_places=2)
    metodo_pago = models.CharField(max_length=30, blank=True, null=True)
    metodo_validacion = models.CharField(max_length=30, blank=True, null=True)
    estado = models.CharField(
        max_length=12,
        choices=EstadoOrden.choices,
        default=EstadoOrden.COMPLETADA
    )

    class Meta:
        db_table = 'ordenes'
        ordering = ['-numero']
        verbose_name = 'orden'
        verbose_name_plural = 'órdenes'

    def __str__(self):
        return f"Orden #{self.numero} ({self.estado})"


class DetalleOrden(models.Model):
    """Order line. Created with its order and deleted only with it."""

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    orden = models.ForeignKey(
        Orden,
        on_delete=models.CASCADE,
        db_column='id_orden',
        related_name='detalles'
    )
    producto = models.ForeignKey(
        'catalogo.Producto',
        on_delete=models.PROTECT,
        db_column='id_producto',
        related_name='detalles'
    )
    cantidad = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    precio_unitario = models.DecimalField(max_digits=14, decimal_places=2)
    subtotal = models.DecimalField(max_digits=14, decimal_places=2)
    notas = models.TextField(blank=True, null=True)

    class Meta:
        db_table = 'detalle_ordenes'
        verbose_name = 'detalle de orden'
        verbose_name_plural = 'detalles de orden'

    def __str__(self):
        return f"{self.cantidad} x {self.producto_id} @ {self.precio_unitario}"
