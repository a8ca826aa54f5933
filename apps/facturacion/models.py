from django.db import models
from django.utils import timezone

from apps.core.models import new_id


class EstadoEnvio(models.TextChoices):
    PENDIENTE = 'PENDIENTE', 'Pendiente'
    ENVIADO = 'ENVIADO', 'Enviado'
    ERROR = 'ERROR', 'Error'


class DocumentoEquivalente(models.Model):
    """
    POS equivalent document issued for an order (DIAN Resolución 000165).

    Numbered ``PREFIX-YYYYMMDD-NNNNNN``; ``cufe`` fingerprints the number,
    emission time, total and company NIT.
    """

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    orden = models.OneToOneField(
        'ordenes.Orden',
        on_delete=models.CASCADE,
        db_column='id_orden',
        related_name='documento'
    )
    numero_documento = models.CharField(max_length=40, unique=True)
    tipo_documento = models.CharField(max_length=30, default='DOCUMENTO_EQUIVALENTE')
    cufe = models.CharField(max_length=64, unique=True, blank=True, null=True)
    qr_documento = models.TextField(blank=True, null=True)
    fecha_emision = models.DateTimeField(default=timezone.now)
    fecha_envio_correo = models.DateTimeField(blank=True, null=True)
    estado_envio = models.CharField(
        max_length=10,
        choices=EstadoEnvio.choices,
        default=EstadoEnvio.PENDIENTE
    )
    intentos_envio = models.PositiveIntegerField(default=0)
    url_documento = models.URLField(max_length=500, blank=True, null=True)
    cumple_resolucion_000165 = models.BooleanField(default=True)
    hash_documento = models.CharField(max_length=64, blank=True, null=True)

    class Meta:
        db_table = 'documentos_equivalentes'
        ordering = ['-fecha_emision', '-numero_documento']
        verbose_name = 'documento equivalente'
        verbose_name_plural = 'documentos equivalentes'

    def __str__(self):
        return self.numero_documento


class Factura(models.Model):
    """Legacy invoice record, maintained from the admin."""

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    numero = models.CharField(max_length=40, unique=True)
    fecha = models.DateTimeField(default=timezone.now)
    usuario = models.ForeignKey(
        'usuarios.Usuario',
        on_delete=models.PROTECT,
        db_column='cedula',
        related_name='facturas'
    )
    orden = models.ForeignKey(
        'ordenes.Orden',
        on_delete=models.SET_NULL,
        db_column='id_orden',
        related_name='facturas',
        blank=True,
        null=True
    )
    total = models.DecimalField(max_digits=14, decimal_places=2)
    detalle = models.TextField(blank=True, null=True)
    cufe = models.CharField(max_length=64, blank=True, null=True)
    qr_factura = models.TextField(blank=True, null=True)
    estado_envio = models.CharField(
        max_length=10,
        choices=EstadoEnvio.choices,
        default=EstadoEnvio.PENDIENTE
    )

    class Meta:
        db_table = 'facturas'
        ordering = ['-fecha']

    def __str__(self):
        return f"Factura {self.numero}"
