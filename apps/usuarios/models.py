from django.db import models

from apps.core.models import new_id


class TipoDocumento(models.TextChoices):
    CC = 'CC', 'Cédula de ciudadanía'
    TI = 'TI', 'Tarjeta de identidad'
    CE = 'CE', 'Cédula de extranjería'
    PA = 'PA', 'Pasaporte'


class EstadoUsuario(models.TextChoices):
    ACTIVO = 'ACTIVO', 'Activo'
    INACTIVO = 'INACTIVO', 'Inactivo'
    BLOQUEADO = 'BLOQUEADO', 'Bloqueado'


class MetodoValidacion(models.TextChoices):
    QR = 'QR', 'Código QR'
    CEDULA = 'CEDULA', 'Cédula'
    MANUAL = 'MANUAL', 'Manual'


class Usuario(models.Model):
    """
    Customer identified by national id (cedula).

    Users are never hard-deleted; deactivation goes through ``estado``.
    """

    cedula = models.CharField(primary_key=True, max_length=20)
    tipo_documento = models.CharField(
        max_length=5,
        choices=TipoDocumento.choices,
        default=TipoDocumento.CC
    )
    nombre = models.CharField(max_length=200)
    telefono = models.CharField(max_length=30, blank=True, null=True)
    correo = models.EmailField(max_length=254, db_index=True)
    codigo_qr = models.CharField(max_length=100, unique=True, blank=True, null=True)
    fecha_registro = models.DateTimeField(auto_now_add=True)

    # Habeas data (Ley 1581 de 2012) consent
    validacion_legal = models.BooleanField(default=False)
    fecha_validacion_legal = models.DateTimeField(blank=True, null=True)
    terminos_aceptados = models.BooleanField(default=False)
    fecha_aceptacion_terminos = models.DateTimeField(blank=True, null=True)

    estado = models.CharField(
        max_length=10,
        choices=EstadoUsuario.choices,
        default=EstadoUsuario.ACTIVO
    )

    class Meta:
        db_table = 'usuarios'
        ordering = ['nombre']

    def __str__(self):
        return f"{self.nombre} ({self.tipo_documento} {self.cedula})"


class ValidacionAcceso(models.Model):
    """
    Append-only log of identity checks at a point of sale.

    ``cedula`` is stored as plain text so failed attempts with an unknown
    id are logged too.
    """

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    cedula = models.CharField(max_length=20, db_index=True)
    metodo_validacion = models.CharField(max_length=10, choices=MetodoValidacion.choices)
    fecha_hora = models.DateTimeField(auto_now_add=True)
    punto_venta = models.ForeignKey(
        'catalogo.PuntoVenta',
        on_delete=models.PROTECT,
        db_column='id_punto_venta',
        related_name='validaciones',
        blank=True,
        null=True
    )
    exitosa = models.BooleanField()
    ip_validacion = models.GenericIPAddressField(blank=True, null=True)
    mensaje_error = models.TextField(blank=True, null=True)

    class Meta:
        db_table = 'validaciones_acceso'
        ordering = ['-fecha_hora']
        verbose_name = 'validación de acceso'
        verbose_name_plural = 'validaciones de acceso'

    def __str__(self):
        resultado = 'OK' if self.exitosa else 'FALLIDA'
        return f"{self.cedula} {self.metodo_validacion} {resultado}"
