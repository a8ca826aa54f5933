from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

from apps.core.models import new_id


class AccionAuditoria(models.TextChoices):
    INSERT = 'INSERT', 'Insert'
    UPDATE = 'UPDATE', 'Update'
    DELETE = 'DELETE', 'Delete'


class Auditoria(models.Model):
    """Append-only before/after snapshot of a mutation."""

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    tabla = models.CharField(max_length=100)
    id_registro = models.CharField(max_length=100)
    accion = models.CharField(max_length=10, choices=AccionAuditoria.choices)
    usuario = models.CharField(max_length=100, null=True, blank=True)
    cedula_relacionada = models.CharField(max_length=20, null=True, blank=True)
    fecha_hora = models.DateTimeField(auto_now_add=True)
    datos_anteriores = models.JSONField(null=True, blank=True, encoder=DjangoJSONEncoder)
    datos_nuevos = models.JSONField(null=True, blank=True, encoder=DjangoJSONEncoder)
    ip_origen = models.GenericIPAddressField(null=True, blank=True)

    class Meta:
        db_table = 'auditoria'
        indexes = [
            models.Index(fields=['tabla', 'id_registro'], name='auditoria_tabla_registro_idx'),
            models.Index(fields=['fecha_hora'], name='auditoria_fecha_hora_idx'),
        ]
        ordering = ['-fecha_hora']

    def __str__(self):
        return f"{self.accion} {self.tabla}:{self.id_registro}"


class ConfiguracionNormativa(models.Model):
    """Regulatory key-value parameter (DIAN resolutions, tax ids)."""

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    parametro = models.CharField(max_length=100, unique=True)
    valor = models.TextField()
    descripcion = models.TextField(blank=True, null=True)
    resolucion_aplicable = models.CharField(max_length=100, blank=True, null=True)
    fecha_vigencia = models.DateField(null=True, blank=True)
    activo = models.BooleanField(default=True)
    fecha_actualizacion = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'configuracion_normativa'
        ordering = ['parametro']

    def __str__(self):
        return f"{self.parametro} = {self.valor}"
