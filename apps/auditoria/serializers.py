from rest_framework import serializers
from .models import Auditoria, ConfiguracionNormativa


class AuditoriaSerializer(serializers.ModelSerializer):
    """Audit entry as stored."""

    class Meta:
        model = Auditoria
        fields = [
            'id',
            'tabla',
            'id_registro',
            'accion',
            'usuario',
            'cedula_relacionada',
            'fecha_hora',
            'datos_anteriores',
            'datos_nuevos',
            'ip_origen',
        ]
        read_only_fields = fields


class ConfiguracionNormativaSerializer(serializers.ModelSerializer):
    """Regulatory parameter."""

    class Meta:
        model = ConfiguracionNormativa
        fields = [
            'id',
            'parametro',
            'valor',
            'descripcion',
            'resolucion_aplicable',
            'fecha_vigencia',
            'activo',
            'fecha_actualizacion',
        ]
        read_only_fields = fields
