from rest_framework import serializers
from .models import DocumentoEquivalente


class DocumentoEquivalenteSerializer(serializers.ModelSerializer):
    id_orden = serializers.CharField(source='orden_id', read_only=True)
    numero_orden = serializers.IntegerField(source='orden.numero', read_only=True)

    class Meta:
        model = DocumentoEquivalente
        fields = [
            'id',
            'id_orden',
            'numero_orden',
            'numero_documento',
            'tipo_documento',
            'cufe',
            'qr_documento',
            'fecha_emision',
            'fecha_envio_correo',
            'estado_envio',
            'intentos_envio',
            'url_documento',
            'cumple_resolucion_000165',
            'hash_documento',
        ]
        read_only_fields = fields
