from rest_framework import serializers
from .models import MetodoValidacion, TipoDocumento, Usuario, ValidacionAcceso


# =============================================================================
# Input Serializers
# =============================================================================

class UsuarioCreateSerializer(serializers.Serializer):
    """Validate input for POST /usuarios."""

    cedula = serializers.CharField(max_length=20)
    tipo_documento = serializers.ChoiceField(
        choices=TipoDocumento.choices,
        required=False,
        allow_blank=True
    )
    nombre = serializers.CharField(max_length=200)
    telefono = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    correo = serializers.EmailField()
    terminos_aceptados = serializers.BooleanField(required=False, default=False)
    validacion_legal = serializers.BooleanField(required=False, default=False)


class UsuarioUpdateSerializer(serializers.Serializer):
    """
    Validate input for PUT /usuarios/{cedula}.

    Every field is optional; estado is checked by the service so an unknown
    value answers "Estado no válido".
    """

    nombre = serializers.CharField(max_length=200, required=False, allow_blank=True)
    telefono = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    correo = serializers.EmailField(required=False, allow_blank=True)
    estado = serializers.CharField(max_length=10, required=False, allow_blank=True)


class ValidacionAccesoCreateSerializer(serializers.Serializer):
    """Validate input for POST /validaciones_acceso."""

    metodo_validacion = serializers.ChoiceField(choices=MetodoValidacion.choices)
    cedula = serializers.CharField(max_length=20, required=False, allow_blank=True)
    codigo_qr = serializers.CharField(max_length=100, required=False, allow_blank=True)
    id_punto_venta = serializers.CharField(max_length=36, required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        if not attrs.get('cedula') and not attrs.get('codigo_qr'):
            raise serializers.ValidationError('Indique cedula o codigo_qr')
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class UsuarioSerializer(serializers.ModelSerializer):

    class Meta:
        model = Usuario
        fields = [
            'cedula',
            'tipo_documento',
            'nombre',
            'telefono',
            'correo',
            'codigo_qr',
            'fecha_registro',
            'validacion_legal',
            'fecha_validacion_legal',
            'terminos_aceptados',
            'fecha_aceptacion_terminos',
            'estado',
        ]
        read_only_fields = fields


class ValidacionAccesoSerializer(serializers.ModelSerializer):
    id_punto_venta = serializers.CharField(source='punto_venta_id', read_only=True, allow_null=True)
    punto_venta = serializers.CharField(source='punto_venta.nombre', read_only=True)

    class Meta:
        model = ValidacionAcceso
        fields = [
            'id',
            'cedula',
            'metodo_validacion',
            'fecha_hora',
            'id_punto_venta',
            'punto_venta',
            'exitosa',
            'ip_validacion',
            'mensaje_error',
        ]
        read_only_fields = fields


class ValidacionAccesoResultSerializer(serializers.Serializer):
    """Response body of POST /validaciones_acceso."""

    valido = serializers.BooleanField()
    mensaje = serializers.CharField()
    usuario = UsuarioSerializer(required=False)
