from rest_framework import serializers
from .models import PuntoVenta, Producto


# =============================================================================
# Input Serializers
# =============================================================================

class ProductoCreateSerializer(serializers.Serializer):
    """Validate input for POST /productos."""

    codigo = serializers.CharField(max_length=50)
    nombre = serializers.CharField(max_length=200)
    descripcion = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    categoria = serializers.CharField(max_length=100)
    precio = serializers.DecimalField(max_digits=14, decimal_places=2)


class ProductoUpdateSerializer(serializers.Serializer):
    """Validate input for PATCH /productos/{id}."""

    precio = serializers.DecimalField(max_digits=14, decimal_places=2, required=False)
    disponible = serializers.BooleanField(required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('Indique precio o disponible')
        return attrs


class ProductoFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for product listing.

    Query Parameters:
        q (str): Text matched against code, name and category
        disponible (bool): Filter by availability
    """

    q = serializers.CharField(required=False, allow_blank=True)
    disponible = serializers.BooleanField(required=False, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================

class PuntoVentaSerializer(serializers.ModelSerializer):

    class Meta:
        model = PuntoVenta
        fields = [
            'id',
            'codigo',
            'nombre',
            'tipo_servicio',
            'ubicacion',
            'estado',
            'fecha_creacion',
        ]
        read_only_fields = fields


class ProductoSerializer(serializers.ModelSerializer):

    class Meta:
        model = Producto
        fields = [
            'id',
            'codigo',
            'nombre',
            'descripcion',
            'categoria',
            'precio',
            'disponible',
            'fecha_creacion',
        ]
        read_only_fields = fields
