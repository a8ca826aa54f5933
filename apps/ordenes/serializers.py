from decimal import Decimal
from rest_framework import serializers


# =============================================================================
# Input Serializers
# =============================================================================

class OrdenItemSerializer(serializers.Serializer):
    """One line of POST /ordenes."""

    id_producto = serializers.CharField(max_length=36)
    cantidad = serializers.IntegerField(min_value=1)
    precio_unitario = serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        min_value=Decimal('0')
    )
    notas = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class OrdenCreateSerializer(serializers.Serializer):
    """
    Validate input for POST /ordenes.

    Presence of cedula, id_punto_venta and items is checked by the
    service, which reports the three together.
    """

    cedula = serializers.CharField(max_length=20, required=False, allow_blank=True)
    id_punto_venta = serializers.CharField(max_length=36, required=False, allow_blank=True)
    metodo_pago = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    metodo_validacion = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    items = OrdenItemSerializer(many=True, required=False)


class OrdenEstadoSerializer(serializers.Serializer):
    """Validate input for PUT /ordenes/{id}/estado."""

    estado = serializers.CharField(required=False, allow_blank=True, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================
# Orders are read through the persistence adapter as plain rows; these
# serializers give money and dates the same JSON shape on every engine.

class DetalleOrdenSerializer(serializers.Serializer):
    id = serializers.CharField()
    id_orden = serializers.CharField()
    id_producto = serializers.CharField()
    nombre_producto = serializers.CharField()
    cantidad = serializers.IntegerField()
    precio_unitario = serializers.DecimalField(max_digits=14, decimal_places=2)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2)
    notas = serializers.CharField(allow_null=True)


class OrdenSerializer(serializers.Serializer):
    id = serializers.CharField()
    numero = serializers.IntegerField()
    cedula = serializers.CharField()
    nombre_usuario = serializers.CharField()
    id_punto_venta = serializers.CharField()
    punto_venta = serializers.CharField()
    fecha = serializers.DateTimeField()
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2)
    impuestos = serializers.DecimalField(max_digits=14, decimal_places=2)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    metodo_pago = serializers.CharField(allow_null=True)
    metodo_validacion = serializers.CharField(allow_null=True)
    estado = serializers.CharField()


class OrdenDetailSerializer(OrdenSerializer):
    detalles = DetalleOrdenSerializer(many=True)


class OrdenCreatedSerializer(serializers.Serializer):
    """Response body of POST /ordenes."""

    message = serializers.CharField()
    idOrden = serializers.CharField()
    numero_documento = serializers.CharField()
    cufe = serializers.CharField()
