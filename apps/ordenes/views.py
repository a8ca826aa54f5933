from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.utils import client_ip

from .serializers import (
    OrdenCreatedSerializer,
    OrdenCreateSerializer,
    OrdenDetailSerializer,
    OrdenEstadoSerializer,
    OrdenSerializer,
)
from .services import (
    change_order_status,
    create_order,
    get_order,
    list_orders,
)


class OrdenViewSet(viewsets.GenericViewSet):
    """
    Orders and their equivalent documents.

    list: Get all orders with user and point of sale names
    retrieve: Get an order with its lines
    create: Create an order, its lines and its equivalent document
    estado: Change the order status
    """

    serializer_class = OrdenSerializer

    def list(self, request):
        serializer = OrdenSerializer(list_orders(), many=True)
        return Response(serializer.data)

    @extend_schema(responses={200: OrdenDetailSerializer})
    def retrieve(self, request, pk=None):
        serializer = OrdenDetailSerializer(get_order(pk))
        return Response(serializer.data)

    @extend_schema(request=OrdenCreateSerializer, responses={200: OrdenCreatedSerializer})
    def create(self, request):
        """Create an order with its equivalent document."""
        serializer = OrdenCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        orden, documento = create_order(
            cedula=data.get('cedula'),
            id_punto_venta=data.get('id_punto_venta'),
            items=data.get('items'),
            metodo_pago=data.get('metodo_pago'),
            metodo_validacion=data.get('metodo_validacion'),
            ip=client_ip(request),
        )

        return Response({
            'message': 'Orden creada y documento equivalente generado',
            'idOrden': orden.id,
            'numero_documento': documento.numero_documento,
            'cufe': documento.cufe,
        })

    @extend_schema(request=OrdenEstadoSerializer)
    @action(detail=True, methods=['put'])
    def estado(self, request, pk=None):
        """
        Change the order status.

        PUT /ordenes/{id}/estado
        """
        serializer = OrdenEstadoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        estado = serializer.validated_data.get('estado')

        change_order_status(order_id=pk, estado=estado, ip=client_ip(request))
        return Response({'message': f'Orden actualizada a estado {estado}'})
