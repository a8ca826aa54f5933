from rest_framework import viewsets
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.utils import client_ip

from .serializers import (
    ProductoCreateSerializer,
    ProductoFilterSerializer,
    ProductoSerializer,
    ProductoUpdateSerializer,
    PuntoVentaSerializer,
)
from .services import (
    create_product,
    list_points_of_sale,
    search_products,
    update_product,
)


class PuntoVentaViewSet(viewsets.GenericViewSet):
    """
    Points of sale (read-only reference data).

    list: Get all points of sale
    """

    serializer_class = PuntoVentaSerializer

    def get_queryset(self):
        return list_points_of_sale()

    def list(self, request):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)


class ProductoViewSet(viewsets.GenericViewSet):
    """
    Product catalog.

    list: Get products (filterable by ?q= and ?disponible=)
    create: Add a product
    partial_update: Change price or availability
    """

    serializer_class = ProductoSerializer

    @extend_schema(parameters=[ProductoFilterSerializer], responses={200: ProductoSerializer(many=True)})
    def list(self, request):
        """List catalog products."""
        filters = ProductoFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        params = filters.validated_data

        rows = search_products(
            q=params.get('q'),
            disponible=params.get('disponible'),
        )
        return Response(ProductoSerializer(rows, many=True).data)

    @extend_schema(request=ProductoCreateSerializer)
    def create(self, request):
        """Create a product."""
        serializer = ProductoCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        create_product(ip=client_ip(request), **serializer.validated_data)
        return Response({'message': 'Producto creado correctamente'})

    @extend_schema(request=ProductoUpdateSerializer)
    def partial_update(self, request, pk=None):
        """Update price and/or availability."""
        serializer = ProductoUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        producto = update_product(
            product_id=pk,
            ip=client_ip(request),
            **serializer.validated_data
        )
        return Response({
            'message': 'Producto actualizado correctamente',
            'producto': ProductoSerializer(producto).data,
        })
