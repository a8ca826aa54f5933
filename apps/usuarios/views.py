from django.http import HttpResponse
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema

from apps.core.utils import client_ip

from .serializers import (
    UsuarioCreateSerializer,
    UsuarioSerializer,
    UsuarioUpdateSerializer,
    ValidacionAccesoCreateSerializer,
    ValidacionAccesoResultSerializer,
    ValidacionAccesoSerializer,
)
from .services import (
    get_user,
    latest_validations,
    list_users,
    register_user,
    render_user_qr,
    update_user,
    validate_access,
)


class UsuarioViewSet(viewsets.GenericViewSet):
    """
    Registered users, looked up by cedula.

    list: Get all users
    retrieve: Get a user
    create: Register a user
    update: Update profile fields or estado
    qr: PNG image of the user's QR token
    """

    serializer_class = UsuarioSerializer
    lookup_field = 'cedula'

    def get_queryset(self):
        return list_users()

    def list(self, request):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, cedula=None):
        usuario = get_user(cedula)
        return Response(self.get_serializer(usuario).data)

    @extend_schema(request=UsuarioCreateSerializer)
    def create(self, request):
        """Register a new user."""
        serializer = UsuarioCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        register_user(ip=client_ip(request), **serializer.validated_data)
        return Response({'message': 'Usuario creado correctamente'})

    @extend_schema(request=UsuarioUpdateSerializer)
    def update(self, request, cedula=None):
        """Update an existing user."""
        serializer = UsuarioUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        update_user(cedula, ip=client_ip(request), **serializer.validated_data)
        return Response({'message': 'Usuario actualizado correctamente'})

    @extend_schema(responses={(200, 'image/png'): OpenApiTypes.BINARY})
    @action(detail=True, methods=['get'])
    def qr(self, request, cedula=None):
        """
        Get the QR code for a user.

        GET /usuarios/{cedula}/qr
        """
        png = render_user_qr(cedula)
        return HttpResponse(png, content_type='image/png')


class ValidacionAccesoViewSet(viewsets.GenericViewSet):
    """
    Identity checks at the points of sale.

    list: Latest 100 validation attempts
    create: Validate a user by cedula or QR token
    """

    serializer_class = ValidacionAccesoSerializer

    def get_queryset(self):
        return latest_validations()

    def list(self, request):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    @extend_schema(
        request=ValidacionAccesoCreateSerializer,
        responses={200: ValidacionAccesoResultSerializer}
    )
    def create(self, request):
        """Validate access; failed checks still answer 200 with valido=false."""
        serializer = ValidacionAccesoCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        valid, usuario, mensaje = validate_access(
            metodo_validacion=data['metodo_validacion'],
            cedula=data.get('cedula'),
            codigo_qr=data.get('codigo_qr'),
            id_punto_venta=data.get('id_punto_venta'),
            ip=client_ip(request),
        )

        body = {'valido': valid, 'mensaje': mensaje}
        if valid:
            body['usuario'] = UsuarioSerializer(usuario).data
        return Response(body)
