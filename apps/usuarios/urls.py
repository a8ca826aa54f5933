from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'usuarios'

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'usuarios', views.UsuarioViewSet, basename='usuario')
router.register(r'validaciones_acceso', views.ValidacionAccesoViewSet, basename='validacion-acceso')

urlpatterns = [
    # GET    /usuarios                 - List users
    # POST   /usuarios                 - Register user
    # GET    /usuarios/{cedula}        - Get user
    # PUT    /usuarios/{cedula}        - Update user
    # GET    /usuarios/{cedula}/qr     - QR code PNG
    # GET    /validaciones_acceso      - Latest validations
    # POST   /validaciones_acceso      - Validate access
    path('', include(router.urls)),
]
