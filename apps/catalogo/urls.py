from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalogo'

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'puntos_venta', views.PuntoVentaViewSet, basename='punto-venta')
router.register(r'productos', views.ProductoViewSet, basename='producto')

urlpatterns = [
    # GET    /puntos_venta        - List points of sale
    # GET    /productos           - List products (?q=, ?disponible=)
    # POST   /productos           - Create product
    # PATCH  /productos/{id}      - Change price / availability
    path('', include(router.urls)),
]
