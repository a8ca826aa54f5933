from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'facturacion'

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'documentos', views.DocumentoEquivalenteViewSet, basename='documento')

urlpatterns = [
    # GET    /documentos      - List equivalent documents
    path('', include(router.urls)),
]
