"""
URL configuration for the U-Dining POS backend.

Resource routes live at the root without trailing slash (``/usuarios``,
``/ordenes/{id}/estado``), as the existing POS terminals call them.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Health check (for Railway)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints
    path('', include('apps.usuarios.urls')),
    path('', include('apps.catalogo.urls')),
    path('', include('apps.ordenes.urls')),
    path('', include('apps.facturacion.urls')),
    path('', include('apps.auditoria.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
