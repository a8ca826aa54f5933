from django.contrib import admin
from .models import PuntoVenta, Producto


@admin.register(PuntoVenta)
class PuntoVentaAdmin(admin.ModelAdmin):
    """Admin interface for points of sale."""

    list_display = ['codigo', 'nombre', 'tipo_servicio', 'ubicacion', 'estado']
    list_filter = ['tipo_servicio', 'estado', 'ubicacion']
    search_fields = ['codigo', 'nombre']
    readonly_fields = ['fecha_creacion']


@admin.register(Producto)
class ProductoAdmin(admin.ModelAdmin):
    """Admin interface for catalog products."""

    list_display = ['codigo', 'nombre', 'categoria', 'precio', 'disponible', 'fecha_creacion']
    list_filter = ['disponible', 'categoria']
    search_fields = ['codigo', 'nombre', 'descripcion']
    readonly_fields = ['fecha_creacion']
    actions = ['mark_available', 'mark_unavailable']

    @admin.action(description='Marcar como disponibles')
    def mark_available(self, request, queryset):
        updated = queryset.update(disponible=True)
        self.message_user(request, f'{updated} producto(s) disponibles.')

    @admin.action(description='Marcar como no disponibles')
    def mark_unavailable(self, request, queryset):
        updated = queryset.update(disponible=False)
        self.message_user(request, f'{updated} producto(s) no disponibles.')
