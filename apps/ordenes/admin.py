from django.contrib import admin
from .models import Orden, DetalleOrden


class DetalleOrdenInline(admin.TabularInline):
    model = DetalleOrden
    extra = 0
    readonly_fields = ['producto', 'cantidad', 'precio_unitario', 'subtotal', 'notas']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Orden)
class OrdenAdmin(admin.ModelAdmin):
    """Admin interface for orders. Totals are fixed at creation."""

    list_display = ['numero', 'usuario', 'punto_venta', 'total', 'estado', 'fecha']
    list_filter = ['estado', 'punto_venta', 'metodo_pago']
    search_fields = ['id', 'usuario__cedula', 'usuario__nombre']
    readonly_fields = [
        'id', 'numero', 'usuario', 'punto_venta', 'fecha',
        'subtotal', 'impuestos', 'total', 'metodo_pago', 'metodo_validacion',
    ]
    date_hierarchy = 'fecha'
    inlines = [DetalleOrdenInline]

    def has_add_permission(self, request):
        return False
