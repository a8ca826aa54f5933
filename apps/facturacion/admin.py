from django.contrib import admin
from .models import DocumentoEquivalente, Factura


@admin.register(DocumentoEquivalente)
class DocumentoEquivalenteAdmin(admin.ModelAdmin):
    """Admin interface for equivalent documents. Number and CUFE are fixed once issued."""

    list_display = ['numero_documento', 'orden', 'estado_envio', 'intentos_envio', 'fecha_emision']
    list_filter = ['estado_envio', 'tipo_documento', 'cumple_resolucion_000165']
    search_fields = ['numero_documento', 'cufe', 'orden__id']
    readonly_fields = ['orden', 'numero_documento', 'cufe', 'qr_documento', 'fecha_emision']
    date_hierarchy = 'fecha_emision'

    def has_add_permission(self, request):
        return False


@admin.register(Factura)
class FacturaAdmin(admin.ModelAdmin):
    """Admin interface for legacy invoices."""

    list_display = ['numero', 'usuario', 'orden', 'total', 'estado_envio', 'fecha']
    list_filter = ['estado_envio']
    search_fields = ['numero', 'usuario__cedula', 'cufe']
    raw_id_fields = ['usuario', 'orden']
