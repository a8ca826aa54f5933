from django.contrib import admin
from .models import Auditoria, ConfiguracionNormativa


@admin.register(Auditoria)
class AuditoriaAdmin(admin.ModelAdmin):
    """Read-only audit trail."""

    list_display = [
        'fecha_hora',
        'tabla',
        'id_registro',
        'accion',
        'usuario',
        'cedula_relacionada',
        'ip_origen',
    ]
    list_filter = ['tabla', 'accion', 'fecha_hora']
    search_fields = ['id_registro', 'cedula_relacionada', 'usuario']
    date_hierarchy = 'fecha_hora'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        """Entries are immutable once written."""
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(ConfiguracionNormativa)
class ConfiguracionNormativaAdmin(admin.ModelAdmin):
    list_display = ['parametro', 'valor', 'resolucion_aplicable', 'fecha_vigencia', 'activo']
    list_filter = ['activo', 'resolucion_aplicable']
    search_fields = ['parametro', 'descripcion']
    readonly_fields = ['fecha_actualizacion']
