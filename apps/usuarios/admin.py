from django.contrib import admin
from .models import Usuario, ValidacionAcceso


@admin.register(Usuario)
class UsuarioAdmin(admin.ModelAdmin):
    """Admin interface for users. Users are deactivated, never deleted."""

    list_display = ['cedula', 'tipo_documento', 'nombre', 'correo', 'estado', 'fecha_registro']
    list_filter = ['estado', 'tipo_documento', 'terminos_aceptados', 'validacion_legal']
    search_fields = ['cedula', 'nombre', 'correo']
    readonly_fields = ['codigo_qr', 'fecha_registro']

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(ValidacionAcceso)
class ValidacionAccesoAdmin(admin.ModelAdmin):
    """Read-only admin interface for the access validation log."""

    list_display = ['cedula', 'metodo_validacion', 'punto_venta', 'exitosa', 'fecha_hora']
    list_filter = ['exitosa', 'metodo_validacion', 'punto_venta']
    search_fields = ['cedula']
    date_hierarchy = 'fecha_hora'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
