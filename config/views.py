import logging

from django.db import DatabaseError
from django.http import JsonResponse

from apps.core.persistence import get_adapter

logger = logging.getLogger(__name__)


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({'error': 'Recurso no encontrado'}, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({'error': 'Error interno del servidor'}, status=500)


def health_check(request):
    """Liveness plus a round trip to the database."""
    db = get_adapter()
    try:
        db.get('SELECT 1 AS ok')
    except DatabaseError:
        logger.exception('Health check: database unreachable')
        return JsonResponse({'status': 'error', 'database': db.vendor}, status=503)
    return JsonResponse({'status': 'ok', 'database': db.vendor})
