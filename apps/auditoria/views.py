from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import AuditoriaSerializer, ConfiguracionNormativaSerializer
from .services import latest_entries, list_active_parameters

AUDIT_PAGE = 100


@extend_schema(
    responses={200: AuditoriaSerializer(many=True)},
    description=f"Latest {AUDIT_PAGE} audit entries, newest first.",
    tags=['auditoria'],
)
@api_view(['GET'])
def audit_log(request):
    """Latest audit entries."""
    entries = latest_entries(limit=AUDIT_PAGE)
    return Response(AuditoriaSerializer(entries, many=True).data)


@extend_schema(
    responses={200: ConfiguracionNormativaSerializer(many=True)},
    description="Active regulatory configuration parameters.",
    tags=['configuracion'],
)
@api_view(['GET'])
def active_configuration(request):
    """Active regulatory parameters."""
    return Response(
        ConfiguracionNormativaSerializer(list_active_parameters(), many=True).data
    )
