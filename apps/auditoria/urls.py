from django.urls import path
from . import views

app_name = 'auditoria'

urlpatterns = [
    # GET /auditoria      - Latest 100 audit entries
    # GET /configuracion  - Active regulatory parameters
    path('auditoria', views.audit_log, name='audit-log'),
    path('configuracion', views.active_configuration, name='configuration'),
]
