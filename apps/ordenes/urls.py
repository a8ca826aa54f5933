from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'ordenes'

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'ordenes', views.OrdenViewSet, basename='orden')

urlpatterns = [
    # GET    /ordenes               - List orders
    # POST   /ordenes               - Create order + equivalent document
    # GET    /ordenes/{id}          - Get order with lines
    # PUT    /ordenes/{id}/estado   - Change status
    path('', include(router.urls)),
]
