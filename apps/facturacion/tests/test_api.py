import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestDocumentoList:
    """Tests for GET /documentos"""

    def test_list_documents(self, api_client, orden):
        url = reverse('facturacion:documento-list')
        response = api_client.get(url)

        assert url == '/documentos'
        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        documento = response.data[0]
        assert documento['id_orden'] == orden.id
        assert documento['numero_orden'] == orden.numero
        assert documento['estado_envio'] == 'PENDIENTE'
        assert len(documento['cufe']) == 64

    def test_list_documents_empty(self, api_client, db):
        response = api_client.get(reverse('facturacion:documento-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []
