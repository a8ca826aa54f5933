from rest_framework import viewsets
from rest_framework.response import Response

from .serializers import DocumentoEquivalenteSerializer
from .services import list_documents


class DocumentoEquivalenteViewSet(viewsets.GenericViewSet):
    """
    Issued equivalent documents.

    list: Get all documents, newest first
    """

    serializer_class = DocumentoEquivalenteSerializer

    def get_queryset(self):
        return list_documents()

    def list(self, request):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)
