import logging

from django.db import DatabaseError, connection
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="health_check",
        tags=["core"],
        summary="Health check",
        description="Verifica se o servidor está no ar e se o banco de dados responde.",
        responses={
            200: OpenApiResponse(description="Servidor e banco de dados disponíveis"),
            503: OpenApiResponse(description="Banco de dados indisponível"),
        },
    )
    def get(self, request):
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
        except DatabaseError as e:
            logger.error(f"Health check: banco de dados indisponível: {e}")
            return Response(
                {"status": "error", "database": "unavailable"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response({"status": "ok", "database": "ok"}, status=status.HTTP_200_OK)
