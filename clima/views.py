"""
Proxy público para a API de clima
"""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.responses import envelope
from .serializers import ClimaQuerySerializer, ClimaSerializer
from .services import OpenWeatherService


class ClimaView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="clima_obter",
        tags=["clima"],
        summary="Clima atual de uma cidade",
        description="Consulta a OpenWeatherMap (temperatura em Celsius, descrição em português).",
        parameters=[
            OpenApiParameter(
                name="cidade",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Nome da cidade (mínimo 2 caracteres)",
                required=True,
            ),
        ],
        responses={
            200: OpenApiResponse(response=ClimaSerializer, description="Clima obtido com sucesso"),
            422: OpenApiResponse(description="Cidade ausente ou muito curta"),
            500: OpenApiResponse(description="Chave da API não configurada"),
            503: OpenApiResponse(description="Falha de conexão com a API de clima"),
            504: OpenApiResponse(description="Timeout da API de clima"),
        },
    )
    def get(self, request):
        query = ClimaQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        resultado = OpenWeatherService.obter_clima(query.validated_data["cidade"])
        if resultado.get("error"):
            erro = resultado["error"]
            return Response(
                {"success": False, "message": erro["message"]},
                status=erro["statusCode"],
            )

        return envelope("Clima obtido com sucesso.", resultado["data"])
