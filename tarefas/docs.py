"""
Documentação das rotas de tarefas.
"""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema

from .serializers import TarefaSerializer


tarefas_filtrar_schema = extend_schema(
    operation_id="tarefas_filtrar",
    tags=["tarefas"],
    summary="Filtrar tarefas por status",
    parameters=[
        OpenApiParameter(
            name="status",
            type=OpenApiTypes.STR,
            location=OpenApiParameter.QUERY,
            description="pendente, em_andamento ou concluida",
            required=True,
        ),
    ],
    responses={
        200: OpenApiResponse(response=TarefaSerializer(many=True), description="Tarefas recuperadas com sucesso"),
        422: OpenApiResponse(description="Status ausente ou inválido"),
    },
)
