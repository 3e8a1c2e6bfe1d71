"""
Documentação das rotas de pedidos e descontos.
"""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, OpenApiResponse, extend_schema

from ..serializers import DescontoSerializer, PedidoSerializer, PedidoStatusSerializer


pedidos_list_schema = extend_schema(
    operation_id="pedidos_list",
    tags=["vendas"],
    summary="Listar pedidos",
    description="Lista os pedidos da loja do usuário, com os itens.",
    parameters=[
        OpenApiParameter(
            name="status",
            type=OpenApiTypes.STR,
            location=OpenApiParameter.QUERY,
            description="pendente, pago, processando, enviado, entregue ou cancelado",
            required=False,
        ),
        OpenApiParameter(
            name="cliente_id",
            type=OpenApiTypes.INT,
            location=OpenApiParameter.QUERY,
            description="Filtrar por cliente",
            required=False,
        ),
    ],
    responses={
        200: OpenApiResponse(response=PedidoSerializer(many=True), description="Pedidos recuperados com sucesso"),
    },
)


pedidos_create_schema = extend_schema(
    operation_id="pedidos_create",
    tags=["vendas"],
    summary="Criar pedido",
    description="""
    Cria um pedido com seus itens numa única transação.

    - `itens` é obrigatório (mínimo 1 item)
    - Produtos, cliente e forma de pagamento devem pertencer à loja
    - Se `valor_total` não for enviado, é calculado como
      soma dos itens - valor_desconto + frete
    """,
    request=PedidoSerializer,
    examples=[
        OpenApiExample(
            name="Pedido com dois itens",
            value={
                "status": "pendente",
                "frete": "15.00",
                "tipo_frete": "normal",
                "itens": [
                    {"produto_id": 1, "quantidade": 2, "preco_unitario": "49.90"},
                    {"produto_id": 3, "quantidade": 1, "preco_unitario": "120.00"},
                ],
            },
            request_only=True,
        )
    ],
    responses={
        201: OpenApiResponse(response=PedidoSerializer, description="Pedido criado com sucesso"),
        422: OpenApiResponse(description="Dados inválidos"),
    },
)


pedidos_status_schema = extend_schema(
    operation_id="pedidos_status_update",
    tags=["vendas"],
    summary="Mudar status do pedido",
    request=PedidoStatusSerializer,
    responses={
        200: OpenApiResponse(
            description="Status do pedido atualizado com sucesso",
            examples=[
                OpenApiExample(
                    name="Status atualizado",
                    value={
                        "success": True,
                        "message": "Status do pedido atualizado com sucesso.",
                        "data": {"id": 1, "status": "enviado", "updated_at": "2025-05-28T15:48:00-03:00"},
                    },
                )
            ],
        ),
        404: OpenApiResponse(description="Pedido não encontrado"),
        422: OpenApiResponse(description="Status inválido"),
    },
)


descontos_create_schema = extend_schema(
    operation_id="descontos_create",
    tags=["vendas"],
    summary="Criar desconto",
    description="O código é único dentro da loja. Percentagens vão de 0 a 100.",
    request=DescontoSerializer,
    examples=[
        OpenApiExample(
            name="Desconto de 10%",
            value={"codigo": "DESC10", "tipo": "percentagem", "valor": 10, "data_inicio": "2025-05-28"},
            request_only=True,
        )
    ],
    responses={
        201: OpenApiResponse(response=DescontoSerializer, description="Desconto criado com sucesso"),
        422: OpenApiResponse(description="Código já em uso ou dados inválidos"),
    },
)
