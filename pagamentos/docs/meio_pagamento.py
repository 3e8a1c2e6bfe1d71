"""
Documentação das rotas de meios de pagamento.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema

from ..serializers import MeioPagamentoSerializer


meios_pagamento_create_schema = extend_schema(
    operation_id="meios_pagamento_create",
    tags=["pagamentos"],
    summary="Criar meio de pagamento",
    description="""
    Cria um meio de pagamento na loja.

    Envie como multipart/form-data para incluir o `logo` (jpg, jpeg, png ou webp, até 2 MB).
    O arquivo é gravado em `<pasta da loja>/assets/meiosPagamento/logos/`.
    """,
    request={"multipart/form-data": MeioPagamentoSerializer},
    responses={
        201: OpenApiResponse(response=MeioPagamentoSerializer, description="Meio de pagamento criado com sucesso"),
        422: OpenApiResponse(description="Nome já cadastrado ou arquivo inválido"),
    },
)
