"""
Documentação das rotas de lojas.
"""

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema

from ..serializers import LojaSerializer


lojas_list_schema = extend_schema(
    operation_id="lojas_list",
    tags=["lojas"],
    summary="Listar loja do usuário",
    description="Retorna a loja vinculada ao usuário autenticado (lista vazia se não houver).",
    responses={
        200: OpenApiResponse(
            response=LojaSerializer(many=True),
            description="Lojas recuperadas com sucesso",
        ),
    },
)


lojas_create_schema = extend_schema(
    operation_id="lojas_create",
    tags=["lojas"],
    summary="Criar loja",
    description="""
    Cria uma nova loja e vincula o usuário autenticado a ela.

    **Processo:**
    1. Valida os dados (e-mail único, cores em hexadecimal, URLs)
    2. Gera a pasta da loja no storage
    3. Cria a estrutura de pastas (assets/gestaoTemplate, assets/produtos, ...)

    Usuários que já possuem loja recebem 422.
    """,
    request=LojaSerializer,
    responses={
        201: OpenApiResponse(
            description="Loja criada com sucesso",
            examples=[
                OpenApiExample(
                    name="Loja criada",
                    value={
                        "success": True,
                        "message": "Loja criada com sucesso.",
                        "data": {
                            "loja_id": 1,
                            "id": 1,
                            "nome": "Minha Loja",
                            "email": "contato@minhaloja.com",
                            "cor": "#FF0000",
                            "pasta": "loja_Minha_Loja_a1b2c3d4e5f6g",
                        },
                    },
                )
            ],
        ),
        422: OpenApiResponse(description="Dados inválidos ou usuário já possui loja"),
    },
)
