"""
Documentação das rotas de produtos.
"""

from drf_spectacular.utils import OpenApiExample, OpenApiParameter, OpenApiResponse, extend_schema

from ..serializers import EstoqueSerializer, ProdutoSerializer


produtos_list_schema = extend_schema(
    operation_id="produtos_list",
    tags=["catalogo"],
    summary="Listar produtos",
    description="Lista os produtos da loja do usuário com filtros, busca e ordenação.",
    parameters=[
        OpenApiParameter(name="nome", description="Filtrar por nome (contém)", required=False, type=str),
        OpenApiParameter(name="status", description="ativo ou inativo", required=False, type=str),
        OpenApiParameter(name="categoria_id", description="Filtrar por categoria", required=False, type=int),
        OpenApiParameter(name="preco_min", description="Preço de venda mínimo", required=False, type=float),
        OpenApiParameter(name="preco_max", description="Preço de venda máximo", required=False, type=float),
        OpenApiParameter(name="search", description="Busca em nome, referência e códigos", required=False, type=str),
        OpenApiParameter(name="ordering", description="Ex: -preco_venda, nome", required=False, type=str),
    ],
    responses={
        200: OpenApiResponse(response=ProdutoSerializer(many=True), description="Produtos recuperados com sucesso"),
    },
)


produtos_create_schema = extend_schema(
    operation_id="produtos_create",
    tags=["catalogo"],
    summary="Criar produto",
    description="""
    Cria um produto na loja do usuário.

    Aceita JSON ou multipart/form-data. Em multipart, `foto_capa` e `imagens`
    (lista) são gravados em `<pasta da loja>/assets/produtos/fotos/`.

    Categoria, marca, fornecedor e desconto devem pertencer à mesma loja.
    """,
    request=ProdutoSerializer,
    responses={
        201: OpenApiResponse(response=ProdutoSerializer, description="Produto criado com sucesso"),
        422: OpenApiResponse(description="Dados inválidos"),
    },
)


produtos_estoque_schema = extend_schema(
    operation_id="produtos_estoque_update",
    tags=["catalogo"],
    summary="Atualizar estoque",
    request=EstoqueSerializer,
    responses={
        200: OpenApiResponse(description="Estoque atualizado com sucesso"),
        404: OpenApiResponse(description="Produto não encontrado"),
        422: OpenApiResponse(description="Estoque inválido"),
    },
)


produtos_exportar_csv_schema = extend_schema(
    operation_id="produtos_exportar_csv",
    tags=["catalogo"],
    summary="Exportar produtos para CSV",
    description="Gera um CSV com todos os produtos da loja e devolve o caminho e a URL pública do arquivo.",
    responses={
        200: OpenApiResponse(
            description="Produtos exportados com sucesso",
            examples=[
                OpenApiExample(
                    name="Exportação",
                    value={
                        "success": True,
                        "message": "Produtos exportados com sucesso.",
                        "data": {
                            "file_name": "produtos_2024-05-01_10-30-00.csv",
                            "file_path": "loja_Minha_Loja_a1b2c3d4e5f6g/exports/csv/produtos_2024-05-01_10-30-00.csv",
                            "url": "http://localhost:8000/storage/loja_Minha_Loja_a1b2c3d4e5f6g/exports/csv/produtos_2024-05-01_10-30-00.csv",
                        },
                    },
                )
            ],
        ),
        404: OpenApiResponse(description="Nenhum produto encontrado"),
    },
)
