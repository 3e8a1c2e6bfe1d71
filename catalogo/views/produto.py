"""
Views para produtos
"""

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters as drf_filters
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from core.permissions import TemLojaAssociada
from core.responses import envelope
from core.uploads import remover_caminho, url_publica
from core.views import LojaScopedMixin, RecursoLojaDetailView, RecursoLojaListCreateView

from ..docs import (
    produtos_create_schema,
    produtos_estoque_schema,
    produtos_exportar_csv_schema,
    produtos_list_schema,
)
from ..exports import exportar_produtos_csv
from ..filters import ProdutoFilter
from ..models import Produto
from ..serializers import EstoqueSerializer, ProdutoSerializer


class ProdutoListCreateView(RecursoLojaListCreateView):
    queryset = Produto.objects.select_related("categoria", "marca", "fornecedor")
    serializer_class = ProdutoSerializer
    filterset_class = ProdutoFilter
    filter_backends = [
        DjangoFilterBackend,
        drf_filters.SearchFilter,
        drf_filters.OrderingFilter,
    ]
    search_fields = ["nome", "referencia", "codigo_unico_produto", "codigo_barras"]
    ordering_fields = ["nome", "preco_venda", "estoque", "created_at", "updated_at"]

    @produtos_list_schema
    def get(self, request, *args, **kwargs):
        return self.list(request, *args, **kwargs)

    @produtos_create_schema
    def post(self, request, *args, **kwargs):
        return self.create(request, *args, **kwargs)


class ProdutoDetailView(RecursoLojaDetailView):
    queryset = Produto.objects.all()
    serializer_class = ProdutoSerializer

    def perform_destroy(self, instance):
        imagens = list(instance.imagens or [])
        super().perform_destroy(instance)
        for caminho in imagens:
            remover_caminho(caminho)


class ProdutoEstoqueView(LojaScopedMixin, APIView):
    """Atualiza apenas o estoque do produto"""

    queryset = Produto.objects.all()

    @produtos_estoque_schema
    def patch(self, request, pk):
        produto = self.get_queryset().filter(pk=pk).first()
        if produto is None:
            raise NotFound(self.mensagem("nao_encontrado"))

        serializer = EstoqueSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        produto.estoque = serializer.validated_data["estoque"]
        produto.save(update_fields=["estoque", "updated_at"])

        return envelope(
            "Estoque atualizado com sucesso.",
            {"id": produto.id, "estoque": produto.estoque, "updated_at": produto.updated_at},
        )


class ProdutoExportarCsvView(APIView):
    """Exporta os produtos da loja para CSV"""

    permission_classes = [IsAuthenticated, TemLojaAssociada]

    @produtos_exportar_csv_schema
    def get(self, request):
        loja = request.user.loja
        produtos = Produto.objects.filter(loja=loja).order_by("id")
        if not produtos.exists():
            raise NotFound("Nenhum produto encontrado.")

        nome_arquivo, caminho = exportar_produtos_csv(loja, produtos)
        return envelope(
            "Produtos exportados com sucesso.",
            {
                "file_name": nome_arquivo,
                "file_path": caminho,
                "url": url_publica(request, caminho),
            },
        )
