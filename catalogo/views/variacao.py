"""
Views para variações de produto
"""

from rest_framework.exceptions import NotFound
from rest_framework.views import APIView

from core.responses import envelope
from core.views import LojaScopedMixin, RecursoLojaDetailView, RecursoLojaListCreateView
from ..filters import ProdutoVariacaoFilter
from ..models import ProdutoVariacao
from ..serializers import EstoqueSerializer, ProdutoVariacaoSerializer


class ProdutoVariacaoListCreateView(RecursoLojaListCreateView):
    """Lista (filtrável por ?produto_id=) e cria variações"""

    queryset = ProdutoVariacao.objects.select_related("produto")
    serializer_class = ProdutoVariacaoSerializer
    filterset_class = ProdutoVariacaoFilter
    campo_loja = "produto__loja"
    genero = "a"

    def perform_create(self, serializer):
        # A loja vem do produto, validado por CampoRelacionadoLoja
        serializer.save()


class ProdutoVariacaoDetailView(RecursoLojaDetailView):
    queryset = ProdutoVariacao.objects.select_related("produto")
    serializer_class = ProdutoVariacaoSerializer
    campo_loja = "produto__loja"
    genero = "a"


class ProdutoVariacaoEstoqueView(LojaScopedMixin, APIView):
    queryset = ProdutoVariacao.objects.all()
    campo_loja = "produto__loja"
    genero = "a"

    def patch(self, request, pk):
        variacao = self.get_queryset().filter(pk=pk).first()
        if variacao is None:
            raise NotFound(self.mensagem("nao_encontrado"))

        serializer = EstoqueSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        variacao.estoque = serializer.validated_data["estoque"]
        variacao.save(update_fields=["estoque", "updated_at"])

        return envelope(
            "Estoque atualizado com sucesso.",
            {"id": variacao.id, "estoque": variacao.estoque, "updated_at": variacao.updated_at},
        )
