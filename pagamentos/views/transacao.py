from core.views import RecursoLojaDetailView, RecursoLojaListCreateView
from ..filters import TransacaoPagamentoFilter
from ..models import TransacaoPagamento
from ..serializers import TransacaoPagamentoSerializer


class TransacaoPagamentoListCreateView(RecursoLojaListCreateView):
    queryset = TransacaoPagamento.objects.all()
    serializer_class = TransacaoPagamentoSerializer
    filterset_class = TransacaoPagamentoFilter
    genero = "a"


class TransacaoPagamentoDetailView(RecursoLojaDetailView):
    queryset = TransacaoPagamento.objects.all()
    serializer_class = TransacaoPagamentoSerializer
    genero = "a"
