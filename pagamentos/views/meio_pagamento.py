"""
Views para meios e formas de pagamento
"""

from core.views import RecursoLojaDetailView, RecursoLojaListCreateView
from ..docs import meios_pagamento_create_schema
from ..filters import FormaPagamentoFilter
from ..models import FormaPagamento, MeioPagamento
from ..serializers import FormaPagamentoSerializer, MeioPagamentoSerializer


class MeioPagamentoListCreateView(RecursoLojaListCreateView):
    queryset = MeioPagamento.objects.prefetch_related("formas_pagamento")
    serializer_class = MeioPagamentoSerializer

    @meios_pagamento_create_schema
    def post(self, request, *args, **kwargs):
        return self.create(request, *args, **kwargs)


class MeioPagamentoDetailView(RecursoLojaDetailView):
    queryset = MeioPagamento.objects.prefetch_related("formas_pagamento")
    serializer_class = MeioPagamentoSerializer


class FormaPagamentoListCreateView(RecursoLojaListCreateView):
    queryset = FormaPagamento.objects.select_related("meio_pagamento")
    serializer_class = FormaPagamentoSerializer
    filterset_class = FormaPagamentoFilter
    genero = "a"


class FormaPagamentoDetailView(RecursoLojaDetailView):
    queryset = FormaPagamento.objects.select_related("meio_pagamento")
    serializer_class = FormaPagamentoSerializer
    genero = "a"
