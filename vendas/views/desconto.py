"""
Views para descontos
"""

from core.views import RecursoLojaDetailView, RecursoLojaListCreateView
from ..docs import descontos_create_schema
from ..filters import DescontoFilter
from ..models import Desconto
from ..serializers import DescontoSerializer


class DescontoListCreateView(RecursoLojaListCreateView):
    queryset = Desconto.objects.all()
    serializer_class = DescontoSerializer
    filterset_class = DescontoFilter

    @descontos_create_schema
    def post(self, request, *args, **kwargs):
        return self.create(request, *args, **kwargs)


class DescontoDetailView(RecursoLojaDetailView):
    queryset = Desconto.objects.all()
    serializer_class = DescontoSerializer
