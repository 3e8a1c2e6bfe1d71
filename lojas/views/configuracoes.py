"""
Views para as configurações da loja
"""

from core.views import RecursoLojaDetailView, RecursoLojaListCreateView
from ..models import (
    Checkout,
    Dominio,
    Email,
    Idioma,
    Moeda,
    PontoLevantamento,
    Redirecionamento,
)
from ..serializers import (
    CheckoutSerializer,
    DominioSerializer,
    EmailSerializer,
    IdiomaSerializer,
    MoedaSerializer,
    PontoLevantamentoSerializer,
    RedirecionamentoSerializer,
)


class DominioListCreateView(RecursoLojaListCreateView):
    queryset = Dominio.objects.all()
    serializer_class = DominioSerializer


class DominioDetailView(RecursoLojaDetailView):
    queryset = Dominio.objects.all()
    serializer_class = DominioSerializer


class IdiomaListCreateView(RecursoLojaListCreateView):
    queryset = Idioma.objects.all()
    serializer_class = IdiomaSerializer


class IdiomaDetailView(RecursoLojaDetailView):
    queryset = Idioma.objects.all()
    serializer_class = IdiomaSerializer


class MoedaListCreateView(RecursoLojaListCreateView):
    queryset = Moeda.objects.all()
    serializer_class = MoedaSerializer
    genero = "a"


class MoedaDetailView(RecursoLojaDetailView):
    queryset = Moeda.objects.all()
    serializer_class = MoedaSerializer
    genero = "a"


class EmailListCreateView(RecursoLojaListCreateView):
    queryset = Email.objects.all()
    serializer_class = EmailSerializer


class EmailDetailView(RecursoLojaDetailView):
    queryset = Email.objects.all()
    serializer_class = EmailSerializer


class RedirecionamentoListCreateView(RecursoLojaListCreateView):
    queryset = Redirecionamento.objects.all()
    serializer_class = RedirecionamentoSerializer


class RedirecionamentoDetailView(RecursoLojaDetailView):
    queryset = Redirecionamento.objects.all()
    serializer_class = RedirecionamentoSerializer


class PontoLevantamentoListCreateView(RecursoLojaListCreateView):
    queryset = PontoLevantamento.objects.all()
    serializer_class = PontoLevantamentoSerializer


class PontoLevantamentoDetailView(RecursoLojaDetailView):
    queryset = PontoLevantamento.objects.all()
    serializer_class = PontoLevantamentoSerializer


class CheckoutListCreateView(RecursoLojaListCreateView):
    queryset = Checkout.objects.all()
    serializer_class = CheckoutSerializer


class CheckoutDetailView(RecursoLojaDetailView):
    queryset = Checkout.objects.all()
    serializer_class = CheckoutSerializer
