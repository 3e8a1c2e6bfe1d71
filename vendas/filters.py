import django_filters as filters

from .models import Cliente, Desconto, Pedido


class PedidoFilter(filters.FilterSet):
    status = filters.ChoiceFilter(choices=Pedido.STATUS_CHOICES)
    cliente_id = filters.NumberFilter(field_name="cliente_id")
    criado_apos = filters.DateFilter(field_name="created_at", lookup_expr="date__gte")
    criado_ate = filters.DateFilter(field_name="created_at", lookup_expr="date__lte")

    class Meta:
        model = Pedido
        fields = ["status", "cliente_id", "criado_apos", "criado_ate"]


class DescontoFilter(filters.FilterSet):
    codigo = filters.CharFilter(field_name="codigo", lookup_expr="iexact")
    status = filters.ChoiceFilter(choices=Desconto.STATUS_CHOICES)
    tipo = filters.ChoiceFilter(choices=Desconto.TIPO_CHOICES)

    class Meta:
        model = Desconto
        fields = ["codigo", "status", "tipo"]


class ClienteFilter(filters.FilterSet):
    nome = filters.CharFilter(field_name="nome", lookup_expr="icontains")
    status = filters.ChoiceFilter(choices=Cliente.STATUS_CHOICES)

    class Meta:
        model = Cliente
        fields = ["nome", "status"]
