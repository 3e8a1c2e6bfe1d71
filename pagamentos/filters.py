import django_filters as filters

from .models import FormaPagamento, TransacaoPagamento


class FormaPagamentoFilter(filters.FilterSet):
    meio_pagamento_id = filters.NumberFilter(field_name="meio_pagamento_id")

    class Meta:
        model = FormaPagamento
        fields = ["meio_pagamento_id"]


class TransacaoPagamentoFilter(filters.FilterSet):
    pedido_id = filters.NumberFilter(field_name="pedido_id")
    cliente_id = filters.NumberFilter(field_name="cliente_id")
    valor_min = filters.NumberFilter(field_name="valor_total", lookup_expr="gte")
    valor_max = filters.NumberFilter(field_name="valor_total", lookup_expr="lte")

    class Meta:
        model = TransacaoPagamento
        fields = ["pedido_id", "cliente_id", "valor_min", "valor_max"]
