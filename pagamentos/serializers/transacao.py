from core.serializers import CampoRelacionadoLoja, LojaModelSerializer
from vendas.models import Cliente, Pedido
from ..models import FormaPagamento, TransacaoPagamento


class TransacaoPagamentoSerializer(LojaModelSerializer):
    pedido_id = CampoRelacionadoLoja(source="pedido", queryset=Pedido.objects.all())
    metodo_pagamento_id = CampoRelacionadoLoja(
        source="metodo_pagamento", queryset=FormaPagamento.objects.all()
    )
    cliente_id = CampoRelacionadoLoja(
        source="cliente",
        queryset=Cliente.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = TransacaoPagamento
        fields = [
            "id",
            "loja_id",
            "pedido_id",
            "metodo_pagamento_id",
            "cliente_id",
            "valor_total",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
