"""
Serializers para meios e formas de pagamento
"""

from core.serializers import CampoRelacionadoLoja, LojaModelSerializer
from ..models import FormaPagamento, MeioPagamento


class FormaPagamentoSerializer(LojaModelSerializer):
    meio_pagamento_id = CampoRelacionadoLoja(
        source="meio_pagamento", queryset=MeioPagamento.objects.all()
    )

    class Meta:
        model = FormaPagamento
        fields = [
            "id",
            "loja_id",
            "meio_pagamento_id",
            "dados_conta",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class MeioPagamentoSerializer(LojaModelSerializer):
    """Meio de pagamento com as formas cadastradas (somente leitura)"""

    formas_pagamento = FormaPagamentoSerializer(many=True, read_only=True)

    class Meta:
        model = MeioPagamento
        fields = [
            "id",
            "loja_id",
            "nome",
            "logo",
            "formas_pagamento",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_nome(self, value):
        return self.validar_unico_na_loja(
            "nome", value, "Este meio de pagamento já está cadastrado."
        )
