"""
Serializers para pedidos
"""

import logging
from decimal import Decimal

from django.db import transaction
from rest_framework import serializers

from catalogo.models import Produto
from core.serializers import CampoRelacionadoLoja, LojaModelSerializer
from pagamentos.models import FormaPagamento
from ..models import Cliente, ItemPedido, Pedido
from .cliente import CampoEnderecoUsuario

logger = logging.getLogger(__name__)


class ItemPedidoSerializer(serializers.ModelSerializer):
    """Item do pedido; o subtotal é calculado"""

    produto_id = CampoRelacionadoLoja(
        source="produto",
        queryset=Produto.objects.all(),
        error_messages={"does_not_exist": "Este produto não pertence à sua loja."},
    )
    quantidade = serializers.IntegerField(min_value=1)
    preco_unitario = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0")
    )

    class Meta:
        model = ItemPedido
        fields = [
            "id",
            "produto_id",
            "quantidade",
            "preco_unitario",
            "subtotal",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "subtotal", "created_at", "updated_at"]


class PedidoSerializer(LojaModelSerializer):
    """
    Serializer para pedido.

    Na criação, `itens` é obrigatório (mínimo 1) e pedido + itens são gravados
    numa única transação. Na atualização os itens não podem ser alterados.
    """

    cliente_id = CampoRelacionadoLoja(
        source="cliente",
        queryset=Cliente.objects.all(),
        required=False,
        allow_null=True,
    )
    metodo_pagamento_id = CampoRelacionadoLoja(
        source="metodo_pagamento",
        queryset=FormaPagamento.objects.all(),
        required=False,
        allow_null=True,
    )
    endereco_entrega_id = CampoEnderecoUsuario(
        source="endereco_entrega", required=False, allow_null=True
    )
    valor_total = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False
    )
    itens = ItemPedidoSerializer(many=True, required=False)

    class Meta:
        model = Pedido
        fields = [
            "id",
            "loja_id",
            "codigo_unico_pedido",
            "cliente_id",
            "status",
            "valor_total",
            "valor_desconto",
            "frete",
            "tipo_frete",
            "prazo_entrega",
            "endereco_entrega_id",
            "metodo_pagamento_id",
            "observacoes",
            "itens",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "codigo_unico_pedido", "created_at", "updated_at"]

    def validate_itens(self, value):
        if self.instance is not None:
            raise serializers.ValidationError(
                "Os itens de um pedido não podem ser alterados."
            )
        if not value:
            raise serializers.ValidationError("O pedido deve ter pelo menos um item.")
        return value

    def validate(self, attrs):
        if self.instance is None and "itens" not in attrs:
            raise serializers.ValidationError({"itens": ["Este campo é obrigatório."]})
        if self.instance is None and attrs.get("valor_total") is None:
            attrs["valor_total"] = self._calcular_total(attrs)
        return attrs

    def _calcular_total(self, attrs):
        """Soma dos itens - desconto + frete; o desconto não pode deixar o total negativo"""
        soma_itens = sum(
            (item["preco_unitario"] * item["quantidade"] for item in attrs["itens"]),
            Decimal("0"),
        )
        total = (
            soma_itens
            - attrs.get("valor_desconto", Decimal("0"))
            + attrs.get("frete", Decimal("0"))
        )
        if total < 0:
            raise serializers.ValidationError(
                {
                    "valor_desconto": [
                        "O desconto não pode ser maior que o valor dos itens somado ao frete."
                    ]
                }
            )
        return total.quantize(Decimal("0.01"))

    def create(self, validated_data):
        itens = validated_data.pop("itens")
        with transaction.atomic():
            pedido = Pedido.objects.create(**validated_data)
            for item in itens:
                ItemPedido.objects.create(pedido=pedido, **item)

        logger.info(
            f"Pedido {pedido.codigo_unico_pedido} criado com {len(itens)} item(ns) "
            f"(loja_id={pedido.loja_id})"
        )
        return pedido


class PedidoStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=Pedido.STATUS_CHOICES,
        error_messages={"invalid_choice": '"{input}" não é um status de pedido válido.'},
    )
