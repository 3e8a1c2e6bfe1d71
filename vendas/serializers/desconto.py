"""
Serializer para descontos
"""

from decimal import Decimal

from rest_framework import serializers

from core.serializers import LojaModelSerializer
from ..models import Desconto


class DescontoSerializer(LojaModelSerializer):
    data_inicio = serializers.DateField(input_formats=["%Y-%m-%d"])
    data_fim = serializers.DateField(
        input_formats=["%Y-%m-%d"], required=False, allow_null=True
    )

    class Meta:
        model = Desconto
        fields = [
            "id",
            "loja_id",
            "codigo",
            "tipo",
            "valor",
            "data_inicio",
            "data_fim",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_codigo(self, value):
        return self.validar_unico_na_loja("codigo", value, "O código já está em uso.")

    def validate(self, attrs):
        # Em atualização parcial, compara com os valores já gravados
        tipo = attrs.get("tipo", getattr(self.instance, "tipo", None))
        valor = attrs.get("valor", getattr(self.instance, "valor", None))
        data_inicio = attrs.get("data_inicio", getattr(self.instance, "data_inicio", None))
        data_fim = attrs.get("data_fim", getattr(self.instance, "data_fim", None))

        if tipo == "percentagem" and valor is not None and valor > Decimal("100"):
            raise serializers.ValidationError(
                {"valor": ["A percentagem não pode ser maior que 100."]}
            )
        if data_inicio and data_fim and data_fim < data_inicio:
            raise serializers.ValidationError(
                {"data_fim": ["A data de fim deve ser igual ou posterior à data de início."]}
            )
        return attrs
