"""
Serializers para as configurações da loja
(domínios, idiomas, moedas, e-mails, redirecionamentos, pontos de levantamento, checkout)
"""

import re

from django.db import transaction
from rest_framework import serializers

from core.serializers import LojaModelSerializer
from ..models import (
    Checkout,
    Dominio,
    Email,
    Idioma,
    Moeda,
    PontoLevantamento,
    Redirecionamento,
)

IDIOMA_REGEX = re.compile(r"^[a-z]{2}(-[A-Z]{2})?$", re.IGNORECASE)


class DominioSerializer(LojaModelSerializer):
    class Meta:
        model = Dominio
        fields = [
            "id",
            "loja_id",
            "dominio",
            "principal",
            "status_dominio",
            "status_ssl",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class IdiomaSerializer(LojaModelSerializer):
    class Meta:
        model = Idioma
        fields = ["id", "loja_id", "codigo_idioma", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_codigo_idioma(self, value):
        if not IDIOMA_REGEX.match(value):
            raise serializers.ValidationError(
                "O código do idioma deve estar no formato xx ou xx-XX (ex: pt-BR)."
            )
        # Normaliza para xx ou xx-XX (ex: PT-br -> pt-BR)
        idioma, _, regiao = value.partition("-")
        value = f"{idioma.lower()}-{regiao.upper()}" if regiao else idioma.lower()
        return self.validar_unico_na_loja(
            "codigo_idioma", value, "Este idioma já está cadastrado na loja."
        )


class MoedaSerializer(LojaModelSerializer):
    class Meta:
        model = Moeda
        fields = [
            "id",
            "loja_id",
            "nome",
            "codigo",
            "simbolo",
            "taxa_cambio",
            "padrao",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_nome(self, value):
        return self.validar_unico_na_loja("nome", value, "O nome da moeda já está em uso.")

    def validate_codigo(self, value):
        return self.validar_unico_na_loja("codigo", value, "O código da moeda já está em uso.")

    def _desmarcar_outras(self, moeda):
        Moeda.objects.filter(loja_id=moeda.loja_id, padrao=True).exclude(pk=moeda.pk).update(
            padrao=False
        )

    def create(self, validated_data):
        with transaction.atomic():
            moeda = super().create(validated_data)
            if moeda.padrao:
                self._desmarcar_outras(moeda)
        return moeda

    def update(self, instance, validated_data):
        with transaction.atomic():
            moeda = super().update(instance, validated_data)
            if moeda.padrao:
                self._desmarcar_outras(moeda)
        return moeda


class EmailSerializer(LojaModelSerializer):
    class Meta:
        model = Email
        fields = [
            "id",
            "loja_id",
            "tipo",
            "descricao",
            "conteudo",
            "conteudo_html",
            "status_conteudo_html",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class RedirecionamentoSerializer(LojaModelSerializer):
    class Meta:
        model = Redirecionamento
        fields = ["id", "loja_id", "url_antiga", "url_nova", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate(self, attrs):
        url_antiga = attrs.get("url_antiga", getattr(self.instance, "url_antiga", None))
        url_nova = attrs.get("url_nova", getattr(self.instance, "url_nova", None))
        if not url_antiga and not url_nova:
            raise serializers.ValidationError(
                {"url": ["Pelo menos uma das URLs (nova ou antiga) deve ser fornecida."]}
            )
        return attrs


class PontoLevantamentoSerializer(LojaModelSerializer):
    class Meta:
        model = PontoLevantamento
        fields = [
            "id",
            "loja_id",
            "nome_local",
            "estado",
            "cidade",
            "bairro",
            "rua",
            "numero",
            "complemento",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class CheckoutSerializer(LojaModelSerializer):
    class Meta:
        model = Checkout
        fields = [
            "id",
            "loja_id",
            "cores_layout",
            "pedir_telefone",
            "pedir_endereco",
            "checkout_acelerado",
            "mensagem_cliente",
            "mensagem_segmento",
            "compra",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
