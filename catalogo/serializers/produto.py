"""
Serializers para produtos e variações
"""

from rest_framework import serializers

from core.serializers import CampoRelacionadoLoja, LojaModelSerializer
from core.uploads import VALIDADORES_IMAGEM, remover_caminho, salvar_arquivo, url_publica
from vendas.models import Desconto
from ..models import Categoria, Fornecedor, Marca, Produto, ProdutoVariacao

PASTA_FOTOS = "produtos/fotos"


class ProdutoSerializer(LojaModelSerializer):
    """Serializer para produto (aceita multipart para foto_capa e imagens)"""

    categoria_id = CampoRelacionadoLoja(source="categoria", queryset=Categoria.objects.all())
    marca_id = CampoRelacionadoLoja(source="marca", queryset=Marca.objects.all())
    fornecedor_id = CampoRelacionadoLoja(source="fornecedor", queryset=Fornecedor.objects.all())
    desconto_id = CampoRelacionadoLoja(
        source="desconto",
        queryset=Desconto.objects.all(),
        required=False,
        allow_null=True,
    )
    imagens = serializers.ListField(
        child=serializers.ImageField(validators=VALIDADORES_IMAGEM),
        write_only=True,
        required=False,
        help_text="Imagens adicionais (substituem as atuais na atualização)",
    )

    class Meta:
        model = Produto
        fields = [
            "id",
            "loja_id",
            "nome",
            "descricao",
            "referencia",
            "codigo_unico_produto",
            "codigo_barras",
            "preco_compra",
            "preco_venda",
            "preco_promocional",
            "iva",
            "gerir_stock",
            "estoque",
            "categoria_id",
            "marca_id",
            "fornecedor_id",
            "desconto_id",
            "peso",
            "largura",
            "altura",
            "comprimento",
            "foto_capa",
            "imagens",
            "video_url",
            "status",
            "destaque",
            "novidade",
            "produto_em_oferta",
            "frete_gratis",
            "variacoes",
            "prazo_envio",
            "visualizacoes",
            "avaliacao_media",
            "qtd_avaliacoes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_referencia(self, value):
        return self.validar_unico_na_loja(
            "referencia", value or None, "A referência já está em uso."
        )

    def validate_codigo_unico_produto(self, value):
        return self.validar_unico_na_loja(
            "codigo_unico_produto", value or None, "O código único do produto já está em uso."
        )

    def to_representation(self, instance):
        data = super().to_representation(instance)
        request = self.context.get("request")
        data["imagens"] = [url_publica(request, caminho) for caminho in instance.imagens or []]
        return data

    def _salvar_imagens(self, arquivos, loja):
        return [salvar_arquivo(arquivo, loja, PASTA_FOTOS) for arquivo in arquivos]

    def create(self, validated_data):
        arquivos = validated_data.pop("imagens", None)
        if arquivos:
            validated_data["imagens"] = self._salvar_imagens(arquivos, validated_data["loja"])
        return super().create(validated_data)

    def update(self, instance, validated_data):
        arquivos = validated_data.pop("imagens", None)
        if arquivos is None:
            return super().update(instance, validated_data)

        anteriores = list(instance.imagens or [])
        validated_data["imagens"] = self._salvar_imagens(arquivos, instance.loja)
        instance = super().update(instance, validated_data)
        for caminho in anteriores:
            remover_caminho(caminho)
        return instance


class EstoqueSerializer(serializers.Serializer):
    """Atualização isolada do estoque"""

    estoque = serializers.IntegerField(min_value=0)


class ProdutoVariacaoSerializer(serializers.ModelSerializer):
    produto_id = CampoRelacionadoLoja(
        source="produto",
        queryset=Produto.objects.all(),
        error_messages={"does_not_exist": "Este produto não pertence à sua loja."},
    )

    class Meta:
        model = ProdutoVariacao
        fields = [
            "id",
            "produto_id",
            "tipo_variacao",
            "valor_variacao",
            "estoque",
            "preco_adicional",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
