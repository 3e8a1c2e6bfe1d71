"""
Serializers das seções do template.

A loja e o template nunca vêm do corpo da requisição: são injetados pela view
a partir do usuário autenticado e da URL.
"""

from rest_framework import serializers

from catalogo.models import Categoria, Produto
from core.serializers import CampoRelacionadoLoja, LojaModelSerializer
from .. import models

CAMPOS_BASE = ["id", "loja_id", "template_id"]
TIMESTAMPS = ["created_at", "updated_at"]


def campos(*nomes):
    return CAMPOS_BASE + list(nomes) + TIMESTAMPS


class SecaoSerializer(LojaModelSerializer):
    template_id = serializers.IntegerField(read_only=True)

    class Meta:
        read_only_fields = ["id", "created_at", "updated_at"]


class AnuncioSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.Anuncio
        fields = campos(
            "titulo", "texto", "link", "imagem_desktop", "imagem_mobile", "carregar_imagens_mobile"
        )


class BannerEstaticoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.BannerEstatico
        fields = campos("imagem", "titulo", "link", "exibir")


class BannerPromocionalSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.BannerPromocional
        fields = campos(
            "titulo",
            "texto_fora_imagem",
            "banners_carrossel",
            "mesma_altura",
            "remover_espacos",
            "banners_por_linha_desktop",
            "imagem_desktop",
            "imagem_mobile",
            "carregar_imagens_mobile",
        )


class BannerRotativoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.BannerRotativo
        fields = campos("imagem_desktop", "imagem_mobile", "largura_tela", "efeito_movimento")


CAMPOS_BANNER_GRUPO = [
    "titulo",
    "mostrar_texto_fora_imagem",
    "mostrar_banners_carrossel",
    "mesma_altura_banners",
    "remover_espacos_banners",
    "banners_por_linha",
    "imagem_desktop",
    "imagem_mobile",
    "carregar_imagens_celular",
]


class BannerCategoriaSerializer(SecaoSerializer):
    categoria_id = CampoRelacionadoLoja(
        source="categoria",
        queryset=Categoria.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta(SecaoSerializer.Meta):
        model = models.BannerCategoria
        fields = campos("categoria_id", *CAMPOS_BANNER_GRUPO)


class BannerNovidadeSerializer(SecaoSerializer):
    produto_id = CampoRelacionadoLoja(
        source="produto",
        queryset=Produto.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta(SecaoSerializer.Meta):
        model = models.BannerNovidade
        fields = campos("produto_id", *CAMPOS_BANNER_GRUPO)


class CabecalhoSerializer(SecaoSerializer):
    cabecalho_em_celulares = serializers.ListField(required=False)
    cabecalho_em_computadores = serializers.ListField(required=False)
    barra_anuncio = serializers.ListField(required=False)

    class Meta(SecaoSerializer.Meta):
        model = models.Cabecalho
        fields = campos(
            "cor_fundo",
            "cor_texto_icones",
            "tamanho_logo",
            "mostrar_idiomas",
            "cabecalho_em_celulares",
            "cabecalho_em_computadores",
            "barra_anuncio",
        )


class CarrinhoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.Carrinho
        fields = campos(
            "mostrar_botao_ver_mais",
            "valor_minimo_compra",
            "carrinho_rapido",
            "sugerir_produtos_complementares",
            "mostrar_calculadora_frete",
        )


class CheckoutTemplateSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.CheckoutTemplate
        fields = campos("exibir_opcoes_entrega", "exibir_opcoes_pagamento", "exibir_resumo_pedido")


class DepoimentoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.Depoimento
        fields = campos("titulo", "descricao_italico", "imagem", "nome", "descricao")


class FavoritoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.Favorito
        fields = campos("favoritado")


class ImagemTemplateSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.ImagemTemplate
        fields = campos("imagem", "titulo")


class InfoFretePagamentoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.InfoFretePagamento
        fields = campos(
            "usar_cores_secao",
            "cor_fundo",
            "cor_texto",
            "mostrar_banners_home",
            "imagem",
            "icone",
            "titulo",
            "descricao",
            "link",
        )


class MarcaTemplateSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.MarcaTemplate
        fields = campos("tipo_visualizacao", "titulo", "imagem")


class MensagemInstitucionalSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.MensagemInstitucional
        fields = campos("subtitulo", "titulo", "titulo_italico", "link", "botao")


class MostrarProdutoSerializer(SecaoSerializer):
    """
    Opções da página de produto.

    `mensagem_ultima_unidade` é obrigatória quando `mostrar_mensagem_ultima_unidade`
    está ligado, assim como `facebook_perfil_id` com `permitir_comentarios_facebook`.
    """

    OBRIGATORIOS_SE_LIGADO = {
        "mostrar_mensagem_ultima_unidade": "mensagem_ultima_unidade",
        "permitir_comentarios_facebook": "facebook_perfil_id",
    }

    class Meta(SecaoSerializer.Meta):
        model = models.MostrarProduto
        fields = campos(
            "mostrar_calculadora_frete",
            "mostrar_parcelas",
            "mostrar_preco_desconto",
            "variacoes_como_botoes",
            "variacoes_cor_como_foto",
            "mostrar_estoque",
            "mostrar_mensagem_ultima_unidade",
            "descricao_largura_total",
            "permitir_comentarios_facebook",
            "mensagem_ultima_unidade",
            "facebook_perfil_id",
            "link_guia_medidas",
            "titulo_produtos_alternativos",
            "titulo_produtos_complementares",
        )

    def validate(self, attrs):
        erros = {}
        for flag, campo in self.OBRIGATORIOS_SE_LIGADO.items():
            ligado = attrs.get(flag, getattr(self.instance, flag, False))
            valor = attrs.get(campo, getattr(self.instance, campo, None))
            if ligado and not valor:
                erros[campo] = [f"Este campo é obrigatório quando {flag} está ativo."]
        if erros:
            raise serializers.ValidationError(erros)
        return attrs


class NewsletterSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.Newsletter
        fields = campos(
            "aumentar_largura_tela",
            "usar_cores_newsletter",
            "cor_fundo",
            "cor_texto",
            "imagem",
            "titulo",
            "descricao",
        )


class PopupPromocionalSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.PopupPromocional
        fields = campos(
            "mostrar_popup",
            "imagem",
            "titulo",
            "descricao",
            "texto_botao",
            "link_botao",
            "permitir_inscricao_newsletter",
        )


CAMPOS_VITRINE = [
    "titulo",
    "tipo_visualizacao",
    "produtos_por_linha_celulares",
    "produtos_por_linha_computadores",
]


class ProdutoDestaqueSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.ProdutoDestaque
        fields = campos(*CAMPOS_VITRINE)


class ProdutoNovoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.ProdutoNovo
        fields = campos(*CAMPOS_VITRINE)


class ProdutoOfertaSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.ProdutoOferta
        fields = campos(*CAMPOS_VITRINE)


class TextoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.Texto
        fields = campos("titulo", "conteudo", "tipo_texto")


class VideoSerializer(SecaoSerializer):
    class Meta(SecaoSerializer.Meta):
        model = models.Video
        fields = campos(
            "aumentar_largura_tela",
            "tipo_reproducao",
            "link_youtube",
            "imagem",
            "titulo",
            "descricao",
            "texto_botao",
            "link_botao",
        )
