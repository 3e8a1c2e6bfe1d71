"""
Registro das seções do template: rota -> (modelo, serializer, gênero)
"""

from collections import namedtuple

from . import models, serializers

Secao = namedtuple("Secao", ["rota", "model", "serializer_class", "genero"])

SECOES = [
    Secao("anuncios", models.Anuncio, serializers.AnuncioSerializer, "o"),
    Secao("banners-estaticos", models.BannerEstatico, serializers.BannerEstaticoSerializer, "o"),
    Secao("banners-promocionais", models.BannerPromocional, serializers.BannerPromocionalSerializer, "o"),
    Secao("banners-rotativos", models.BannerRotativo, serializers.BannerRotativoSerializer, "o"),
    Secao("banners-categorias", models.BannerCategoria, serializers.BannerCategoriaSerializer, "o"),
    Secao("banners-novidades", models.BannerNovidade, serializers.BannerNovidadeSerializer, "o"),
    Secao("cabecalhos", models.Cabecalho, serializers.CabecalhoSerializer, "o"),
    Secao("carrinhos", models.Carrinho, serializers.CarrinhoSerializer, "o"),
    Secao("checkouts", models.CheckoutTemplate, serializers.CheckoutTemplateSerializer, "o"),
    Secao("depoimentos", models.Depoimento, serializers.DepoimentoSerializer, "o"),
    Secao("favoritos", models.Favorito, serializers.FavoritoSerializer, "o"),
    Secao("imagens", models.ImagemTemplate, serializers.ImagemTemplateSerializer, "a"),
    Secao("info-frete-pagamento", models.InfoFretePagamento, serializers.InfoFretePagamentoSerializer, "a"),
    Secao("marcas", models.MarcaTemplate, serializers.MarcaTemplateSerializer, "a"),
    Secao(
        "mensagens-institucionais",
        models.MensagemInstitucional,
        serializers.MensagemInstitucionalSerializer,
        "a",
    ),
    Secao("mostrar-produto", models.MostrarProduto, serializers.MostrarProdutoSerializer, "a"),
    Secao("newsletters", models.Newsletter, serializers.NewsletterSerializer, "a"),
    Secao("popups-promocionais", models.PopupPromocional, serializers.PopupPromocionalSerializer, "o"),
    Secao("produtos-em-destaque", models.ProdutoDestaque, serializers.ProdutoDestaqueSerializer, "a"),
    Secao("produtos-novos", models.ProdutoNovo, serializers.ProdutoNovoSerializer, "a"),
    Secao("produtos-em-oferta", models.ProdutoOferta, serializers.ProdutoOfertaSerializer, "a"),
    Secao("textos", models.Texto, serializers.TextoSerializer, "o"),
    Secao("videos", models.Video, serializers.VideoSerializer, "o"),
]
