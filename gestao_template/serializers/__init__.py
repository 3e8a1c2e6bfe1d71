"""
Serializers do módulo de gestão de template
"""

from .secoes import (
    AnuncioSerializer,
    BannerCategoriaSerializer,
    BannerEstaticoSerializer,
    BannerNovidadeSerializer,
    BannerPromocionalSerializer,
    BannerRotativoSerializer,
    CabecalhoSerializer,
    CarrinhoSerializer,
    CheckoutTemplateSerializer,
    DepoimentoSerializer,
    FavoritoSerializer,
    ImagemTemplateSerializer,
    InfoFretePagamentoSerializer,
    MarcaTemplateSerializer,
    MensagemInstitucionalSerializer,
    MostrarProdutoSerializer,
    NewsletterSerializer,
    PopupPromocionalSerializer,
    ProdutoDestaqueSerializer,
    ProdutoNovoSerializer,
    ProdutoOfertaSerializer,
    TextoSerializer,
    VideoSerializer,
)
from .template import TemplateSerializer

__all__ = [
    "AnuncioSerializer",
    "BannerCategoriaSerializer",
    "BannerEstaticoSerializer",
    "BannerNovidadeSerializer",
    "BannerPromocionalSerializer",
    "BannerRotativoSerializer",
    "CabecalhoSerializer",
    "CarrinhoSerializer",
    "CheckoutTemplateSerializer",
    "DepoimentoSerializer",
    "FavoritoSerializer",
    "ImagemTemplateSerializer",
    "InfoFretePagamentoSerializer",
    "MarcaTemplateSerializer",
    "MensagemInstitucionalSerializer",
    "MostrarProdutoSerializer",
    "NewsletterSerializer",
    "PopupPromocionalSerializer",
    "ProdutoDestaqueSerializer",
    "ProdutoNovoSerializer",
    "ProdutoOfertaSerializer",
    "TextoSerializer",
    "VideoSerializer",
    "TemplateSerializer",
]
