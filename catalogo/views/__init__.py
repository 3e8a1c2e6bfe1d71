"""
Views do módulo de catálogo
"""

from .cadastros import (
    CategoriaDetailView,
    CategoriaListCreateView,
    FornecedorDetailView,
    FornecedorListCreateView,
    MarcaDetailView,
    MarcaListCreateView,
)
from .produto import (
    ProdutoDetailView,
    ProdutoEstoqueView,
    ProdutoExportarCsvView,
    ProdutoListCreateView,
)
from .variacao import (
    ProdutoVariacaoDetailView,
    ProdutoVariacaoEstoqueView,
    ProdutoVariacaoListCreateView,
)

__all__ = [
    "CategoriaDetailView",
    "CategoriaListCreateView",
    "FornecedorDetailView",
    "FornecedorListCreateView",
    "MarcaDetailView",
    "MarcaListCreateView",
    "ProdutoDetailView",
    "ProdutoEstoqueView",
    "ProdutoExportarCsvView",
    "ProdutoListCreateView",
    "ProdutoVariacaoDetailView",
    "ProdutoVariacaoEstoqueView",
    "ProdutoVariacaoListCreateView",
]
