"""
Serializers do módulo de catálogo
"""

from .cadastros import CategoriaSerializer, FornecedorSerializer, MarcaSerializer
from .produto import EstoqueSerializer, ProdutoSerializer, ProdutoVariacaoSerializer

__all__ = [
    "CategoriaSerializer",
    "FornecedorSerializer",
    "MarcaSerializer",
    "EstoqueSerializer",
    "ProdutoSerializer",
    "ProdutoVariacaoSerializer",
]
