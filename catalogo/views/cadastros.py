"""
Views para categorias, marcas e fornecedores
"""

from core.views import RecursoLojaDetailView, RecursoLojaListCreateView
from ..models import Categoria, Fornecedor, Marca
from ..serializers import CategoriaSerializer, FornecedorSerializer, MarcaSerializer


class CategoriaListCreateView(RecursoLojaListCreateView):
    queryset = Categoria.objects.all()
    serializer_class = CategoriaSerializer
    genero = "a"


class CategoriaDetailView(RecursoLojaDetailView):
    queryset = Categoria.objects.all()
    serializer_class = CategoriaSerializer
    genero = "a"


class MarcaListCreateView(RecursoLojaListCreateView):
    queryset = Marca.objects.all()
    serializer_class = MarcaSerializer
    genero = "a"


class MarcaDetailView(RecursoLojaDetailView):
    queryset = Marca.objects.all()
    serializer_class = MarcaSerializer
    genero = "a"


class FornecedorListCreateView(RecursoLojaListCreateView):
    queryset = Fornecedor.objects.all()
    serializer_class = FornecedorSerializer


class FornecedorDetailView(RecursoLojaDetailView):
    queryset = Fornecedor.objects.all()
    serializer_class = FornecedorSerializer
