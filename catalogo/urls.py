from django.urls import path
from . import views

app_name = "catalogo"

urlpatterns = [
    path("categorias/", views.CategoriaListCreateView.as_view(), name="categoria-list"),
    path("categorias/<int:pk>/", views.CategoriaDetailView.as_view(), name="categoria-detail"),
    path("marcas/", views.MarcaListCreateView.as_view(), name="marca-list"),
    path("marcas/<int:pk>/", views.MarcaDetailView.as_view(), name="marca-detail"),
    path("fornecedores/", views.FornecedorListCreateView.as_view(), name="fornecedor-list"),
    path(
        "fornecedores/<int:pk>/",
        views.FornecedorDetailView.as_view(),
        name="fornecedor-detail",
    ),
    # Produtos
    path("produtos/", views.ProdutoListCreateView.as_view(), name="produto-list"),
    path(
        "produtos/exportar/csv/",
        views.ProdutoExportarCsvView.as_view(),
        name="produto-exportar-csv",
    ),
    path("produtos/<int:pk>/", views.ProdutoDetailView.as_view(), name="produto-detail"),
    path(
        "produtos/<int:pk>/estoque/",
        views.ProdutoEstoqueView.as_view(),
        name="produto-estoque",
    ),
    # Variações
    path("variacoes/", views.ProdutoVariacaoListCreateView.as_view(), name="variacao-list"),
    path(
        "variacoes/<int:pk>/",
        views.ProdutoVariacaoDetailView.as_view(),
        name="variacao-detail",
    ),
    path(
        "variacoes/<int:pk>/estoque/",
        views.ProdutoVariacaoEstoqueView.as_view(),
        name="variacao-estoque",
    ),
]
