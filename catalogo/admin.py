from django.contrib import admin

from .models import Categoria, Fornecedor, Marca, Produto, ProdutoVariacao


class ProdutoVariacaoInline(admin.TabularInline):
    model = ProdutoVariacao
    extra = 0


@admin.register(Produto)
class ProdutoAdmin(admin.ModelAdmin):
    list_display = ["nome", "loja", "referencia", "preco_venda", "estoque", "status", "created_at"]
    list_filter = ["status", "destaque", "novidade", "produto_em_oferta"]
    search_fields = ["nome", "referencia", "codigo_unico_produto", "codigo_barras"]
    readonly_fields = ["visualizacoes", "avaliacao_media", "qtd_avaliacoes", "created_at", "updated_at"]
    inlines = [ProdutoVariacaoInline]

    fieldsets = (
        ("Informações Básicas", {"fields": ("loja", "nome", "descricao", "status")}),
        ("Códigos", {"fields": ("referencia", "codigo_unico_produto", "codigo_barras")}),
        ("Preços", {"fields": ("preco_compra", "preco_venda", "preco_promocional", "iva")}),
        ("Estoque", {"fields": ("gerir_stock", "estoque", "variacoes")}),
        ("Relacionamentos", {"fields": ("categoria", "marca", "fornecedor", "desconto")}),
        ("Mídia", {"fields": ("foto_capa", "imagens", "video_url")}),
        (
            "Estatísticas",
            {"fields": ("visualizacoes", "avaliacao_media", "qtd_avaliacoes", "created_at", "updated_at")},
        ),
    )


@admin.register(Categoria)
class CategoriaAdmin(admin.ModelAdmin):
    list_display = ["nome", "slug", "status", "loja"]
    list_filter = ["status"]
    search_fields = ["nome"]


admin.site.register(Marca)
admin.site.register(Fornecedor)
