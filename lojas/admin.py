from django.contrib import admin

from .models import (
    Checkout,
    Dominio,
    Email,
    Idioma,
    Loja,
    Moeda,
    PontoLevantamento,
    Redirecionamento,
)


@admin.register(Loja)
class LojaAdmin(admin.ModelAdmin):
    list_display = ["nome", "email", "categoria", "pasta", "created_at"]
    search_fields = ["nome", "email"]
    readonly_fields = ["pasta", "created_at", "updated_at"]

    fieldsets = (
        ("Informações Básicas", {"fields": ("nome", "descricao", "categoria")}),
        ("Contato", {"fields": ("email", "telefone", "endereco")}),
        (
            "Identidade visual",
            {"fields": ("logomarca", "cor", "cores_auxiliares")},
        ),
        ("Links", {"fields": ("url_loja", "facebook", "instagram")}),
        ("Sistema", {"fields": ("pasta", "created_at", "updated_at")}),
    )


@admin.register(Dominio)
class DominioAdmin(admin.ModelAdmin):
    list_display = ["dominio", "loja", "principal", "status_dominio", "status_ssl"]
    list_filter = ["principal"]
    search_fields = ["dominio"]


@admin.register(Moeda)
class MoedaAdmin(admin.ModelAdmin):
    list_display = ["codigo", "nome", "simbolo", "taxa_cambio", "padrao", "status", "loja"]
    list_filter = ["padrao", "status"]


@admin.register(Email)
class EmailAdmin(admin.ModelAdmin):
    list_display = ["tipo", "descricao", "loja", "status_conteudo_html"]
    list_filter = ["tipo"]


admin.site.register(Idioma)
admin.site.register(Redirecionamento)
admin.site.register(PontoLevantamento)
admin.site.register(Checkout)
