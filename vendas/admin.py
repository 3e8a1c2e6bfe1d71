from django.contrib import admin

from .models import Cliente, Desconto, Endereco, ItemPedido, Pedido


class ItemPedidoInline(admin.TabularInline):
    model = ItemPedido
    extra = 0
    readonly_fields = ["subtotal", "created_at"]


@admin.register(Pedido)
class PedidoAdmin(admin.ModelAdmin):
    list_display = [
        "codigo_unico_pedido",
        "loja",
        "cliente",
        "status",
        "valor_total",
        "created_at",
    ]
    list_filter = ["status", "tipo_frete", "created_at"]
    search_fields = ["codigo_unico_pedido", "cliente__nome"]
    readonly_fields = ["codigo_unico_pedido", "created_at", "updated_at"]
    inlines = [ItemPedidoInline]

    fieldsets = (
        ("Informações Básicas", {"fields": ("codigo_unico_pedido", "loja", "cliente", "status")}),
        ("Valores", {"fields": ("valor_total", "valor_desconto", "frete")}),
        ("Entrega", {"fields": ("tipo_frete", "prazo_entrega", "endereco_entrega")}),
        ("Pagamento", {"fields": ("metodo_pagamento", "observacoes")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )


@admin.register(Desconto)
class DescontoAdmin(admin.ModelAdmin):
    list_display = ["codigo", "loja", "tipo", "valor", "data_inicio", "data_fim", "status"]
    list_filter = ["tipo", "status"]
    search_fields = ["codigo"]


@admin.register(Cliente)
class ClienteAdmin(admin.ModelAdmin):
    list_display = ["nome", "loja", "genero", "status", "created_at"]
    list_filter = ["status", "genero"]
    search_fields = ["nome", "documento_numero"]


admin.site.register(Endereco)
