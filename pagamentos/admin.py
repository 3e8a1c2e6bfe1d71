from django.contrib import admin

from .models import FormaPagamento, MeioPagamento, TransacaoPagamento


class FormaPagamentoInline(admin.TabularInline):
    model = FormaPagamento
    extra = 0


@admin.register(MeioPagamento)
class MeioPagamentoAdmin(admin.ModelAdmin):
    list_display = ["nome", "loja", "created_at"]
    search_fields = ["nome"]
    inlines = [FormaPagamentoInline]


@admin.register(TransacaoPagamento)
class TransacaoPagamentoAdmin(admin.ModelAdmin):
    list_display = ["id", "loja", "pedido", "metodo_pagamento", "valor_total", "created_at"]
    list_filter = ["created_at"]
    readonly_fields = ["created_at", "updated_at"]
