from django.contrib import admin

from .models import Template
from .secoes import SECOES


@admin.register(Template)
class TemplateAdmin(admin.ModelAdmin):
    list_display = ["nome", "loja", "ativo", "created_at"]
    list_filter = ["ativo"]
    search_fields = ["nome"]


class SecaoAdmin(admin.ModelAdmin):
    list_display = ["id", "loja", "template", "created_at"]
    list_filter = ["template"]


for secao in SECOES:
    admin.site.register(secao.model, SecaoAdmin)
