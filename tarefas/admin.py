from django.contrib import admin

from .models import Tarefa


@admin.register(Tarefa)
class TarefaAdmin(admin.ModelAdmin):
    list_display = ["titulo", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["titulo"]
