from django.db import models


class Tarefa(models.Model):
    """Tarefa da lista de afazeres (não pertence a nenhuma loja)"""

    STATUS_CHOICES = [
        ("pendente", "Pendente"),
        ("em_andamento", "Em andamento"),
        ("concluida", "Concluída"),
    ]

    titulo = models.CharField(max_length=255)
    descricao = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pendente", db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Tarefa"
        verbose_name_plural = "Tarefas"
        ordering = ["-created_at"]

    def __str__(self):
        return self.titulo
