from rest_framework import serializers

from .models import Tarefa

MENSAGEM_STATUS_INVALIDO = "O status deve ser pendente, em_andamento ou concluida."


class TarefaSerializer(serializers.ModelSerializer):
    titulo = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "O título é obrigatório.",
            "blank": "O título é obrigatório.",
            "max_length": "O título não pode ter mais de 255 caracteres.",
        },
    )
    status = serializers.ChoiceField(
        choices=Tarefa.STATUS_CHOICES,
        required=False,
        error_messages={"invalid_choice": MENSAGEM_STATUS_INVALIDO},
    )

    class Meta:
        model = Tarefa
        fields = ["id", "titulo", "descricao", "status", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]
