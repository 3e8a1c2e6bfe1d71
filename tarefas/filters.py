import django_filters as filters

from .models import Tarefa
from .serializers import MENSAGEM_STATUS_INVALIDO


class TarefaFilter(filters.FilterSet):
    status = filters.ChoiceFilter(
        choices=Tarefa.STATUS_CHOICES,
        error_messages={"invalid_choice": MENSAGEM_STATUS_INVALIDO},
    )

    class Meta:
        model = Tarefa
        fields = ["status"]


class TarefaStatusObrigatorioFilter(TarefaFilter):
    status = filters.ChoiceFilter(
        choices=Tarefa.STATUS_CHOICES,
        required=True,
        error_messages={
            "required": "O status é obrigatório.",
            "invalid_choice": MENSAGEM_STATUS_INVALIDO,
        },
    )
