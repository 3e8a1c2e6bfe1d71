"""
Views da lista de tarefas (rotas públicas)
"""

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from core.responses import envelope
from .docs import tarefas_filtrar_schema
from .filters import TarefaFilter, TarefaStatusObrigatorioFilter
from .models import Tarefa
from .serializers import TarefaSerializer

logger = logging.getLogger(__name__)


class TarefaPublicaMixin:
    authentication_classes = []
    permission_classes = [AllowAny]
    queryset = Tarefa.objects.all()
    serializer_class = TarefaSerializer
    filter_backends = [DjangoFilterBackend]


class TarefaListCreateView(TarefaPublicaMixin, generics.ListCreateAPIView):
    filterset_class = TarefaFilter

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return envelope("Tarefas recuperadas com sucesso.", serializer.data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tarefa = serializer.save()
        logger.info(f"Tarefa criada: {tarefa.pk}")
        return envelope(
            "Tarefa criada com sucesso.", serializer.data, status=status.HTTP_201_CREATED
        )


class TarefaFiltrarView(TarefaListCreateView):
    """Como a listagem, mas com ?status= obrigatório"""

    http_method_names = ["get", "options"]
    filterset_class = TarefaStatusObrigatorioFilter

    @tarefas_filtrar_schema
    def get(self, request, *args, **kwargs):
        return self.list(request, *args, **kwargs)


class TarefaDetailView(TarefaPublicaMixin, generics.RetrieveUpdateDestroyAPIView):
    def get_object(self):
        tarefa = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if tarefa is None:
            raise NotFound("Tarefa não encontrada.")
        return tarefa

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return envelope("Tarefa recuperada com sucesso.", serializer.data)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return envelope("Tarefa atualizada com sucesso.", serializer.data)

    def destroy(self, request, *args, **kwargs):
        tarefa = self.get_object()
        logger.info(f"Tarefa removida: {tarefa.pk}")
        tarefa.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)
