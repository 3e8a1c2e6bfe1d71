"""
Views genéricas para recursos de uma loja.

Toda consulta passa pelo queryset filtrado pela loja do usuário autenticado,
então um registro de outra loja se comporta como inexistente (404).
"""

import logging

from django.db import transaction
from django.db.models import ProtectedError, RestrictedError
from django.http import Http404
from django.utils.text import capfirst
from rest_framework import generics, status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated

from .exceptions import DependenciasExistentes
from .permissions import TemLojaAssociada
from .responses import envelope
from .uploads import campos_arquivo, remover_caminho

logger = logging.getLogger(__name__)


class LojaScopedMixin:
    """
    Restringe o queryset à loja do usuário.

    Atributos:
        campo_loja: caminho até a FK da loja (ex: "produto__loja")
        genero: "o" ou "a", usado para montar as mensagens de resposta
    """

    permission_classes = [IsAuthenticated, TemLojaAssociada]
    campo_loja = "loja"
    genero = "o"

    def get_queryset(self):
        queryset = self.queryset.all()
        # Evita erro com AnonymousUser durante a geração do schema
        if getattr(self, "swagger_fake_view", False):
            return queryset.none()
        return queryset.filter(**{f"{self.campo_loja}_id": self.request.user.loja_id})

    def mensagem(self, acao):
        meta = self.queryset.model._meta
        g = self.genero
        nome = capfirst(meta.verbose_name)
        plural = capfirst(meta.verbose_name_plural)
        textos = {
            "listar": f"{plural} recuperad{g}s com sucesso.",
            "criar": f"{nome} criad{g} com sucesso.",
            "detalhar": f"{nome} recuperad{g} com sucesso.",
            "atualizar": f"{nome} atualizad{g} com sucesso.",
            "remover": f"{nome} removid{g} com sucesso.",
            "nao_encontrado": f"{nome} não encontrad{g}.",
            "dependencias": f"Não é possível remover {g} {str(meta.verbose_name).lower()} devido a dependências.",
        }
        return textos[acao]


class RecursoLojaListCreateView(LojaScopedMixin, generics.ListCreateAPIView):
    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return envelope(self.mensagem("listar"), serializer.data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return envelope(
            self.mensagem("criar"), serializer.data, status=status.HTTP_201_CREATED
        )

    def perform_create(self, serializer):
        serializer.save(loja=self.request.user.loja)


class RecursoLojaDetailView(LojaScopedMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET, PUT/PATCH e DELETE de um registro da loja.
    PUT também aceita payload parcial: só os campos enviados são validados.
    """

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.mensagem("nao_encontrado"))

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return envelope(self.mensagem("detalhar"), serializer.data)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return envelope(self.mensagem("atualizar"), serializer.data)

    def destroy(self, request, *args, **kwargs):
        self.perform_destroy(self.get_object())
        return envelope(self.mensagem("remover"))

    def perform_destroy(self, instance):
        arquivos = [
            getattr(instance, nome).name
            for nome in campos_arquivo(instance)
            if getattr(instance, nome)
        ]
        try:
            with transaction.atomic():
                instance.delete()
        except (ProtectedError, RestrictedError):
            logger.warning(
                f"Remoção bloqueada por dependências: {instance._meta.label} "
                f"id={instance.pk} (loja_id={self.request.user.loja_id})"
            )
            raise DependenciasExistentes(self.mensagem("dependencias"))
        for caminho in arquivos:
            remover_caminho(caminho)
