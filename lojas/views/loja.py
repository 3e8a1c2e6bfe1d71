"""
Views para lojas
"""

import logging

from django.db import transaction
from rest_framework import generics, serializers, status
from rest_framework.permissions import IsAuthenticated

from core.responses import envelope
from core.views import RecursoLojaDetailView
from ..docs import lojas_create_schema, lojas_list_schema
from ..models import Loja
from ..serializers import LojaSerializer
from ..utils import criar_estrutura_pastas, remover_pasta_loja

logger = logging.getLogger(__name__)


class LojaListCreateView(generics.ListCreateAPIView):
    """
    Lista a loja do usuário autenticado e cria uma nova loja.
    Quem cria a loja passa a ser vinculado a ela.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = LojaSerializer
    queryset = Loja.objects.all()

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Loja.objects.none()
        return Loja.objects.filter(pk=self.request.user.loja_id)

    @lojas_list_schema
    def get(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return envelope("Lojas recuperadas com sucesso.", serializer.data)

    @lojas_create_schema
    def post(self, request, *args, **kwargs):
        """Cria a loja, vincula ao usuário e monta a estrutura de pastas"""
        user = request.user
        if user.loja_id:
            raise serializers.ValidationError(
                {"loja": ["Usuário já possui loja associada."]}
            )

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        loja = None
        try:
            with transaction.atomic():
                loja = serializer.save()
                user.loja = loja
                user.save(update_fields=["loja"])
                criar_estrutura_pastas(loja.pasta)
        except OSError as e:
            logger.error(f"Erro ao criar a estrutura de pastas da loja: {e}")
            if loja is not None:
                remover_pasta_loja(loja.pasta)
            raise

        logger.info(f"Loja criada: id={loja.id} pasta={loja.pasta} (usuário {user.id})")
        return envelope(
            "Loja criada com sucesso.",
            {"loja_id": loja.id, **serializer.data},
            status=status.HTTP_201_CREATED,
        )


class LojaDetailView(RecursoLojaDetailView):
    """Detalhe, atualização e remoção da loja do usuário"""

    serializer_class = LojaSerializer
    queryset = Loja.objects.all()
    genero = "a"

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Loja.objects.none()
        return Loja.objects.filter(pk=self.request.user.loja_id)

    def perform_destroy(self, instance):
        pasta = instance.pasta
        loja_id = instance.pk
        super().perform_destroy(instance)
        remover_pasta_loja(pasta)
        logger.info(f"Loja removida: id={loja_id} pasta={pasta}")
