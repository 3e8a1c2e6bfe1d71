"""
Views para pedidos
"""

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters as drf_filters
from rest_framework.exceptions import NotFound
from rest_framework.views import APIView

from core.exceptions import DependenciasExistentes
from core.responses import envelope
from core.views import LojaScopedMixin, RecursoLojaDetailView, RecursoLojaListCreateView
from ..docs import pedidos_create_schema, pedidos_list_schema, pedidos_status_schema
from ..filters import PedidoFilter
from ..models import Pedido
from ..serializers import PedidoSerializer, PedidoStatusSerializer

logger = logging.getLogger(__name__)


class PedidoListCreateView(RecursoLojaListCreateView):
    queryset = Pedido.objects.prefetch_related("itens")
    serializer_class = PedidoSerializer
    filterset_class = PedidoFilter
    filter_backends = [DjangoFilterBackend, drf_filters.OrderingFilter]
    ordering_fields = ["created_at", "valor_total", "status"]

    @pedidos_list_schema
    def get(self, request, *args, **kwargs):
        return self.list(request, *args, **kwargs)

    @pedidos_create_schema
    def post(self, request, *args, **kwargs):
        return self.create(request, *args, **kwargs)


class PedidoDetailView(RecursoLojaDetailView):
    queryset = Pedido.objects.prefetch_related("itens")
    serializer_class = PedidoSerializer

    def perform_destroy(self, instance):
        # Pedido com itens não pode ser removido
        if instance.itens.exists():
            logger.warning(
                f"Remoção do pedido {instance.pk} bloqueada: possui itens "
                f"(loja_id={self.request.user.loja_id})"
            )
            raise DependenciasExistentes(self.mensagem("dependencias"))
        super().perform_destroy(instance)


class PedidoStatusView(LojaScopedMixin, APIView):
    """Muda apenas o status do pedido"""

    queryset = Pedido.objects.all()

    @pedidos_status_schema
    def patch(self, request, pk):
        pedido = self.get_queryset().filter(pk=pk).first()
        if pedido is None:
            raise NotFound(self.mensagem("nao_encontrado"))

        serializer = PedidoStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        status_anterior = pedido.status
        pedido.status = serializer.validated_data["status"]
        pedido.save(update_fields=["status", "updated_at"])
        logger.info(
            f"Pedido {pedido.pk}: status {status_anterior} -> {pedido.status} "
            f"(loja_id={pedido.loja_id})"
        )

        return envelope(
            "Status do pedido atualizado com sucesso.",
            {"id": pedido.id, "status": pedido.status, "updated_at": pedido.updated_at},
        )
