"""
Views para clientes e endereços
"""

from rest_framework.permissions import IsAuthenticated

from core.views import RecursoLojaDetailView, RecursoLojaListCreateView
from ..filters import ClienteFilter
from ..models import Cliente, Endereco
from ..serializers import ClienteSerializer, EnderecoSerializer


class ClienteListCreateView(RecursoLojaListCreateView):
    queryset = Cliente.objects.all()
    serializer_class = ClienteSerializer
    filterset_class = ClienteFilter


class ClienteDetailView(RecursoLojaDetailView):
    queryset = Cliente.objects.all()
    serializer_class = ClienteSerializer


class EnderecoUsuarioMixin:
    """Endereços pertencem ao usuário, não à loja"""

    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = self.queryset.all()
        if getattr(self, "swagger_fake_view", False):
            return queryset.none()
        return queryset.filter(usuario_id=self.request.user.id)


class EnderecoListCreateView(EnderecoUsuarioMixin, RecursoLojaListCreateView):
    queryset = Endereco.objects.all()
    serializer_class = EnderecoSerializer

    def perform_create(self, serializer):
        serializer.save(usuario=self.request.user)


class EnderecoDetailView(EnderecoUsuarioMixin, RecursoLojaDetailView):
    queryset = Endereco.objects.all()
    serializer_class = EnderecoSerializer
