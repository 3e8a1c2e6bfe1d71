"""
Views para operações de usuário
"""

from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from core.responses import envelope
from ..docs import user_schema
from ..serializers import UserSerializer


class UserView(APIView):
    """Retorna o usuário autenticado"""

    permission_classes = [IsAuthenticated]

    @user_schema
    def get(self, request):
        return envelope(
            "Usuário autenticado recuperado com sucesso.",
            UserSerializer(request.user).data,
        )
