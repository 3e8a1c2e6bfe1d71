"""
Views de autenticação (registro, login, refresh e logout)
"""

import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import AuthenticationFailed, TokenError

from core.responses import envelope
from ..docs import login_schema, logout_schema, refresh_schema, register_schema
from ..serializers import LoginSerializer, RefreshSerializer, RegisterSerializer
from ..tokens import emitir_tokens

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    """Cria usuário e retorna os tokens"""

    authentication_classes = []
    permission_classes = [AllowAny]

    @register_schema
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Usuário registrado: id={user.id}")
        return envelope(
            "Usuário registrado com sucesso.",
            emitir_tokens(user),
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """Login com e-mail e senha"""

    authentication_classes = []
    permission_classes = [AllowAny]

    @login_schema
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            return Response(
                {
                    "success": False,
                    "message": "Credenciais inválidas.",
                    "errors": {"email": ["As credenciais fornecidas estão incorretas."]},
                },
                status=status.HTTP_401_UNAUTHORIZED,
            )

        return envelope("Login realizado com sucesso.", emitir_tokens(user))


class LogoutView(APIView):
    """Revoga todos os tokens do usuário"""

    permission_classes = [IsAuthenticated]

    @logout_schema
    def post(self, request):
        request.user.revogar_tokens()
        logger.info(f"Logout: tokens revogados para o usuário {request.user.id}")
        return envelope("Logout realizado com sucesso.")


class RefreshView(APIView):
    """Gera um novo access token a partir do refresh token"""

    authentication_classes = []
    permission_classes = [AllowAny]

    @refresh_schema
    def post(self, request):
        serializer = RefreshSerializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except (TokenError, AuthenticationFailed) as e:
            logger.info(f"Refresh token recusado: {e}")
            return Response(
                {"success": False, "message": "Token inválido."},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        return envelope(
            "Token renovado com sucesso.",
            {"access_token": serializer.validated_data["access"], "token_type": "Bearer"},
        )
