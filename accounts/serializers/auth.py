"""
Serializers para autenticação
"""

from rest_framework import serializers
from django.contrib.auth import get_user_model
from rest_framework.validators import UniqueValidator
from rest_framework_simplejwt.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.settings import api_settings

from ..tokens import CLAIM_VERSAO_TOKEN

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    """Serializer para registro de usuário"""

    nome = serializers.CharField(
        max_length=255,
        error_messages={"required": "O nome é obrigatório.", "blank": "O nome é obrigatório."},
    )
    email = serializers.EmailField(
        max_length=255,
        validators=[
            UniqueValidator(
                queryset=User.objects.all(),
                lookup="iexact",
                message="Este e-mail já está em uso.",
            )
        ],
    )
    password = serializers.CharField(
        min_length=6,
        write_only=True,
        style={"input_type": "password"},
        error_messages={"min_length": "A senha deve ter pelo menos 6 caracteres."},
    )

    def create(self, validated_data):
        return User.objects.create_user(
            email=validated_data["email"],
            password=validated_data["password"],
            nome=validated_data["nome"],
        )


class LoginSerializer(serializers.Serializer):
    """Serializer para login com e-mail e senha"""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})


class TokenResponseSerializer(serializers.Serializer):
    """Serializer para resposta de autenticação"""

    access_token = serializers.CharField()
    refresh_token = serializers.CharField()
    token_type = serializers.CharField(default="Bearer")


class RefreshSerializer(TokenRefreshSerializer):
    """
    Renova o access token a partir do refresh token.

    Refresh tokens emitidos antes do último logout são recusados.
    """

    def validate(self, attrs):
        refresh = self.token_class(attrs["refresh"])
        user = User.objects.filter(
            **{api_settings.USER_ID_FIELD: refresh.payload.get(api_settings.USER_ID_CLAIM)}
        ).first()
        if user is None or refresh.get(CLAIM_VERSAO_TOKEN) != user.versao_token:
            raise AuthenticationFailed("Token revogado.", code="token_revoked")
        return super().validate(attrs)
