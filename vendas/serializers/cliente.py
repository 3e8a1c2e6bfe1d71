"""
Serializers para clientes e endereços
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers

from core.serializers import CampoRelacionadoLoja, LojaModelSerializer
from ..models import Cliente, Endereco


class CampoEnderecoUsuario(serializers.PrimaryKeyRelatedField):
    """Só aceita endereços do usuário autenticado"""

    default_error_messages = {
        "does_not_exist": 'Endereço "{pk_value}" não encontrado.',
    }

    def get_queryset(self):
        request = self.context.get("request")
        user = getattr(request, "user", None)
        if not getattr(user, "is_authenticated", False):
            return Endereco.objects.none()
        return Endereco.objects.filter(usuario_id=user.id)


class EnderecoSerializer(serializers.ModelSerializer):
    usuario_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Endereco
        fields = [
            "id",
            "usuario_id",
            "estado",
            "cidade",
            "bairro",
            "rua",
            "numero",
            "complemento",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class ClienteSerializer(LojaModelSerializer):
    user_id = CampoRelacionadoLoja(
        source="user",
        queryset=get_user_model().objects.all(),
        error_messages={"does_not_exist": "Este usuário não pertence à sua loja."},
        required=False,
        allow_null=True,
    )
    endereco_id = CampoEnderecoUsuario(source="endereco", required=False, allow_null=True)

    class Meta:
        model = Cliente
        fields = [
            "id",
            "loja_id",
            "user_id",
            "nome",
            "data_nascimento",
            "genero",
            "documento_tipo",
            "documento_numero",
            "endereco_id",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
