"""
Serializers para lojas
"""

from rest_framework import serializers

from ..models import Loja


class LojaSerializer(serializers.ModelSerializer):
    """Serializer para dados da loja"""

    class Meta:
        model = Loja
        fields = [
            "id",
            "nome",
            "descricao",
            "email",
            "telefone",
            "endereco",
            "logomarca",
            "categoria",
            "url_loja",
            "cor",
            "cores_auxiliares",
            "facebook",
            "instagram",
            "pasta",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "pasta", "created_at", "updated_at"]
