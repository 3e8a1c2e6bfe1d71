"""
Serializers para usuários
"""

from rest_framework import serializers
from django.contrib.auth import get_user_model

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Serializer para dados do usuário"""

    loja_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "nome",
            "email",
            "loja_id",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
