from core.serializers import LojaModelSerializer
from ..models import Template


class TemplateSerializer(LojaModelSerializer):
    class Meta:
        model = Template
        fields = ["id", "loja_id", "nome", "ativo", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]
