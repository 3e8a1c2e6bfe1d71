"""
Serializers para categorias, marcas e fornecedores
"""

from core.serializers import LojaModelSerializer
from ..models import Categoria, Fornecedor, Marca


class CategoriaSerializer(LojaModelSerializer):
    class Meta:
        model = Categoria
        fields = [
            "id",
            "loja_id",
            "nome",
            "descricao",
            "slug",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {"slug": {"required": False, "allow_blank": True}}


class MarcaSerializer(LojaModelSerializer):
    class Meta:
        model = Marca
        fields = ["id", "loja_id", "nome", "descricao", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_nome(self, value):
        return self.validar_unico_na_loja("nome", value, "O nome da marca já está em uso.")


class FornecedorSerializer(LojaModelSerializer):
    class Meta:
        model = Fornecedor
        fields = [
            "id",
            "loja_id",
            "nome",
            "email",
            "telefone",
            "endereco",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_email(self, value):
        return self.validar_unico_na_loja(
            "email", value, "O e-mail do fornecedor já está em uso."
        )
