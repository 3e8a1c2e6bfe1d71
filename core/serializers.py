"""
Serializers base para recursos que pertencem a uma loja
"""

from rest_framework import serializers

from .uploads import campos_arquivo, remover_caminho


def loja_id_do_contexto(context):
    request = context.get("request")
    user = getattr(request, "user", None)
    return getattr(user, "loja_id", None)


class CampoRelacionadoLoja(serializers.PrimaryKeyRelatedField):
    """
    Chave estrangeira que só aceita registros da loja do usuário autenticado.

    Um id de outra loja é tratado como inexistente.
    """

    default_error_messages = {
        "does_not_exist": 'Registro "{pk_value}" não encontrado na loja.',
    }

    def __init__(self, **kwargs):
        self.campo_loja = kwargs.pop("campo_loja", "loja")
        super().__init__(**kwargs)

    def get_queryset(self):
        queryset = super().get_queryset()
        loja_id = loja_id_do_contexto(self.context)
        if not loja_id:
            return queryset.none()
        return queryset.filter(**{f"{self.campo_loja}_id": loja_id})


class LojaModelSerializer(serializers.ModelSerializer):
    """
    ModelSerializer para modelos com FK "loja".

    A loja nunca vem do corpo da requisição: é injetada pela view.
    Na atualização, arquivos substituídos são removidos do storage.
    """

    loja_id = serializers.IntegerField(read_only=True)

    def validar_unico_na_loja(self, campo, valor, mensagem):
        """Garante que `valor` não se repete no campo `campo` dentro da mesma loja"""
        if valor in (None, ""):
            return valor
        queryset = self.Meta.model.objects.filter(
            loja_id=loja_id_do_contexto(self.context), **{campo: valor}
        )
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError(mensagem)
        return valor

    def update(self, instance, validated_data):
        anteriores = {
            nome: getattr(instance, nome).name
            for nome in campos_arquivo(instance)
            if nome in validated_data and getattr(instance, nome)
        }
        instance = super().update(instance, validated_data)
        for nome, caminho in anteriores.items():
            atual = getattr(instance, nome)
            if not atual or atual.name != caminho:
                remover_caminho(caminho)
        return instance
