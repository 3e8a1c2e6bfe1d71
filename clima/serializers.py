from rest_framework import serializers


class ClimaQuerySerializer(serializers.Serializer):
    cidade = serializers.CharField(
        min_length=2,
        error_messages={
            "required": "O parâmetro cidade é obrigatório.",
            "blank": "O parâmetro cidade é obrigatório.",
            "min_length": "A cidade deve ter pelo menos 2 caracteres.",
        },
    )


class ClimaSerializer(serializers.Serializer):
    cidade = serializers.CharField()
    temperatura = serializers.FloatField()
    umidade = serializers.IntegerField()
    descricao = serializers.CharField()
