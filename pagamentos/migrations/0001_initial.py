# Generated manually - Initial migration for pagamentos app
import core.uploads
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("lojas", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="MeioPagamento",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(help_text="Nome do meio de pagamento", max_length=100)),
                (
                    "logo",
                    models.ImageField(
                        blank=True,
                        help_text="Logo exibido no checkout",
                        max_length=500,
                        null=True,
                        upload_to=core.uploads.CaminhoUpload("meiosPagamento/logos"),
                        validators=[
                            django.core.validators.FileExtensionValidator(allowed_extensions=["jpg", "jpeg", "png", "webp"]),
                            core.uploads.TamanhoMaximoArquivo(),
                        ],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="meios_pagamento", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Meio de pagamento",
                "verbose_name_plural": "Meios de pagamento",
                "ordering": ["nome"],
                "constraints": [
                    models.UniqueConstraint(fields=("loja", "nome"), name="meio_pagamento_nome_unico_por_loja"),
                ],
            },
        ),
        migrations.CreateModel(
            name="FormaPagamento",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("dados_conta", models.TextField(help_text="Dados da conta (IBAN, chave PIX, e-mail...)")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="formas_pagamento", to="lojas.loja")),
                (
                    "meio_pagamento",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.RESTRICT,
                        related_name="formas_pagamento",
                        to="pagamentos.meiopagamento",
                    ),
                ),
            ],
            options={
                "verbose_name": "Forma de pagamento",
                "verbose_name_plural": "Formas de pagamento",
                "ordering": ["-created_at"],
            },
        ),
    ]
