# Generated manually - Initial migration for lojas app
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


COR_HEX = django.core.validators.RegexValidator(
    message="A cor deve estar no formato hexadecimal (ex: #FFFFFF).",
    regex="^#[0-9A-Fa-f]{6}$",
)


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Loja",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(help_text="Nome da loja", max_length=255)),
                ("descricao", models.TextField(blank=True, help_text="Descrição da loja", null=True)),
                (
                    "email",
                    models.EmailField(
                        error_messages={"unique": "Este e-mail já está em uso por outra loja."},
                        help_text="E-mail de contato da loja",
                        max_length=255,
                        unique=True,
                    ),
                ),
                ("telefone", models.CharField(blank=True, max_length=20, null=True)),
                ("endereco", models.CharField(blank=True, max_length=255, null=True)),
                ("logomarca", models.CharField(blank=True, help_text="Caminho ou URL da logomarca", max_length=255, null=True)),
                ("categoria", models.CharField(blank=True, max_length=100, null=True)),
                ("url_loja", models.URLField(blank=True, max_length=255, null=True)),
                ("cor", models.CharField(blank=True, help_text="Cor principal (#RRGGBB)", max_length=7, null=True, validators=[COR_HEX])),
                (
                    "cores_auxiliares",
                    models.CharField(
                        blank=True,
                        help_text="Cores auxiliares separadas por vírgula",
                        max_length=255,
                        null=True,
                        validators=[
                            django.core.validators.RegexValidator(
                                message="As cores auxiliares devem ser cores hexadecimais separadas por vírgula (ex: #FFFFFF,#000000).",
                                regex="^#[0-9A-Fa-f]{6}(,#[0-9A-Fa-f]{6})*$",
                            )
                        ],
                    ),
                ),
                ("facebook", models.URLField(blank=True, max_length=255, null=True)),
                ("instagram", models.URLField(blank=True, max_length=255, null=True)),
                ("pasta", models.CharField(editable=False, help_text="Pasta da loja no storage (gerada automaticamente)", max_length=255, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Loja",
                "verbose_name_plural": "Lojas",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Dominio",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "dominio",
                    models.CharField(
                        error_messages={"unique": "Este domínio já está em uso."},
                        help_text="Hostname (ex: minhaloja.com)",
                        max_length=255,
                        unique=True,
                    ),
                ),
                ("principal", models.BooleanField(default=False)),
                ("status_dominio", models.CharField(help_text="Situação do DNS", max_length=255)),
                ("status_ssl", models.CharField(help_text="Situação do certificado SSL", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="dominios", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Domínio",
                "verbose_name_plural": "Domínios",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Idioma",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("codigo_idioma", models.CharField(help_text="Código do idioma (ex: pt-BR)", max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="idiomas", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Idioma",
                "verbose_name_plural": "Idiomas",
                "ordering": ["codigo_idioma"],
                "constraints": [
                    models.UniqueConstraint(fields=("loja", "codigo_idioma"), name="idioma_unico_por_loja"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Moeda",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(max_length=255)),
                ("codigo", models.CharField(help_text="Código ISO (ex: BRL)", max_length=10)),
                ("simbolo", models.CharField(help_text="Símbolo (ex: R$)", max_length=10)),
                (
                    "taxa_cambio",
                    models.DecimalField(
                        decimal_places=4,
                        help_text="Taxa de câmbio em relação à moeda padrão",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("padrao", models.BooleanField(default=False, help_text="Moeda padrão da loja")),
                ("status", models.BooleanField(default=True, help_text="Moeda ativa")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="moedas", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Moeda",
                "verbose_name_plural": "Moedas",
                "ordering": ["-padrao", "nome"],
                "constraints": [
                    models.UniqueConstraint(fields=("loja", "nome"), name="moeda_nome_unico_por_loja"),
                    models.UniqueConstraint(fields=("loja", "codigo"), name="moeda_codigo_unico_por_loja"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Email",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "tipo",
                    models.CharField(
                        choices=[
                            ("ativacao_conta", "Ativação de conta"),
                            ("mudanca_senha", "Mudança de senha"),
                            ("boas_vindas", "Boas-vindas"),
                            ("cancelamento_compra", "Cancelamento de compra"),
                            ("confirmacao_pagamento", "Confirmação de pagamento"),
                            ("confirmacao_compra", "Confirmação de compra"),
                            ("confirmacao_envio", "Confirmação de envio"),
                            ("carrinhos_abandonados", "Carrinhos abandonados"),
                        ],
                        max_length=30,
                    ),
                ),
                ("descricao", models.CharField(blank=True, max_length=255, null=True)),
                ("conteudo", models.JSONField(blank=True, help_text="Conteúdo estruturado do e-mail", null=True)),
                ("conteudo_html", models.JSONField(blank=True, help_text="Conteúdo HTML do e-mail", null=True)),
                ("status_conteudo_html", models.BooleanField(default=False, help_text="Usar o conteúdo HTML em vez do estruturado")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="emails", to="lojas.loja")),
            ],
            options={
                "verbose_name": "E-mail",
                "verbose_name_plural": "E-mails",
                "ordering": ["tipo"],
            },
        ),
        migrations.CreateModel(
            name="Redirecionamento",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("url_antiga", models.URLField(blank=True, max_length=255, null=True)),
                ("url_nova", models.URLField(blank=True, max_length=255, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="redirecionamentos", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Redirecionamento",
                "verbose_name_plural": "Redirecionamentos",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="PontoLevantamento",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome_local", models.CharField(max_length=255)),
                ("estado", models.CharField(blank=True, max_length=255, null=True)),
                ("cidade", models.CharField(blank=True, max_length=255, null=True)),
                ("bairro", models.CharField(blank=True, max_length=255, null=True)),
                ("rua", models.CharField(blank=True, max_length=255, null=True)),
                ("numero", models.CharField(blank=True, max_length=255, null=True)),
                ("complemento", models.CharField(blank=True, max_length=255, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pontos_levantamento", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Ponto de levantamento",
                "verbose_name_plural": "Pontos de levantamento",
                "ordering": ["nome_local"],
            },
        ),
        migrations.CreateModel(
            name="Checkout",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("cores_layout", models.BooleanField(default=False, help_text="Usar as cores da loja no checkout")),
                ("pedir_telefone", models.BooleanField(default=False)),
                ("pedir_endereco", models.BooleanField(default=False)),
                ("checkout_acelerado", models.BooleanField(default=False)),
                ("mensagem_cliente", models.TextField(blank=True, null=True)),
                ("mensagem_segmento", models.TextField(blank=True, null=True)),
                ("compra", models.TextField(blank=True, help_text="Texto exibido na finalização da compra", null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="checkouts", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Checkout",
                "verbose_name_plural": "Checkouts",
                "ordering": ["-created_at"],
            },
        ),
    ]
