# Generated manually - Initial migration for vendas app
import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("lojas", "0001_initial"),
        ("pagamentos", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Desconto",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("codigo", models.CharField(help_text="Código do desconto (ex: DESC10)", max_length=50)),
                (
                    "tipo",
                    models.CharField(
                        choices=[("percentagem", "Percentagem"), ("dinheiro", "Dinheiro")],
                        help_text="Tipo de desconto",
                        max_length=20,
                    ),
                ),
                (
                    "valor",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Percentual (0-100) ou valor fixo",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("data_inicio", models.DateField(help_text="Início da validade")),
                ("data_fim", models.DateField(blank=True, help_text="Fim da validade (opcional)", null=True)),
                (
                    "status",
                    models.CharField(choices=[("ativo", "Ativo"), ("inativo", "Inativo")], default="ativo", max_length=10),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="descontos", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Desconto",
                "verbose_name_plural": "Descontos",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(fields=("loja", "codigo"), name="desconto_codigo_unico_por_loja"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Endereco",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("estado", models.CharField(max_length=100)),
                ("cidade", models.CharField(max_length=100)),
                ("bairro", models.CharField(max_length=100)),
                ("rua", models.CharField(max_length=100)),
                ("numero", models.CharField(max_length=20)),
                ("complemento", models.CharField(blank=True, max_length=255, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "usuario",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enderecos",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Endereço",
                "verbose_name_plural": "Endereços",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Cliente",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(max_length=255)),
                ("data_nascimento", models.DateField(blank=True, null=True)),
                (
                    "genero",
                    models.CharField(
                        blank=True,
                        choices=[("masculino", "Masculino"), ("feminino", "Feminino"), ("outro", "Outro")],
                        max_length=10,
                        null=True,
                    ),
                ),
                (
                    "documento_tipo",
                    models.CharField(
                        blank=True,
                        choices=[("BI", "BI"), ("Passaporte", "Passaporte"), ("Outro", "Outro")],
                        max_length=20,
                        null=True,
                    ),
                ),
                ("documento_numero", models.CharField(blank=True, max_length=50, null=True)),
                (
                    "status",
                    models.CharField(choices=[("ativo", "Ativo"), ("inativo", "Inativo")], default="ativo", max_length=10),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "endereco",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="clientes",
                        to="vendas.endereco",
                    ),
                ),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="clientes", to="lojas.loja")),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        help_text="Conta de usuário do cliente (opcional)",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="clientes",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Cliente",
                "verbose_name_plural": "Clientes",
                "ordering": ["nome"],
            },
        ),
        migrations.CreateModel(
            name="Pedido",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "codigo_unico_pedido",
                    models.UUIDField(default=uuid.uuid4, editable=False, help_text="Identificador público do pedido", unique=True),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pendente", "Pendente"),
                            ("pago", "Pago"),
                            ("processando", "Processando"),
                            ("enviado", "Enviado"),
                            ("entregue", "Entregue"),
                            ("cancelado", "Cancelado"),
                        ],
                        db_index=True,
                        default="pendente",
                        max_length=20,
                    ),
                ),
                (
                    "valor_total",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "valor_desconto",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "frete",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "tipo_frete",
                    models.CharField(
                        blank=True,
                        choices=[("normal", "Normal"), ("expresso", "Expresso"), ("retirada", "Retirada")],
                        max_length=20,
                        null=True,
                    ),
                ),
                ("prazo_entrega", models.PositiveIntegerField(default=7, help_text="Prazo de entrega em dias")),
                ("observacoes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "cliente",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="pedidos",
                        to="vendas.cliente",
                    ),
                ),
                (
                    "endereco_entrega",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="pedidos",
                        to="vendas.endereco",
                    ),
                ),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pedidos", to="lojas.loja")),
                (
                    "metodo_pagamento",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="pedidos",
                        to="pagamentos.formapagamento",
                    ),
                ),
            ],
            options={
                "verbose_name": "Pedido",
                "verbose_name_plural": "Pedidos",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["loja", "status"], name="pedido_loja_status_idx")],
            },
        ),
    ]
