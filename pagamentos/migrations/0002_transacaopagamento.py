# Generated manually - TransacaoPagamento depende de vendas.Pedido
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("lojas", "0001_initial"),
        ("pagamentos", "0001_initial"),
        ("vendas", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="TransacaoPagamento",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "valor_total",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "cliente",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="transacoes",
                        to="vendas.cliente",
                    ),
                ),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="transacoes_pagamento", to="lojas.loja")),
                (
                    "metodo_pagamento",
                    models.ForeignKey(
                        help_text="Forma de pagamento usada",
                        on_delete=django.db.models.deletion.RESTRICT,
                        related_name="transacoes",
                        to="pagamentos.formapagamento",
                    ),
                ),
                (
                    "pedido",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="transacoes",
                        to="vendas.pedido",
                    ),
                ),
            ],
            options={
                "verbose_name": "Transação de pagamento",
                "verbose_name_plural": "Transações de pagamento",
                "ordering": ["-created_at"],
            },
        ),
    ]
