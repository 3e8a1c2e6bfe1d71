# Generated manually - ItemPedido depende de catalogo.Produto
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("catalogo", "0001_initial"),
        ("vendas", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ItemPedido",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("quantidade", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                (
                    "preco_unitario",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Preço do produto no momento da compra",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("subtotal", models.DecimalField(decimal_places=2, editable=False, max_digits=12)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "pedido",
                    models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="itens", to="vendas.pedido"),
                ),
                (
                    "produto",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.RESTRICT,
                        related_name="itens_pedido",
                        to="catalogo.produto",
                    ),
                ),
            ],
            options={
                "verbose_name": "Item do pedido",
                "verbose_name_plural": "Itens do pedido",
                "ordering": ["id"],
            },
        ),
    ]
