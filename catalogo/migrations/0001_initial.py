# Generated manually - Initial migration for catalogo app
from decimal import Decimal

import core.uploads
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


def decimal_nao_negativo(**kwargs):
    return models.DecimalField(
        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
        **kwargs,
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("lojas", "0001_initial"),
        ("vendas", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Categoria",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(max_length=255)),
                ("descricao", models.TextField(blank=True, null=True)),
                ("slug", models.SlugField(blank=True, help_text="Gerado a partir do nome se vazio", max_length=255)),
                ("status", models.BooleanField(default=False, help_text="Categoria visível na loja")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="categorias", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Categoria",
                "verbose_name_plural": "Categorias",
                "ordering": ["nome"],
            },
        ),
        migrations.CreateModel(
            name="Marca",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(max_length=255)),
                ("descricao", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="marcas", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Marca",
                "verbose_name_plural": "Marcas",
                "ordering": ["nome"],
                "constraints": [
                    models.UniqueConstraint(fields=("loja", "nome"), name="marca_nome_unico_por_loja"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Fornecedor",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=255)),
                ("telefone", models.CharField(blank=True, max_length=20, null=True)),
                ("endereco", models.CharField(blank=True, max_length=255, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="fornecedores", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Fornecedor",
                "verbose_name_plural": "Fornecedores",
                "ordering": ["nome"],
                "constraints": [
                    models.UniqueConstraint(fields=("loja", "email"), name="fornecedor_email_unico_por_loja"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Produto",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(max_length=255)),
                ("descricao", models.TextField(blank=True, null=True)),
                ("referencia", models.CharField(blank=True, help_text="Referência interna (única na loja)", max_length=255, null=True)),
                ("codigo_unico_produto", models.CharField(blank=True, help_text="Código único do produto na loja", max_length=255, null=True)),
                ("codigo_barras", models.CharField(blank=True, max_length=255, null=True)),
                ("preco_compra", decimal_nao_negativo(decimal_places=2, max_digits=10)),
                ("preco_venda", decimal_nao_negativo(decimal_places=2, max_digits=10)),
                ("preco_promocional", decimal_nao_negativo(blank=True, decimal_places=2, max_digits=10, null=True)),
                (
                    "iva",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        help_text="Imposto (%)",
                        max_digits=5,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(Decimal("100")),
                        ],
                    ),
                ),
                ("gerir_stock", models.CharField(choices=[("sim", "Sim"), ("nao", "Não")], default="nao", max_length=3)),
                ("estoque", models.PositiveIntegerField(default=0)),
                ("peso", decimal_nao_negativo(blank=True, decimal_places=3, max_digits=10, null=True)),
                ("largura", decimal_nao_negativo(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("altura", decimal_nao_negativo(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("comprimento", decimal_nao_negativo(blank=True, decimal_places=2, max_digits=10, null=True)),
                (
                    "foto_capa",
                    models.ImageField(
                        blank=True,
                        max_length=500,
                        null=True,
                        upload_to=core.uploads.CaminhoUpload("produtos/fotos"),
                        validators=[
                            django.core.validators.FileExtensionValidator(allowed_extensions=["jpg", "jpeg", "png", "webp"]),
                            core.uploads.TamanhoMaximoArquivo(),
                        ],
                    ),
                ),
                ("imagens", models.JSONField(blank=True, default=list, help_text="Caminhos das imagens adicionais")),
                ("video_url", models.URLField(blank=True, max_length=255, null=True)),
                ("status", models.CharField(choices=[("ativo", "Ativo"), ("inativo", "Inativo")], default="ativo", max_length=10)),
                ("destaque", models.BooleanField(default=False)),
                ("novidade", models.BooleanField(default=False)),
                ("produto_em_oferta", models.BooleanField(default=False)),
                ("frete_gratis", models.BooleanField(default=False)),
                ("variacoes", models.BooleanField(default=False, help_text="Produto possui variações")),
                ("prazo_envio", models.PositiveIntegerField(blank=True, help_text="Prazo de envio em dias", null=True)),
                ("visualizacoes", models.PositiveIntegerField(default=0)),
                (
                    "avaliacao_media",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        max_digits=3,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(Decimal("5")),
                        ],
                    ),
                ),
                ("qtd_avaliacoes", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "categoria",
                    models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name="produtos", to="catalogo.categoria"),
                ),
                (
                    "desconto",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="produtos",
                        to="vendas.desconto",
                    ),
                ),
                (
                    "fornecedor",
                    models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name="produtos", to="catalogo.fornecedor"),
                ),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="produtos", to="lojas.loja")),
                (
                    "marca",
                    models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name="produtos", to="catalogo.marca"),
                ),
            ],
            options={
                "verbose_name": "Produto",
                "verbose_name_plural": "Produtos",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["loja", "status"], name="produto_loja_status_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("loja", "referencia"), name="produto_referencia_unica_por_loja"),
                    models.UniqueConstraint(fields=("loja", "codigo_unico_produto"), name="produto_codigo_unico_por_loja"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ProdutoVariacao",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("tipo_variacao", models.CharField(help_text="Ex: Tamanho, Cor", max_length=255)),
                ("valor_variacao", models.CharField(help_text="Ex: M, Azul", max_length=255)),
                ("estoque", models.PositiveIntegerField(default=0)),
                ("preco_adicional", decimal_nao_negativo(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "produto",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variacoes_produto",
                        to="catalogo.produto",
                    ),
                ),
            ],
            options={
                "verbose_name": "Variação de produto",
                "verbose_name_plural": "Variações de produto",
                "ordering": ["produto", "tipo_variacao", "valor_variacao"],
            },
        ),
    ]
