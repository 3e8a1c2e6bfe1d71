"""
Modelos do catálogo: categorias, marcas, fornecedores, produtos e variações
"""

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.text import slugify

from core.uploads import VALIDADORES_IMAGEM, CaminhoUpload


class Categoria(models.Model):
    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="categorias")
    nome = models.CharField(max_length=255)
    descricao = models.TextField(null=True, blank=True)
    slug = models.SlugField(max_length=255, blank=True, help_text="Gerado a partir do nome se vazio")
    status = models.BooleanField(default=False, help_text="Categoria visível na loja")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Categoria"
        verbose_name_plural = "Categorias"
        ordering = ["nome"]

    def __str__(self):
        return self.nome

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.nome)[:255]
        super().save(*args, **kwargs)


class Marca(models.Model):
    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="marcas")
    nome = models.CharField(max_length=255)
    descricao = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Marca"
        verbose_name_plural = "Marcas"
        ordering = ["nome"]
        constraints = [
            models.UniqueConstraint(fields=["loja", "nome"], name="marca_nome_unico_por_loja"),
        ]

    def __str__(self):
        return self.nome


class Fornecedor(models.Model):
    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="fornecedores")
    nome = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    telefone = models.CharField(max_length=20, null=True, blank=True)
    endereco = models.CharField(max_length=255, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Fornecedor"
        verbose_name_plural = "Fornecedores"
        ordering = ["nome"]
        constraints = [
            models.UniqueConstraint(fields=["loja", "email"], name="fornecedor_email_unico_por_loja"),
        ]

    def __str__(self):
        return self.nome


class Produto(models.Model):
    """
    Produto do catálogo da loja
    """

    STATUS_CHOICES = [
        ("ativo", "Ativo"),
        ("inativo", "Inativo"),
    ]

    GERIR_STOCK_CHOICES = [
        ("sim", "Sim"),
        ("nao", "Não"),
    ]

    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="produtos")

    nome = models.CharField(max_length=255)
    descricao = models.TextField(null=True, blank=True)
    referencia = models.CharField(max_length=255, null=True, blank=True, help_text="Referência interna (única na loja)")
    codigo_unico_produto = models.CharField(max_length=255, null=True, blank=True, help_text="Código único do produto na loja")
    codigo_barras = models.CharField(max_length=255, null=True, blank=True)

    # Preços
    preco_compra = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal("0"))]
    )
    preco_venda = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal("0"))]
    )
    preco_promocional = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    iva = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("100"))],
        help_text="Imposto (%)",
    )

    # Estoque
    gerir_stock = models.CharField(max_length=3, choices=GERIR_STOCK_CHOICES, default="nao")
    estoque = models.PositiveIntegerField(default=0)

    # Relacionamentos
    categoria = models.ForeignKey(Categoria, on_delete=models.RESTRICT, related_name="produtos")
    marca = models.ForeignKey(Marca, on_delete=models.RESTRICT, related_name="produtos")
    fornecedor = models.ForeignKey(Fornecedor, on_delete=models.RESTRICT, related_name="produtos")
    desconto = models.ForeignKey(
        "vendas.Desconto",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="produtos",
    )

    # Dimensões
    peso = models.DecimalField(max_digits=10, decimal_places=3, null=True, blank=True, validators=[MinValueValidator(Decimal("0"))])
    largura = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True, validators=[MinValueValidator(Decimal("0"))])
    altura = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True, validators=[MinValueValidator(Decimal("0"))])
    comprimento = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True, validators=[MinValueValidator(Decimal("0"))])

    # Mídia
    foto_capa = models.ImageField(
        upload_to=CaminhoUpload("produtos/fotos"),
        max_length=500,
        null=True,
        blank=True,
        validators=VALIDADORES_IMAGEM,
    )
    imagens = models.JSONField(default=list, blank=True, help_text="Caminhos das imagens adicionais")
    video_url = models.URLField(max_length=255, null=True, blank=True)

    # Exibição
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default="ativo")
    destaque = models.BooleanField(default=False)
    novidade = models.BooleanField(default=False)
    produto_em_oferta = models.BooleanField(default=False)
    frete_gratis = models.BooleanField(default=False)
    variacoes = models.BooleanField(default=False, help_text="Produto possui variações")
    prazo_envio = models.PositiveIntegerField(null=True, blank=True, help_text="Prazo de envio em dias")

    # Estatísticas
    visualizacoes = models.PositiveIntegerField(default=0)
    avaliacao_media = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("5"))],
    )
    qtd_avaliacoes = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Produto"
        verbose_name_plural = "Produtos"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["loja", "status"], name="produto_loja_status_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["loja", "referencia"], name="produto_referencia_unica_por_loja"),
            models.UniqueConstraint(
                fields=["loja", "codigo_unico_produto"],
                name="produto_codigo_unico_por_loja",
            ),
        ]

    def __str__(self):
        return self.nome


class ProdutoVariacao(models.Model):
    """Variação de um produto (ex: tamanho M, cor azul)"""

    produto = models.ForeignKey(Produto, on_delete=models.CASCADE, related_name="variacoes_produto")
    tipo_variacao = models.CharField(max_length=255, help_text="Ex: Tamanho, Cor")
    valor_variacao = models.CharField(max_length=255, help_text="Ex: M, Azul")
    estoque = models.PositiveIntegerField(default=0)
    preco_adicional = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0"))],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Variação de produto"
        verbose_name_plural = "Variações de produto"
        ordering = ["produto", "tipo_variacao", "valor_variacao"]

    def __str__(self):
        return f"{self.produto.nome} - {self.tipo_variacao}: {self.valor_variacao}"
