"""
Modelos de vendas: descontos, clientes, endereços e pedidos
"""

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Desconto(models.Model):
    """
    Código de desconto da loja (percentual ou valor fixo)
    """

    TIPO_CHOICES = [
        ("percentagem", "Percentagem"),
        ("dinheiro", "Dinheiro"),
    ]

    STATUS_CHOICES = [
        ("ativo", "Ativo"),
        ("inativo", "Inativo"),
    ]

    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="descontos")
    codigo = models.CharField(max_length=50, help_text="Código do desconto (ex: DESC10)")
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, help_text="Tipo de desconto")
    valor = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
        help_text="Percentual (0-100) ou valor fixo",
    )
    data_inicio = models.DateField(help_text="Início da validade")
    data_fim = models.DateField(null=True, blank=True, help_text="Fim da validade (opcional)")
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default="ativo")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Desconto"
        verbose_name_plural = "Descontos"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["loja", "codigo"], name="desconto_codigo_unico_por_loja"),
        ]

    def __str__(self):
        sufixo = "%" if self.tipo == "percentagem" else ""
        return f"{self.codigo} ({self.valor}{sufixo})"


class Endereco(models.Model):
    """Endereço pertencente a um usuário"""

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="enderecos",
    )
    estado = models.CharField(max_length=100)
    cidade = models.CharField(max_length=100)
    bairro = models.CharField(max_length=100)
    rua = models.CharField(max_length=100)
    numero = models.CharField(max_length=20)
    complemento = models.CharField(max_length=255, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Endereço"
        verbose_name_plural = "Endereços"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.rua}, {self.numero} - {self.cidade}/{self.estado}"


class Cliente(models.Model):
    GENERO_CHOICES = [
        ("masculino", "Masculino"),
        ("feminino", "Feminino"),
        ("outro", "Outro"),
    ]

    DOCUMENTO_TIPO_CHOICES = [
        ("BI", "BI"),
        ("Passaporte", "Passaporte"),
        ("Outro", "Outro"),
    ]

    STATUS_CHOICES = [
        ("ativo", "Ativo"),
        ("inativo", "Inativo"),
    ]

    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="clientes")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="clientes",
        help_text="Conta de usuário do cliente (opcional)",
    )
    nome = models.CharField(max_length=255)
    data_nascimento = models.DateField(null=True, blank=True)
    genero = models.CharField(max_length=10, choices=GENERO_CHOICES, null=True, blank=True)
    documento_tipo = models.CharField(
        max_length=20, choices=DOCUMENTO_TIPO_CHOICES, null=True, blank=True
    )
    documento_numero = models.CharField(max_length=50, null=True, blank=True)
    endereco = models.ForeignKey(
        Endereco,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="clientes",
    )
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default="ativo")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Cliente"
        verbose_name_plural = "Clientes"
        ordering = ["nome"]

    def __str__(self):
        return self.nome


class Pedido(models.Model):
    """
    Pedido da loja. Os itens são gravados junto com o pedido.
    """

    STATUS_CHOICES = [
        ("pendente", "Pendente"),
        ("pago", "Pago"),
        ("processando", "Processando"),
        ("enviado", "Enviado"),
        ("entregue", "Entregue"),
        ("cancelado", "Cancelado"),
    ]

    TIPO_FRETE_CHOICES = [
        ("normal", "Normal"),
        ("expresso", "Expresso"),
        ("retirada", "Retirada"),
    ]

    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="pedidos")
    cliente = models.ForeignKey(
        Cliente,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="pedidos",
    )
    codigo_unico_pedido = models.UUIDField(
        default=uuid.uuid4,
        unique=True,
        editable=False,
        help_text="Identificador público do pedido",
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default="pendente",
        db_index=True,
    )

    valor_total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    valor_desconto = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0"))],
    )
    frete = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0"))],
    )

    # Entrega
    tipo_frete = models.CharField(max_length=20, choices=TIPO_FRETE_CHOICES, null=True, blank=True)
    prazo_entrega = models.PositiveIntegerField(default=7, help_text="Prazo de entrega em dias")
    endereco_entrega = models.ForeignKey(
        Endereco,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="pedidos",
    )

    metodo_pagamento = models.ForeignKey(
        "pagamentos.FormaPagamento",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="pedidos",
    )
    observacoes = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Pedido"
        verbose_name_plural = "Pedidos"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["loja", "status"], name="pedido_loja_status_idx"),
        ]

    def __str__(self):
        return f"Pedido {self.codigo_unico_pedido} - {self.get_status_display()}"


class ItemPedido(models.Model):
    pedido = models.ForeignKey(Pedido, on_delete=models.CASCADE, related_name="itens")
    produto = models.ForeignKey(
        "catalogo.Produto",
        on_delete=models.RESTRICT,
        related_name="itens_pedido",
    )
    quantidade = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    preco_unitario = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
        help_text="Preço do produto no momento da compra",
    )
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Item do pedido"
        verbose_name_plural = "Itens do pedido"
        ordering = ["id"]

    def __str__(self):
        return f"{self.quantidade}x {self.produto_id} (pedido {self.pedido_id})"

    def save(self, *args, **kwargs):
        self.subtotal = (self.preco_unitario * self.quantidade).quantize(Decimal("0.01"))
        super().save(*args, **kwargs)
