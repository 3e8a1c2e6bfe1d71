"""
Modelos de pagamento: meios (provedores), formas (contas) e transações
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from core.uploads import VALIDADORES_IMAGEM, CaminhoUpload


class MeioPagamento(models.Model):
    """
    Meio de pagamento oferecido pela loja (ex: PIX, Multicaixa, PayPal)
    """

    loja = models.ForeignKey(
        "lojas.Loja", on_delete=models.CASCADE, related_name="meios_pagamento"
    )
    nome = models.CharField(max_length=100, help_text="Nome do meio de pagamento")
    logo = models.ImageField(
        upload_to=CaminhoUpload("meiosPagamento/logos"),
        max_length=500,
        null=True,
        blank=True,
        validators=VALIDADORES_IMAGEM,
        help_text="Logo exibido no checkout",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Meio de pagamento"
        verbose_name_plural = "Meios de pagamento"
        ordering = ["nome"]
        constraints = [
            models.UniqueConstraint(fields=["loja", "nome"], name="meio_pagamento_nome_unico_por_loja"),
        ]

    def __str__(self):
        return self.nome


class FormaPagamento(models.Model):
    """Conta de recebimento ligada a um meio de pagamento"""

    loja = models.ForeignKey(
        "lojas.Loja", on_delete=models.CASCADE, related_name="formas_pagamento"
    )
    meio_pagamento = models.ForeignKey(
        MeioPagamento,
        on_delete=models.RESTRICT,
        related_name="formas_pagamento",
    )
    dados_conta = models.TextField(help_text="Dados da conta (IBAN, chave PIX, e-mail...)")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Forma de pagamento"
        verbose_name_plural = "Formas de pagamento"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.meio_pagamento.nome} - {self.dados_conta[:30]}"


class TransacaoPagamento(models.Model):
    loja = models.ForeignKey(
        "lojas.Loja", on_delete=models.CASCADE, related_name="transacoes_pagamento"
    )
    pedido = models.ForeignKey(
        "vendas.Pedido",
        on_delete=models.CASCADE,
        related_name="transacoes",
    )
    metodo_pagamento = models.ForeignKey(
        FormaPagamento,
        on_delete=models.RESTRICT,
        related_name="transacoes",
        help_text="Forma de pagamento usada",
    )
    cliente = models.ForeignKey(
        "vendas.Cliente",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="transacoes",
    )
    valor_total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Transação de pagamento"
        verbose_name_plural = "Transações de pagamento"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Transação {self.pk} - pedido {self.pedido_id} ({self.valor_total})"
