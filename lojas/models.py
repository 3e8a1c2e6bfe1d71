"""
Modelos da loja (tenant) e das configurações da loja
"""

from decimal import Decimal

from django.core.validators import MinValueValidator, RegexValidator
from django.db import models

from .utils import gerar_pasta_loja

COR_HEX_REGEX = r"^#[0-9A-Fa-f]{6}$"

validar_cor_hex = RegexValidator(
    regex=COR_HEX_REGEX,
    message="A cor deve estar no formato hexadecimal (ex: #FFFFFF).",
)

validar_cores_auxiliares = RegexValidator(
    regex=r"^#[0-9A-Fa-f]{6}(,#[0-9A-Fa-f]{6})*$",
    message="As cores auxiliares devem ser cores hexadecimais separadas por vírgula (ex: #FFFFFF,#000000).",
)


class Loja(models.Model):
    """
    Loja: unidade de isolamento dos dados (tenant).
    Cada loja tem uma pasta própria no storage para seus arquivos.
    """

    nome = models.CharField(max_length=255, help_text="Nome da loja")
    descricao = models.TextField(null=True, blank=True, help_text="Descrição da loja")
    email = models.EmailField(
        max_length=255,
        unique=True,
        error_messages={"unique": "Este e-mail já está em uso por outra loja."},
        help_text="E-mail de contato da loja",
    )
    telefone = models.CharField(max_length=20, null=True, blank=True)
    endereco = models.CharField(max_length=255, null=True, blank=True)
    logomarca = models.CharField(
        max_length=255, null=True, blank=True, help_text="Caminho ou URL da logomarca"
    )
    categoria = models.CharField(max_length=100, null=True, blank=True)
    url_loja = models.URLField(max_length=255, null=True, blank=True)
    cor = models.CharField(
        max_length=7,
        null=True,
        blank=True,
        validators=[validar_cor_hex],
        help_text="Cor principal (#RRGGBB)",
    )
    cores_auxiliares = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        validators=[validar_cores_auxiliares],
        help_text="Cores auxiliares separadas por vírgula",
    )
    facebook = models.URLField(max_length=255, null=True, blank=True)
    instagram = models.URLField(max_length=255, null=True, blank=True)
    pasta = models.CharField(
        max_length=255,
        unique=True,
        editable=False,
        help_text="Pasta da loja no storage (gerada automaticamente)",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Loja"
        verbose_name_plural = "Lojas"
        ordering = ["-created_at"]

    def __str__(self):
        return self.nome

    def save(self, *args, **kwargs):
        if not self.pasta:
            self.pasta = gerar_pasta_loja(self.nome)
        super().save(*args, **kwargs)


class Dominio(models.Model):
    loja = models.ForeignKey(Loja, on_delete=models.CASCADE, related_name="dominios")
    dominio = models.CharField(
        max_length=255,
        unique=True,
        error_messages={"unique": "Este domínio já está em uso."},
        help_text="Hostname (ex: minhaloja.com)",
    )
    principal = models.BooleanField(default=False)
    status_dominio = models.CharField(max_length=255, help_text="Situação do DNS")
    status_ssl = models.CharField(max_length=255, help_text="Situação do certificado SSL")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Domínio"
        verbose_name_plural = "Domínios"
        ordering = ["-created_at"]

    def __str__(self):
        return self.dominio


class Idioma(models.Model):
    loja = models.ForeignKey(Loja, on_delete=models.CASCADE, related_name="idiomas")
    codigo_idioma = models.CharField(max_length=10, help_text="Código do idioma (ex: pt-BR)")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Idioma"
        verbose_name_plural = "Idiomas"
        ordering = ["codigo_idioma"]
        constraints = [
            models.UniqueConstraint(
                fields=["loja", "codigo_idioma"], name="idioma_unico_por_loja"
            ),
        ]

    def __str__(self):
        return self.codigo_idioma


class Moeda(models.Model):
    loja = models.ForeignKey(Loja, on_delete=models.CASCADE, related_name="moedas")
    nome = models.CharField(max_length=255)
    codigo = models.CharField(max_length=10, help_text="Código ISO (ex: BRL)")
    simbolo = models.CharField(max_length=10, help_text="Símbolo (ex: R$)")
    taxa_cambio = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        validators=[MinValueValidator(Decimal("0"))],
        help_text="Taxa de câmbio em relação à moeda padrão",
    )
    padrao = models.BooleanField(default=False, help_text="Moeda padrão da loja")
    status = models.BooleanField(default=True, help_text="Moeda ativa")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Moeda"
        verbose_name_plural = "Moedas"
        ordering = ["-padrao", "nome"]
        constraints = [
            models.UniqueConstraint(fields=["loja", "nome"], name="moeda_nome_unico_por_loja"),
            models.UniqueConstraint(fields=["loja", "codigo"], name="moeda_codigo_unico_por_loja"),
        ]

    def __str__(self):
        return f"{self.codigo} ({self.simbolo})"


class Email(models.Model):
    """Modelo de e-mail transacional da loja"""

    TIPO_CHOICES = [
        ("ativacao_conta", "Ativação de conta"),
        ("mudanca_senha", "Mudança de senha"),
        ("boas_vindas", "Boas-vindas"),
        ("cancelamento_compra", "Cancelamento de compra"),
        ("confirmacao_pagamento", "Confirmação de pagamento"),
        ("confirmacao_compra", "Confirmação de compra"),
        ("confirmacao_envio", "Confirmação de envio"),
        ("carrinhos_abandonados", "Carrinhos abandonados"),
    ]

    loja = models.ForeignKey(Loja, on_delete=models.CASCADE, related_name="emails")
    tipo = models.CharField(max_length=30, choices=TIPO_CHOICES)
    descricao = models.CharField(max_length=255, null=True, blank=True)
    conteudo = models.JSONField(null=True, blank=True, help_text="Conteúdo estruturado do e-mail")
    conteudo_html = models.JSONField(null=True, blank=True, help_text="Conteúdo HTML do e-mail")
    status_conteudo_html = models.BooleanField(
        default=False, help_text="Usar o conteúdo HTML em vez do estruturado"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "E-mail"
        verbose_name_plural = "E-mails"
        ordering = ["tipo"]

    def __str__(self):
        return self.get_tipo_display()


class Redirecionamento(models.Model):
    loja = models.ForeignKey(Loja, on_delete=models.CASCADE, related_name="redirecionamentos")
    url_antiga = models.URLField(max_length=255, null=True, blank=True)
    url_nova = models.URLField(max_length=255, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Redirecionamento"
        verbose_name_plural = "Redirecionamentos"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.url_antiga or '-'} -> {self.url_nova or '-'}"


class PontoLevantamento(models.Model):
    """Ponto de retirada de pedidos"""

    loja = models.ForeignKey(Loja, on_delete=models.CASCADE, related_name="pontos_levantamento")
    nome_local = models.CharField(max_length=255)
    estado = models.CharField(max_length=255, null=True, blank=True)
    cidade = models.CharField(max_length=255, null=True, blank=True)
    bairro = models.CharField(max_length=255, null=True, blank=True)
    rua = models.CharField(max_length=255, null=True, blank=True)
    numero = models.CharField(max_length=255, null=True, blank=True)
    complemento = models.CharField(max_length=255, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Ponto de levantamento"
        verbose_name_plural = "Pontos de levantamento"
        ordering = ["nome_local"]

    def __str__(self):
        return self.nome_local


class Checkout(models.Model):
    """Configurações do checkout da loja"""

    loja = models.ForeignKey(Loja, on_delete=models.CASCADE, related_name="checkouts")
    cores_layout = models.BooleanField(default=False, help_text="Usar as cores da loja no checkout")
    pedir_telefone = models.BooleanField(default=False)
    pedir_endereco = models.BooleanField(default=False)
    checkout_acelerado = models.BooleanField(default=False)
    mensagem_cliente = models.TextField(null=True, blank=True)
    mensagem_segmento = models.TextField(null=True, blank=True)
    compra = models.TextField(null=True, blank=True, help_text="Texto exibido na finalização da compra")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Checkout"
        verbose_name_plural = "Checkouts"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Checkout da loja {self.loja_id}"
