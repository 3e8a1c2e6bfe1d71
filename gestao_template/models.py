"""
Modelos da gestão de template da vitrine.

Cada seção pertence a uma loja e a um template dessa loja. As imagens
ficam em <pasta da loja>/assets/gestaoTemplate/<pasta da seção>/.
"""

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.uploads import VALIDADORES_IMAGEM, CaminhoUpload
from lojas.models import validar_cor_hex

POR_LINHA_VALIDATORS = [MinValueValidator(1), MaxValueValidator(10)]


def campo_imagem(pasta, obrigatorio=True, **kwargs):
    return models.ImageField(
        upload_to=CaminhoUpload(f"gestaoTemplate/{pasta}"),
        max_length=500,
        null=not obrigatorio,
        blank=not obrigatorio,
        validators=VALIDADORES_IMAGEM,
        **kwargs,
    )


def texto_opcional(max_length=255):
    return models.CharField(max_length=max_length, null=True, blank=True)


class Template(models.Model):
    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="templates")
    nome = models.CharField(max_length=255)
    ativo = models.BooleanField(default=False, help_text="Template em uso na vitrine")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Template"
        verbose_name_plural = "Templates"
        ordering = ["-created_at"]

    def __str__(self):
        return self.nome


class SecaoTemplate(models.Model):
    """Base das seções: loja + template + timestamps"""

    loja = models.ForeignKey("lojas.Loja", on_delete=models.CASCADE, related_name="+")
    template = models.ForeignKey(Template, on_delete=models.CASCADE, related_name="+")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]


# Banners

class Anuncio(SecaoTemplate):
    titulo = texto_opcional()
    texto = texto_opcional(1000)
    link = texto_opcional()
    imagem_desktop = campo_imagem("anuncios")
    imagem_mobile = campo_imagem("anuncios", obrigatorio=False)
    carregar_imagens_mobile = models.BooleanField(default=False)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Anúncio"
        verbose_name_plural = "Anúncios"


class BannerEstatico(SecaoTemplate):
    imagem = campo_imagem("banner_estatico")
    titulo = texto_opcional()
    link = models.URLField(max_length=255, null=True, blank=True)
    exibir = models.BooleanField(default=True)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Banner estático"
        verbose_name_plural = "Banners estáticos"


class BannerPromocional(SecaoTemplate):
    titulo = texto_opcional()
    texto_fora_imagem = models.BooleanField(default=False)
    banners_carrossel = models.BooleanField(default=False)
    mesma_altura = models.BooleanField(default=False)
    remover_espacos = models.BooleanField(default=False)
    banners_por_linha_desktop = models.PositiveSmallIntegerField(
        default=1, validators=POR_LINHA_VALIDATORS
    )
    imagem_desktop = campo_imagem("banner_promocional")
    imagem_mobile = campo_imagem("banner_promocional", obrigatorio=False)
    carregar_imagens_mobile = models.BooleanField(default=False)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Banner promocional"
        verbose_name_plural = "Banners promocionais"


class BannerRotativo(SecaoTemplate):
    imagem_desktop = campo_imagem("banner_rotativo")
    imagem_mobile = campo_imagem("banner_rotativo", obrigatorio=False)
    largura_tela = models.BooleanField(default=False, help_text="Ocupar toda a largura da tela")
    efeito_movimento = models.BooleanField(default=False)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Banner rotativo"
        verbose_name_plural = "Banners rotativos"


class BannerGrupoBase(SecaoTemplate):
    titulo = texto_opcional()
    mostrar_texto_fora_imagem = models.BooleanField(default=False)
    mostrar_banners_carrossel = models.BooleanField(default=False)
    mesma_altura_banners = models.BooleanField(default=False)
    remover_espacos_banners = models.BooleanField(default=False)
    banners_por_linha = models.PositiveSmallIntegerField(default=1, validators=POR_LINHA_VALIDATORS)
    carregar_imagens_celular = models.BooleanField(default=False)

    class Meta(SecaoTemplate.Meta):
        abstract = True


class BannerCategoria(BannerGrupoBase):
    categoria = models.ForeignKey(
        "catalogo.Categoria",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="banners",
    )
    imagem_desktop = campo_imagem("banners_categorias")
    imagem_mobile = campo_imagem("banners_categorias", obrigatorio=False)

    class Meta(BannerGrupoBase.Meta):
        verbose_name = "Banner de categoria"
        verbose_name_plural = "Banners de categorias"


class BannerNovidade(BannerGrupoBase):
    produto = models.ForeignKey(
        "catalogo.Produto",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="banners_novidades",
    )
    imagem_desktop = campo_imagem("banners_novidades")
    imagem_mobile = campo_imagem("banners_novidades", obrigatorio=False)

    class Meta(BannerGrupoBase.Meta):
        verbose_name = "Banner de novidade"
        verbose_name_plural = "Banners de novidades"


# Estrutura da página

class Cabecalho(SecaoTemplate):
    cor_fundo = models.CharField(max_length=7, null=True, blank=True, validators=[validar_cor_hex])
    cor_texto_icones = models.CharField(
        max_length=7, null=True, blank=True, validators=[validar_cor_hex]
    )
    tamanho_logo = texto_opcional(50)
    mostrar_idiomas = models.BooleanField(default=False)
    cabecalho_em_celulares = models.JSONField(default=list, blank=True)
    cabecalho_em_computadores = models.JSONField(default=list, blank=True)
    barra_anuncio = models.JSONField(default=list, blank=True, help_text="Mensagens da barra de anúncio")

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Cabeçalho"
        verbose_name_plural = "Cabeçalhos"


class Carrinho(SecaoTemplate):
    mostrar_botao_ver_mais = models.BooleanField(default=False)
    valor_minimo_compra = models.DecimalField(max_digits=10, decimal_places=2, default=3000)
    carrinho_rapido = models.BooleanField(default=False)
    sugerir_produtos_complementares = models.BooleanField(default=False)
    mostrar_calculadora_frete = models.BooleanField(default=False)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Carrinho"
        verbose_name_plural = "Carrinhos"


class CheckoutTemplate(SecaoTemplate):
    exibir_opcoes_entrega = models.BooleanField(default=True)
    exibir_opcoes_pagamento = models.BooleanField(default=True)
    exibir_resumo_pedido = models.BooleanField(default=True)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Checkout"
        verbose_name_plural = "Checkouts"


class Depoimento(SecaoTemplate):
    titulo = texto_opcional()
    descricao_italico = texto_opcional()
    imagem = campo_imagem("depoimentos")
    nome = texto_opcional()
    descricao = models.TextField(null=True, blank=True)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Depoimento"
        verbose_name_plural = "Depoimentos"


class Favorito(SecaoTemplate):
    favoritado = models.BooleanField(default=False)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Favorito"
        verbose_name_plural = "Favoritos"


class ImagemTemplate(SecaoTemplate):
    imagem = campo_imagem("imagens_gt")
    titulo = texto_opcional()

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Imagem"
        verbose_name_plural = "Imagens"


class InfoFretePagamento(SecaoTemplate):
    usar_cores_secao = models.BooleanField(default=False)
    cor_fundo = models.CharField(max_length=7, null=True, blank=True, validators=[validar_cor_hex])
    cor_texto = models.CharField(max_length=7, null=True, blank=True, validators=[validar_cor_hex])
    mostrar_banners_home = models.BooleanField(default=False)
    imagem = campo_imagem("info_frete_pagamento")
    icone = campo_imagem("info_frete_pagamento")
    titulo = texto_opcional()
    descricao = texto_opcional()
    link = models.URLField(max_length=255, null=True, blank=True)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Informação de frete e pagamento"
        verbose_name_plural = "Informações de frete e pagamento"


class MarcaTemplate(SecaoTemplate):
    TIPO_VISUALIZACAO_CHOICES = [
        ("Carrossel", "Carrossel"),
        ("Grade", "Grade"),
        ("Lista", "Lista"),
    ]

    tipo_visualizacao = models.CharField(
        max_length=20, choices=TIPO_VISUALIZACAO_CHOICES, default="Carrossel"
    )
    titulo = texto_opcional()
    imagem = campo_imagem("marcas_gt")

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Marca"
        verbose_name_plural = "Marcas"


class MensagemInstitucional(SecaoTemplate):
    subtitulo = texto_opcional()
    titulo = texto_opcional()
    titulo_italico = texto_opcional()
    link = texto_opcional()
    botao = texto_opcional(100)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Mensagem institucional"
        verbose_name_plural = "Mensagens institucionais"


class MostrarProduto(SecaoTemplate):
    """Opções da página de produto"""

    mostrar_calculadora_frete = models.BooleanField(default=False)
    mostrar_parcelas = models.BooleanField(default=False)
    mostrar_preco_desconto = models.BooleanField(default=False)
    variacoes_como_botoes = models.BooleanField(default=False)
    variacoes_cor_como_foto = models.BooleanField(default=False)
    mostrar_estoque = models.BooleanField(default=False)
    mostrar_mensagem_ultima_unidade = models.BooleanField(default=False)
    descricao_largura_total = models.BooleanField(default=False)
    permitir_comentarios_facebook = models.BooleanField(default=False)

    mensagem_ultima_unidade = texto_opcional()
    facebook_perfil_id = texto_opcional()
    link_guia_medidas = models.URLField(max_length=255, null=True, blank=True)

    titulo_produtos_alternativos = models.CharField(max_length=255, default="Produtos similares")
    titulo_produtos_complementares = models.CharField(
        max_length=255, default="Para comprar com esse produto"
    )

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Configuração de exibição de produto"
        verbose_name_plural = "Configurações de exibição de produto"


class Newsletter(SecaoTemplate):
    aumentar_largura_tela = models.BooleanField(default=False)
    usar_cores_newsletter = models.BooleanField(default=False)
    cor_fundo = models.CharField(max_length=7, null=True, blank=True, validators=[validar_cor_hex])
    cor_texto = models.CharField(max_length=7, null=True, blank=True, validators=[validar_cor_hex])
    imagem = campo_imagem("newsletters")
    titulo = texto_opcional()
    descricao = models.TextField(null=True, blank=True)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Newsletter"
        verbose_name_plural = "Newsletters"


class PopupPromocional(SecaoTemplate):
    mostrar_popup = models.BooleanField(default=False)
    imagem = campo_imagem("popups_promocionais", obrigatorio=False)
    titulo = texto_opcional()
    descricao = models.TextField(null=True, blank=True)
    texto_botao = texto_opcional(100)
    link_botao = models.URLField(max_length=255, null=True, blank=True)
    permitir_inscricao_newsletter = models.BooleanField(default=False)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Popup promocional"
        verbose_name_plural = "Popups promocionais"


# Vitrines de produtos

class VitrineProdutosBase(SecaoTemplate):
    TIPO_VISUALIZACAO_CHOICES = [
        ("Grade", "Grade"),
        ("Lista", "Lista"),
    ]

    titulo = texto_opcional()
    tipo_visualizacao = models.CharField(max_length=20, choices=TIPO_VISUALIZACAO_CHOICES, default="Grade")
    produtos_por_linha_celulares = models.PositiveSmallIntegerField(
        default=2, validators=POR_LINHA_VALIDATORS
    )
    produtos_por_linha_computadores = models.PositiveSmallIntegerField(
        default=4, validators=POR_LINHA_VALIDATORS
    )

    class Meta(SecaoTemplate.Meta):
        abstract = True


class ProdutoDestaque(VitrineProdutosBase):
    class Meta(VitrineProdutosBase.Meta):
        verbose_name = "Vitrine de produtos em destaque"
        verbose_name_plural = "Vitrines de produtos em destaque"


class ProdutoNovo(VitrineProdutosBase):
    class Meta(VitrineProdutosBase.Meta):
        verbose_name = "Vitrine de produtos novos"
        verbose_name_plural = "Vitrines de produtos novos"


class ProdutoOferta(VitrineProdutosBase):
    TIPO_VISUALIZACAO_CHOICES = [
        ("Carrossel", "Carrossel"),
        ("Grade", "Grade"),
        ("Lista", "Lista"),
    ]

    tipo_visualizacao = models.CharField(max_length=20, choices=TIPO_VISUALIZACAO_CHOICES, default="Carrossel")

    class Meta(VitrineProdutosBase.Meta):
        verbose_name = "Vitrine de produtos em oferta"
        verbose_name_plural = "Vitrines de produtos em oferta"


class Texto(SecaoTemplate):
    TIPO_TEXTO_CHOICES = [
        ("Cabecalho", "Cabeçalho"),
        ("Rodape", "Rodapé"),
        ("Banner", "Banner"),
        ("Titulo", "Título"),
        ("Descricao", "Descrição"),
    ]

    titulo = texto_opcional()
    conteudo = texto_opcional(1000)
    tipo_texto = models.CharField(max_length=20, choices=TIPO_TEXTO_CHOICES, default="Descricao")

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Texto"
        verbose_name_plural = "Textos"


class Video(SecaoTemplate):
    TIPO_REPRODUCAO_CHOICES = [
        ("automatico_sem_som", "Automático sem som"),
        ("manual_com_som", "Manual com som"),
    ]

    aumentar_largura_tela = models.BooleanField(default=False)
    tipo_reproducao = models.CharField(
        max_length=20, choices=TIPO_REPRODUCAO_CHOICES, default="automatico_sem_som"
    )
    link_youtube = models.URLField(max_length=255, null=True, blank=True)
    imagem = campo_imagem("videos")
    titulo = texto_opcional()
    descricao = models.TextField(null=True, blank=True)
    texto_botao = texto_opcional(100)
    link_botao = models.URLField(max_length=255, null=True, blank=True)

    class Meta(SecaoTemplate.Meta):
        verbose_name = "Vídeo"
        verbose_name_plural = "Vídeos"
