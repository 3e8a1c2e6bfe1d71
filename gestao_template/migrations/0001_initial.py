# Generated manually - Initial migration for gestao_template app
import core.uploads
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

COR_HEX = django.core.validators.RegexValidator(
    message="A cor deve estar no formato hexadecimal (ex: #FFFFFF).",
    regex="^#[0-9A-Fa-f]{6}$",
)
POR_LINHA = [
    django.core.validators.MinValueValidator(1),
    django.core.validators.MaxValueValidator(10),
]


def id_field():
    return ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID"))


def secao_fields(*fields):
    """id + campos da seção + timestamps + loja/template"""
    return [
        id_field(),
        *fields,
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
        ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to="lojas.loja")),
        (
            "template",
            models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to="gestao_template.template"),
        ),
    ]


def imagem(pasta, obrigatorio=True):
    return models.ImageField(
        blank=not obrigatorio,
        max_length=500,
        null=not obrigatorio,
        upload_to=core.uploads.CaminhoUpload(f"gestaoTemplate/{pasta}"),
        validators=[
            django.core.validators.FileExtensionValidator(allowed_extensions=["jpg", "jpeg", "png", "webp"]),
            core.uploads.TamanhoMaximoArquivo(),
        ],
    )


def texto(max_length=255):
    return models.CharField(blank=True, max_length=max_length, null=True)


def cor():
    return models.CharField(blank=True, max_length=7, null=True, validators=[COR_HEX])


def opcoes(verbose_name, verbose_name_plural):
    return {
        "verbose_name": verbose_name,
        "verbose_name_plural": verbose_name_plural,
        "ordering": ["-created_at"],
        "abstract": False,
    }


def banner_grupo():
    return [
        ("titulo", texto()),
        ("mostrar_texto_fora_imagem", models.BooleanField(default=False)),
        ("mostrar_banners_carrossel", models.BooleanField(default=False)),
        ("mesma_altura_banners", models.BooleanField(default=False)),
        ("remover_espacos_banners", models.BooleanField(default=False)),
        ("banners_por_linha", models.PositiveSmallIntegerField(default=1, validators=POR_LINHA)),
        ("carregar_imagens_celular", models.BooleanField(default=False)),
    ]


def vitrine(escolhas, padrao):
    return [
        ("titulo", texto()),
        ("tipo_visualizacao", models.CharField(choices=escolhas, default=padrao, max_length=20)),
        ("produtos_por_linha_celulares", models.PositiveSmallIntegerField(default=2, validators=POR_LINHA)),
        ("produtos_por_linha_computadores", models.PositiveSmallIntegerField(default=4, validators=POR_LINHA)),
    ]


GRADE_LISTA = [("Grade", "Grade"), ("Lista", "Lista")]
CARROSSEL_GRADE_LISTA = [("Carrossel", "Carrossel"), ("Grade", "Grade"), ("Lista", "Lista")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalogo", "0001_initial"),
        ("lojas", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Template",
            fields=[
                id_field(),
                ("nome", models.CharField(max_length=255)),
                ("ativo", models.BooleanField(default=False, help_text="Template em uso na vitrine")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("loja", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="templates", to="lojas.loja")),
            ],
            options={
                "verbose_name": "Template",
                "verbose_name_plural": "Templates",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Anuncio",
            fields=secao_fields(
                ("titulo", texto()),
                ("texto", texto(1000)),
                ("link", texto()),
                ("imagem_desktop", imagem("anuncios")),
                ("imagem_mobile", imagem("anuncios", obrigatorio=False)),
                ("carregar_imagens_mobile", models.BooleanField(default=False)),
            ),
            options=opcoes("Anúncio", "Anúncios"),
        ),
        migrations.CreateModel(
            name="BannerEstatico",
            fields=secao_fields(
                ("imagem", imagem("banner_estatico")),
                ("titulo", texto()),
                ("link", models.URLField(blank=True, max_length=255, null=True)),
                ("exibir", models.BooleanField(default=True)),
            ),
            options=opcoes("Banner estático", "Banners estáticos"),
        ),
        migrations.CreateModel(
            name="BannerPromocional",
            fields=secao_fields(
                ("titulo", texto()),
                ("texto_fora_imagem", models.BooleanField(default=False)),
                ("banners_carrossel", models.BooleanField(default=False)),
                ("mesma_altura", models.BooleanField(default=False)),
                ("remover_espacos", models.BooleanField(default=False)),
                ("banners_por_linha_desktop", models.PositiveSmallIntegerField(default=1, validators=POR_LINHA)),
                ("imagem_desktop", imagem("banner_promocional")),
                ("imagem_mobile", imagem("banner_promocional", obrigatorio=False)),
                ("carregar_imagens_mobile", models.BooleanField(default=False)),
            ),
            options=opcoes("Banner promocional", "Banners promocionais"),
        ),
        migrations.CreateModel(
            name="BannerRotativo",
            fields=secao_fields(
                ("imagem_desktop", imagem("banner_rotativo")),
                ("imagem_mobile", imagem("banner_rotativo", obrigatorio=False)),
                ("largura_tela", models.BooleanField(default=False, help_text="Ocupar toda a largura da tela")),
                ("efeito_movimento", models.BooleanField(default=False)),
            ),
            options=opcoes("Banner rotativo", "Banners rotativos"),
        ),
        migrations.CreateModel(
            name="BannerCategoria",
            fields=secao_fields(
                *banner_grupo(),
                ("imagem_desktop", imagem("banners_categorias")),
                ("imagem_mobile", imagem("banners_categorias", obrigatorio=False)),
                (
                    "categoria",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="banners",
                        to="catalogo.categoria",
                    ),
                ),
            ),
            options=opcoes("Banner de categoria", "Banners de categorias"),
        ),
        migrations.CreateModel(
            name="BannerNovidade",
            fields=secao_fields(
                *banner_grupo(),
                ("imagem_desktop", imagem("banners_novidades")),
                ("imagem_mobile", imagem("banners_novidades", obrigatorio=False)),
                (
                    "produto",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="banners_novidades",
                        to="catalogo.produto",
                    ),
                ),
            ),
            options=opcoes("Banner de novidade", "Banners de novidades"),
        ),
        migrations.CreateModel(
            name="Cabecalho",
            fields=secao_fields(
                ("cor_fundo", cor()),
                ("cor_texto_icones", cor()),
                ("tamanho_logo", texto(50)),
                ("mostrar_idiomas", models.BooleanField(default=False)),
                ("cabecalho_em_celulares", models.JSONField(blank=True, default=list)),
                ("cabecalho_em_computadores", models.JSONField(blank=True, default=list)),
                ("barra_anuncio", models.JSONField(blank=True, default=list, help_text="Mensagens da barra de anúncio")),
            ),
            options=opcoes("Cabeçalho", "Cabeçalhos"),
        ),
        migrations.CreateModel(
            name="Carrinho",
            fields=secao_fields(
                ("mostrar_botao_ver_mais", models.BooleanField(default=False)),
                ("valor_minimo_compra", models.DecimalField(decimal_places=2, default=3000, max_digits=10)),
                ("carrinho_rapido", models.BooleanField(default=False)),
                ("sugerir_produtos_complementares", models.BooleanField(default=False)),
                ("mostrar_calculadora_frete", models.BooleanField(default=False)),
            ),
            options=opcoes("Carrinho", "Carrinhos"),
        ),
        migrations.CreateModel(
            name="CheckoutTemplate",
            fields=secao_fields(
                ("exibir_opcoes_entrega", models.BooleanField(default=True)),
                ("exibir_opcoes_pagamento", models.BooleanField(default=True)),
                ("exibir_resumo_pedido", models.BooleanField(default=True)),
            ),
            options=opcoes("Checkout", "Checkouts"),
        ),
        migrations.CreateModel(
            name="Depoimento",
            fields=secao_fields(
                ("titulo", texto()),
                ("descricao_italico", texto()),
                ("imagem", imagem("depoimentos")),
                ("nome", texto()),
                ("descricao", models.TextField(blank=True, null=True)),
            ),
            options=opcoes("Depoimento", "Depoimentos"),
        ),
        migrations.CreateModel(
            name="Favorito",
            fields=secao_fields(
                ("favoritado", models.BooleanField(default=False)),
            ),
            options=opcoes("Favorito", "Favoritos"),
        ),
        migrations.CreateModel(
            name="ImagemTemplate",
            fields=secao_fields(
                ("imagem", imagem("imagens_gt")),
                ("titulo", texto()),
            ),
            options=opcoes("Imagem", "Imagens"),
        ),
        migrations.CreateModel(
            name="InfoFretePagamento",
            fields=secao_fields(
                ("usar_cores_secao", models.BooleanField(default=False)),
                ("cor_fundo", cor()),
                ("cor_texto", cor()),
                ("mostrar_banners_home", models.BooleanField(default=False)),
                ("imagem", imagem("info_frete_pagamento")),
                ("icone", imagem("info_frete_pagamento")),
                ("titulo", texto()),
                ("descricao", texto()),
                ("link", models.URLField(blank=True, max_length=255, null=True)),
            ),
            options=opcoes("Informação de frete e pagamento", "Informações de frete e pagamento"),
        ),
        migrations.CreateModel(
            name="MarcaTemplate",
            fields=secao_fields(
                ("tipo_visualizacao", models.CharField(choices=CARROSSEL_GRADE_LISTA, default="Carrossel", max_length=20)),
                ("titulo", texto()),
                ("imagem", imagem("marcas_gt")),
            ),
            options=opcoes("Marca", "Marcas"),
        ),
        migrations.CreateModel(
            name="MensagemInstitucional",
            fields=secao_fields(
                ("subtitulo", texto()),
                ("titulo", texto()),
                ("titulo_italico", texto()),
                ("link", texto()),
                ("botao", texto(100)),
            ),
            options=opcoes("Mensagem institucional", "Mensagens institucionais"),
        ),
        migrations.CreateModel(
            name="MostrarProduto",
            fields=secao_fields(
                ("mostrar_calculadora_frete", models.BooleanField(default=False)),
                ("mostrar_parcelas", models.BooleanField(default=False)),
                ("mostrar_preco_desconto", models.BooleanField(default=False)),
                ("variacoes_como_botoes", models.BooleanField(default=False)),
                ("variacoes_cor_como_foto", models.BooleanField(default=False)),
                ("mostrar_estoque", models.BooleanField(default=False)),
                ("mostrar_mensagem_ultima_unidade", models.BooleanField(default=False)),
                ("descricao_largura_total", models.BooleanField(default=False)),
                ("permitir_comentarios_facebook", models.BooleanField(default=False)),
                ("mensagem_ultima_unidade", texto()),
                ("facebook_perfil_id", texto()),
                ("link_guia_medidas", models.URLField(blank=True, max_length=255, null=True)),
                ("titulo_produtos_alternativos", models.CharField(default="Produtos similares", max_length=255)),
                ("titulo_produtos_complementares", models.CharField(default="Para comprar com esse produto", max_length=255)),
            ),
            options=opcoes("Configuração de exibição de produto", "Configurações de exibição de produto"),
        ),
        migrations.CreateModel(
            name="Newsletter",
            fields=secao_fields(
                ("aumentar_largura_tela", models.BooleanField(default=False)),
                ("usar_cores_newsletter", models.BooleanField(default=False)),
                ("cor_fundo", cor()),
                ("cor_texto", cor()),
                ("imagem", imagem("newsletters")),
                ("titulo", texto()),
                ("descricao", models.TextField(blank=True, null=True)),
            ),
            options=opcoes("Newsletter", "Newsletters"),
        ),
        migrations.CreateModel(
            name="PopupPromocional",
            fields=secao_fields(
                ("mostrar_popup", models.BooleanField(default=False)),
                ("imagem", imagem("popups_promocionais", obrigatorio=False)),
                ("titulo", texto()),
                ("descricao", models.TextField(blank=True, null=True)),
                ("texto_botao", texto(100)),
                ("link_botao", models.URLField(blank=True, max_length=255, null=True)),
                ("permitir_inscricao_newsletter", models.BooleanField(default=False)),
            ),
            options=opcoes("Popup promocional", "Popups promocionais"),
        ),
        migrations.CreateModel(
            name="ProdutoDestaque",
            fields=secao_fields(*vitrine(GRADE_LISTA, "Grade")),
            options=opcoes("Vitrine de produtos em destaque", "Vitrines de produtos em destaque"),
        ),
        migrations.CreateModel(
            name="ProdutoNovo",
            fields=secao_fields(*vitrine(GRADE_LISTA, "Grade")),
            options=opcoes("Vitrine de produtos novos", "Vitrines de produtos novos"),
        ),
        migrations.CreateModel(
            name="ProdutoOferta",
            fields=secao_fields(*vitrine(CARROSSEL_GRADE_LISTA, "Carrossel")),
            options=opcoes("Vitrine de produtos em oferta", "Vitrines de produtos em oferta"),
        ),
        migrations.CreateModel(
            name="Texto",
            fields=secao_fields(
                ("titulo", texto()),
                ("conteudo", texto(1000)),
                (
                    "tipo_texto",
                    models.CharField(
                        choices=[
                            ("Cabecalho", "Cabeçalho"),
                            ("Rodape", "Rodapé"),
                            ("Banner", "Banner"),
                            ("Titulo", "Título"),
                            ("Descricao", "Descrição"),
                        ],
                        default="Descricao",
                        max_length=20,
                    ),
                ),
            ),
            options=opcoes("Texto", "Textos"),
        ),
        migrations.CreateModel(
            name="Video",
            fields=secao_fields(
                ("aumentar_largura_tela", models.BooleanField(default=False)),
                (
                    "tipo_reproducao",
                    models.CharField(
                        choices=[
                            ("automatico_sem_som", "Automático sem som"),
                            ("manual_com_som", "Manual com som"),
                        ],
                        default="automatico_sem_som",
                        max_length=20,
                    ),
                ),
                ("link_youtube", models.URLField(blank=True, max_length=255, null=True)),
                ("imagem", imagem("videos")),
                ("titulo", texto()),
                ("descricao", models.TextField(blank=True, null=True)),
                ("texto_botao", texto(100)),
                ("link_botao", models.URLField(blank=True, max_length=255, null=True)),
            ),
            options=opcoes("Vídeo", "Vídeos"),
        ),
    ]
