"""
Utilitários para o módulo de lojas
"""
import logging
import os
import re
import shutil
import string

from django.core.files.storage import default_storage
from django.utils.crypto import get_random_string

logger = logging.getLogger(__name__)

# Estrutura criada dentro da pasta de cada loja
PASTAS_GESTAO_TEMPLATE = [
    "anuncios",
    "banner_estatico",
    "banner_promocional",
    "banner_rotativo",
    "banners_categorias",
    "banners_novidades",
    "depoimentos",
    "imagens_gt",
    "info_frete_pagamento",
    "marcas_gt",
    "newsletters",
    "popups_promocionais",
    "videos",
]

SUBPASTAS_LOJA = [
    *(f"assets/gestaoTemplate/{pasta}" for pasta in PASTAS_GESTAO_TEMPLATE),
    "assets/meiosPagamento",
    "assets/produtos",
    "assets/css",
    "assets/js",
    "fonts",
]


def gerar_pasta_loja(nome: str) -> str:
    """
    Gera o nome da pasta da loja no formato loja_<nome>_<sufixo>
    (caracteres fora de [A-Za-z0-9_-] viram "_", sufixo com 13 caracteres aleatórios)
    """
    nome_limpo = re.sub(r"[^A-Za-z0-9_-]", "_", nome or "")[:60]
    sufixo = get_random_string(13, allowed_chars=string.ascii_lowercase + string.digits)
    return f"loja_{nome_limpo}_{sufixo}"


def criar_estrutura_pastas(pasta: str) -> None:
    """Cria a árvore de pastas da loja no storage local"""
    base = default_storage.path(pasta)
    for subpasta in SUBPASTAS_LOJA:
        os.makedirs(os.path.join(base, subpasta), exist_ok=True)


def remover_pasta_loja(pasta: str) -> None:
    """Remove a pasta da loja e todo o seu conteúdo"""
    if not pasta:
        return
    base = default_storage.path(pasta)
    if os.path.isdir(base):
        shutil.rmtree(base)
        logger.info(f"Pasta da loja removida: {pasta}")
