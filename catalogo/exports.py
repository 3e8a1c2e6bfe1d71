"""
Exportação do catálogo para CSV
"""

import csv
import io
import os
import logging

from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.utils import timezone

logger = logging.getLogger(__name__)

COLUNAS_CSV = [
    "nome",
    "descricao",
    "referencia",
    "codigo_unico_produto",
    "codigo_barras",
    "preco_compra",
    "preco_venda",
    "iva",
    "gerir_stock",
    "preco_promocional",
    "categoria_id",
    "marca_id",
    "fornecedor_id",
    "loja_id",
    "peso",
    "largura",
    "altura",
    "comprimento",
    "foto_capa",
    "imagens",
    "video_url",
    "status",
    "destaque",
    "novidade",
    "produto_em_oferta",
    "frete_gratis",
    "prazo_envio",
    "variacoes",
    "desconto_id",
    "visualizacoes",
    "avaliacao_media",
    "qtd_avaliacoes",
]


def _valor_coluna(produto, coluna):
    valor = getattr(produto, coluna)
    if coluna == "foto_capa":
        return valor.name if valor else ""
    if coluna == "imagens":
        return ",".join(valor or [])
    if isinstance(valor, bool):
        return int(valor)
    return "" if valor is None else valor


def gerar_csv_produtos(produtos):
    """Monta o conteúdo CSV (cabeçalho + uma linha por produto)"""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(COLUNAS_CSV)
    for produto in produtos:
        writer.writerow([_valor_coluna(produto, coluna) for coluna in COLUNAS_CSV])
    return buffer.getvalue()


def exportar_produtos_csv(loja, produtos):
    """
    Grava o CSV dos produtos na pasta da loja.

    Returns:
        Tupla (nome_arquivo, caminho_no_storage)
    """
    data_atual = timezone.localtime().strftime("%Y-%m-%d_%H-%M-%S")
    caminho = default_storage.save(
        f"{loja.pasta}/exports/csv/produtos_{data_atual}.csv",
        ContentFile(gerar_csv_produtos(produtos).encode("utf-8")),
    )
    # O storage pode renomear o arquivo se o nome já existir
    nome_arquivo = os.path.basename(caminho)
    logger.info(f"CSV de produtos exportado para {caminho} (loja_id={loja.id})")
    return nome_arquivo, caminho
