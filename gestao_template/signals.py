"""
Remove do storage os arquivos das seções apagadas em cascata com o template
"""

import logging

from django.db import transaction
from django.db.models.signals import post_delete

from core.uploads import campos_arquivo, remover_caminho

from .secoes import SECOES

logger = logging.getLogger(__name__)


def remover_arquivos_secao(sender, instance, **kwargs):
    caminhos = [
        getattr(instance, nome).name
        for nome in campos_arquivo(instance)
        if getattr(instance, nome)
    ]
    if not caminhos:
        return

    def remover():
        for caminho in caminhos:
            try:
                remover_caminho(caminho)
            except OSError as e:
                logger.warning(f"Não foi possível remover o arquivo {caminho}: {e}")

    # Só apaga do disco depois que a remoção no banco for confirmada
    transaction.on_commit(remover)


for secao in SECOES:
    if campos_arquivo(secao.model):
        post_delete.connect(
            remover_arquivos_secao,
            sender=secao.model,
            dispatch_uid=f"remover_arquivos_{secao.model._meta.model_name}",
        )
