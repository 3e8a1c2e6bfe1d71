"""
Utilitários para upload de arquivos das lojas.

Os arquivos de cada loja ficam dentro da pasta da própria loja
(<loja.pasta>/assets/...) e recebem nomes no formato
"<nome-original-slugificado>-<10 caracteres aleatórios>.<extensão>".
"""

import logging
import os

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.core.validators import FileExtensionValidator
from django.db import models
from django.utils.crypto import get_random_string
from django.utils.deconstruct import deconstructible
from django.utils.text import slugify

logger = logging.getLogger(__name__)


def gerar_nome_arquivo(filename):
    """Gera nome único a partir do nome original do arquivo"""
    nome, extensao = os.path.splitext(os.path.basename(filename))
    nome = slugify(nome)[:80] or "arquivo"
    return f"{nome}-{get_random_string(10)}{extensao.lower()}"


def caminho_loja(loja, subpasta, filename):
    return f"{loja.pasta}/assets/{subpasta}/{gerar_nome_arquivo(filename)}"


@deconstructible
class CaminhoUpload:
    """
    upload_to para FileField/ImageField de modelos que pertencem a uma loja.

    Exemplo: models.ImageField(upload_to=CaminhoUpload("meiosPagamento/logos"))
    """

    def __init__(self, subpasta):
        self.subpasta = subpasta

    def __call__(self, instance, filename):
        return caminho_loja(instance.loja, self.subpasta, filename)

    def __eq__(self, other):
        return isinstance(other, CaminhoUpload) and self.subpasta == other.subpasta


@deconstructible
class TamanhoMaximoArquivo:
    """Valida o tamanho máximo do arquivo em KB"""

    message = "O arquivo não pode ser maior que %(limite)s KB."
    code = "arquivo_muito_grande"

    def __init__(self, limite_kb=None):
        self.limite_kb = limite_kb

    def __call__(self, arquivo):
        limite = self.limite_kb or getattr(settings, "UPLOAD_MAX_KB", 2048)
        if arquivo.size > limite * 1024:
            raise ValidationError(self.message, code=self.code, params={"limite": limite})

    def __eq__(self, other):
        return isinstance(other, TamanhoMaximoArquivo) and self.limite_kb == other.limite_kb


VALIDADORES_IMAGEM = [
    FileExtensionValidator(allowed_extensions=["jpg", "jpeg", "png", "webp"]),
    TamanhoMaximoArquivo(),
]


def salvar_arquivo(arquivo, loja, subpasta):
    """Salva um arquivo avulso na pasta da loja e retorna o caminho gravado"""
    return default_storage.save(caminho_loja(loja, subpasta, arquivo.name), arquivo)


def remover_caminho(caminho):
    if caminho and default_storage.exists(caminho):
        default_storage.delete(caminho)


def campos_arquivo(instance):
    return [
        field.name
        for field in instance._meta.get_fields()
        if isinstance(field, models.FileField)
    ]


def remover_arquivos(instance, campos=None):
    """Remove do storage os arquivos referenciados pela instância"""
    for nome in campos if campos is not None else campos_arquivo(instance):
        arquivo = getattr(instance, nome)
        if arquivo:
            try:
                arquivo.delete(save=False)
            except OSError as e:
                logger.warning(f"Não foi possível remover o arquivo {arquivo.name}: {e}")


def url_publica(request, caminho):
    """Converte um caminho do storage em URL absoluta"""
    if not caminho:
        return None
    url = default_storage.url(caminho)
    return request.build_absolute_uri(url) if request is not None else url
