"""
Fixtures compartilhadas pelos testes da API
"""

import io

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient

from accounts.models import User
from accounts.tokens import emitir_tokens
from lojas.models import Loja


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Cada teste grava os arquivos num diretório temporário"""
    settings.MEDIA_ROOT = str(tmp_path / "storage")
    return tmp_path / "storage"


@pytest.fixture(autouse=True)
def clima_sem_chave(settings):
    settings.OPENWEATHER_API_KEY = ""


def criar_imagem(nome="foto.png", formato="PNG", tamanho=(10, 10)):
    buffer = io.BytesIO()
    Image.new("RGB", tamanho, color=(255, 0, 0)).save(buffer, format=formato)
    content_type = "image/png" if formato == "PNG" else "image/jpeg"
    return SimpleUploadedFile(nome, buffer.getvalue(), content_type=content_type)


@pytest.fixture
def imagem():
    return criar_imagem


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def usuario(db):
    return User.objects.create_user(email="dono@loja.com", password="segredo123", nome="Dono")


@pytest.fixture
def loja(db, usuario):
    loja = Loja.objects.create(nome="Minha Loja", email="contato@minhaloja.com")
    usuario.loja = loja
    usuario.save(update_fields=["loja"])
    return loja


@pytest.fixture
def cliente(api_client, usuario, loja):
    """Cliente autenticado com token real de um usuário que tem loja"""
    tokens = emitir_tokens(usuario)
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access_token']}")
    return api_client


@pytest.fixture
def cliente_sem_loja(db):
    user = User.objects.create_user(email="semloja@teste.com", password="segredo123", nome="Sem Loja")
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def outra_loja(db):
    """Segunda loja (outro tenant), com o seu próprio usuário"""
    loja = Loja.objects.create(nome="Outra Loja", email="contato@outraloja.com")
    User.objects.create_user(email="dono@outraloja.com", password="segredo123", nome="Outro", loja=loja)
    return loja


@pytest.fixture
def cliente_outra_loja(outra_loja):
    client = APIClient()
    client.force_authenticate(user=outra_loja.usuarios.get())
    return client


def criar_cadastros(loja):
    """Categoria, marca e fornecedor mínimos para cadastrar produtos"""
    from catalogo.models import Categoria, Fornecedor, Marca

    return {
        "categoria": Categoria.objects.create(loja=loja, nome="Camisetas", status=True),
        "marca": Marca.objects.create(loja=loja, nome="Marca X"),
        "fornecedor": Fornecedor.objects.create(
            loja=loja, nome="Fornecedor Y", email=f"fornecedor{loja.id}@teste.com"
        ),
    }


def criar_produto(loja, **kwargs):
    from catalogo.models import Produto

    if "categoria" not in kwargs:
        kwargs.update(criar_cadastros(loja))
    dados = {
        "nome": "Camiseta Básica",
        "preco_compra": "10.00",
        "preco_venda": "25.00",
        "estoque": 5,
    }
    dados.update(kwargs)
    return Produto.objects.create(loja=loja, **dados)


@pytest.fixture
def cadastros(loja):
    return criar_cadastros(loja)


@pytest.fixture
def produto(loja, cadastros):
    return criar_produto(loja, **cadastros)
