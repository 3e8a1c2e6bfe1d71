"""
Testes do catálogo: categorias, produtos, variações e exportação CSV
"""

import csv
import io
import os
from types import SimpleNamespace

import pytest
from django.core.files.storage import default_storage
from django.utils import timezone

from catalogo.models import Categoria, Produto, ProdutoVariacao
from .conftest import criar_cadastros, criar_produto


def dados_produto(cadastros, **extra):
    dados = {
        "nome": "Tênis",
        "preco_compra": "50.00",
        "preco_venda": "120.00",
        "categoria_id": cadastros["categoria"].id,
        "marca_id": cadastros["marca"].id,
        "fornecedor_id": cadastros["fornecedor"].id,
    }
    dados.update(extra)
    return dados


@pytest.mark.django_db
class TestCategorias:
    def test_slug_gerado_a_partir_do_nome(self, cliente):
        response = cliente.post("/api/categorias/", {"nome": "Roupas de Verão"})

        assert response.status_code == 201
        assert response.json()["message"] == "Categoria criada com sucesso."
        assert response.json()["data"]["slug"] == "roupas-de-verao"

    def test_remocao_bloqueada_por_produtos(self, cliente, produto):
        categoria = produto.categoria

        response = cliente.delete(f"/api/categorias/{categoria.id}/")

        assert response.status_code == 422
        assert response.json() == {
            "success": False,
            "message": "Não é possível remover a categoria devido a dependências.",
        }
        assert Categoria.objects.filter(pk=categoria.id).exists()

    def test_remocao_sem_dependencias(self, cliente, loja):
        categoria = Categoria.objects.create(loja=loja, nome="Vazia")

        response = cliente.delete(f"/api/categorias/{categoria.id}/")

        assert response.status_code == 200
        assert response.json()["message"] == "Categoria removida com sucesso."

    def test_marca_nome_unico_na_loja(self, cliente, cadastros, outra_loja):
        response = cliente.post("/api/marcas/", {"nome": cadastros["marca"].nome})
        assert response.status_code == 422
        assert response.json()["errors"]["nome"] == ["O nome da marca já está em uso."]


@pytest.mark.django_db
class TestProdutos:
    url = "/api/produtos/"

    def test_cria_produto(self, cliente, loja, cadastros):
        response = cliente.post(self.url, dados_produto(cadastros, referencia="TEN-01"))

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["loja_id"] == loja.id
        assert data["categoria_id"] == cadastros["categoria"].id
        assert data["imagens"] == []

    def test_categoria_de_outra_loja(self, cliente, cadastros, outra_loja):
        alheios = criar_cadastros(outra_loja)

        response = cliente.post(
            self.url, dados_produto(cadastros, categoria_id=alheios["categoria"].id)
        )

        assert response.status_code == 422
        assert "categoria_id" in response.json()["errors"]
        assert not Produto.objects.exists()

    def test_referencia_unica_por_loja(self, cliente, produto, outra_loja, cadastros):
        produto.referencia = "REF-1"
        produto.save()
        criar_produto(outra_loja, referencia="REF-2")

        repetida = cliente.post(self.url, dados_produto(cadastros, referencia="REF-1"))
        assert repetida.status_code == 422
        assert repetida.json()["errors"]["referencia"] == ["A referência já está em uso."]

        # A mesma referência pode existir em outra loja
        outra = cliente.post(self.url, dados_produto(cadastros, referencia="REF-2"))
        assert outra.status_code == 201

    def test_upload_de_imagens(self, cliente, loja, cadastros, imagem):
        dados = dados_produto(cadastros)
        dados["foto_capa"] = imagem("capa.png")
        dados["imagens"] = [imagem("um.png"), imagem("dois.png")]

        response = cliente.post(self.url, dados, format="multipart")

        assert response.status_code == 201
        produto = Produto.objects.get()
        assert produto.foto_capa.name.startswith(f"{loja.pasta}/assets/produtos/fotos/capa-")
        assert len(produto.imagens) == 2
        assert all(default_storage.exists(caminho) for caminho in produto.imagens)
        assert response.json()["data"]["imagens"][0].startswith("http://testserver/storage/")

    def test_extensao_invalida(self, cliente, cadastros):
        from django.core.files.uploadedfile import SimpleUploadedFile

        dados = dados_produto(cadastros)
        dados["foto_capa"] = SimpleUploadedFile("doc.txt", b"texto", content_type="text/plain")

        response = cliente.post(self.url, dados, format="multipart")

        assert response.status_code == 422
        assert "foto_capa" in response.json()["errors"]

    def test_remocao_apaga_arquivos(self, cliente, cadastros, imagem):
        dados = dados_produto(cadastros)
        dados["foto_capa"] = imagem("capa.png")
        criado = cliente.post(self.url, dados, format="multipart").json()["data"]
        caminho = Produto.objects.get(pk=criado["id"]).foto_capa.name

        response = cliente.delete(f"{self.url}{criado['id']}/")

        assert response.status_code == 200
        assert not default_storage.exists(caminho)

    def test_filtros_e_busca(self, cliente, loja, cadastros):
        criar_produto(loja, nome="Caneca Azul", preco_venda="15.00", **cadastros)
        criar_produto(loja, nome="Caneca Verde", preco_venda="45.00", status="inativo", **cadastros)

        ativos = cliente.get(self.url, {"status": "ativo"}).json()["data"]
        assert [p["nome"] for p in ativos] == ["Caneca Azul"]

        baratos = cliente.get(self.url, {"preco_max": "20"}).json()["data"]
        assert [p["nome"] for p in baratos] == ["Caneca Azul"]

        busca = cliente.get(self.url, {"search": "verde"}).json()["data"]
        assert [p["nome"] for p in busca] == ["Caneca Verde"]

    def test_nao_lista_produtos_de_outra_loja(self, cliente, produto, outra_loja):
        criar_produto(outra_loja, nome="Alheio")

        data = cliente.get(self.url).json()["data"]

        assert [p["id"] for p in data] == [produto.id]

    def test_atualiza_estoque(self, cliente, produto):
        response = cliente.patch(f"/api/produtos/{produto.id}/estoque/", {"estoque": 42})

        assert response.status_code == 200
        assert response.json()["message"] == "Estoque atualizado com sucesso."
        assert response.json()["data"]["estoque"] == 42
        produto.refresh_from_db()
        assert produto.estoque == 42

    def test_estoque_negativo(self, cliente, produto):
        response = cliente.patch(f"/api/produtos/{produto.id}/estoque/", {"estoque": -1})

        assert response.status_code == 422

    def test_estoque_de_produto_de_outra_loja(self, cliente, outra_loja):
        alheio = criar_produto(outra_loja)

        response = cliente.patch(f"/api/produtos/{alheio.id}/estoque/", {"estoque": 1})

        assert response.status_code == 404
        assert response.json()["message"] == "Produto não encontrado."


@pytest.mark.django_db
class TestExportacaoCsv:
    url = "/api/produtos/exportar/csv/"

    def test_sem_produtos(self, cliente):
        response = cliente.get(self.url)

        assert response.status_code == 404
        assert response.json()["message"] == "Nenhum produto encontrado."

    def test_exporta_produtos_da_loja(self, cliente, loja, produto, outra_loja):
        criar_produto(outra_loja, nome="Alheio")

        response = cliente.get(self.url)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["file_path"].startswith(f"{loja.pasta}/exports/csv/produtos_")
        assert data["file_name"].endswith(".csv")

        with default_storage.open(data["file_path"]) as arquivo:
            linhas = list(csv.reader(io.StringIO(arquivo.read().decode("utf-8"))))
        assert linhas[0][:3] == ["nome", "descricao", "referencia"]
        assert len(linhas) == 2
        assert linhas[1][0] == produto.nome

    def test_nome_do_arquivo_segue_o_caminho_gravado(self, cliente, produto, monkeypatch):
        """Duas exportações no mesmo segundo geram arquivos distintos"""
        instante = timezone.localtime()
        monkeypatch.setattr("catalogo.exports.timezone", SimpleNamespace(localtime=lambda: instante))

        primeira = cliente.get(self.url).json()["data"]
        segunda = cliente.get(self.url).json()["data"]

        assert primeira["file_path"] != segunda["file_path"]
        for data in (primeira, segunda):
            assert data["file_name"] == os.path.basename(data["file_path"])
            assert default_storage.exists(data["file_path"])


@pytest.mark.django_db
class TestVariacoes:
    url = "/api/variacoes/"

    def test_cria_e_filtra_por_produto(self, cliente, loja, produto):
        outro = criar_produto(loja, nome="Outro", categoria=produto.categoria, marca=produto.marca,
                              fornecedor=produto.fornecedor)
        ProdutoVariacao.objects.create(produto=outro, tipo_variacao="Cor", valor_variacao="Azul")

        response = cliente.post(
            self.url, {"produto_id": produto.id, "tipo_variacao": "Tamanho", "valor_variacao": "M"}
        )
        assert response.status_code == 201
        assert response.json()["message"] == "Variação de produto criada com sucesso."

        data = cliente.get(self.url, {"produto_id": produto.id}).json()["data"]
        assert [v["valor_variacao"] for v in data] == ["M"]

    def test_produto_de_outra_loja(self, cliente, outra_loja):
        alheio = criar_produto(outra_loja)

        response = cliente.post(
            self.url, {"produto_id": alheio.id, "tipo_variacao": "Cor", "valor_variacao": "Preto"}
        )

        assert response.status_code == 422
        assert response.json()["errors"]["produto_id"] == ["Este produto não pertence à sua loja."]

    def test_estoque_da_variacao(self, cliente, produto):
        variacao = ProdutoVariacao.objects.create(
            produto=produto, tipo_variacao="Cor", valor_variacao="Azul"
        )

        response = cliente.patch(f"/api/variacoes/{variacao.id}/estoque/", {"estoque": 3})

        assert response.status_code == 200
        variacao.refresh_from_db()
        assert variacao.estoque == 3
