"""
Testes de templates e das seções do template
"""

import pytest
from django.core.files.storage import default_storage

from gestao_template.models import Anuncio, MostrarProduto, Template
from gestao_template.secoes import SECOES


@pytest.fixture
def template(loja):
    return Template.objects.create(loja=loja, nome="Padrão", ativo=True)


@pytest.mark.django_db
class TestTemplates:
    def test_cria_template(self, cliente, loja):
        response = cliente.post("/api/templates/", {"nome": "Verão"})

        assert response.status_code == 201
        assert response.json()["data"]["loja_id"] == loja.id

    def test_template_de_outra_loja(self, cliente, outra_loja):
        alheio = Template.objects.create(loja=outra_loja, nome="Alheio")

        assert cliente.get(f"/api/templates/{alheio.id}/").status_code == 404

        response = cliente.get(f"/api/templates/{alheio.id}/anuncios/")
        assert response.status_code == 404
        assert response.json()["message"] == "Template não encontrado."

    def test_todas_as_secoes_listam(self, cliente, template):
        for secao in SECOES:
            response = cliente.get(f"/api/templates/{template.id}/{secao.rota}/")
            assert response.status_code == 200, secao.rota
            assert response.json()["data"] == []

    def test_remocao_do_template_apaga_imagens_das_secoes(
        self, cliente, template, imagem, django_capture_on_commit_callbacks
    ):
        criado = cliente.post(
            f"/api/templates/{template.id}/anuncios/",
            {"imagem_desktop": imagem("a.png"), "imagem_mobile": imagem("b.png")},
            format="multipart",
        ).json()["data"]
        anuncio = Anuncio.objects.get(pk=criado["id"])
        caminhos = [anuncio.imagem_desktop.name, anuncio.imagem_mobile.name]
        assert all(default_storage.exists(caminho) for caminho in caminhos)

        with django_capture_on_commit_callbacks(execute=True):
            response = cliente.delete(f"/api/templates/{template.id}/")

        assert response.status_code == 200
        assert not Anuncio.objects.exists()
        assert not any(default_storage.exists(caminho) for caminho in caminhos)


@pytest.mark.django_db
class TestAnuncios:
    def url(self, template):
        return f"/api/templates/{template.id}/anuncios/"

    def test_cria_anuncio_com_imagem(self, cliente, loja, template, imagem):
        response = cliente.post(
            self.url(template),
            {"titulo": "Promoção", "imagem_desktop": imagem("banner.png")},
            format="multipart",
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Anúncio criado com sucesso."
        anuncio = Anuncio.objects.get()
        assert anuncio.template_id == template.id
        assert anuncio.loja_id == loja.id
        assert anuncio.imagem_desktop.name.startswith(
            f"{loja.pasta}/assets/gestaoTemplate/anuncios/banner-"
        )

    def test_imagem_obrigatoria(self, cliente, template):
        response = cliente.post(self.url(template), {"titulo": "Sem imagem"}, format="multipart")

        assert response.status_code == 422
        assert "imagem_desktop" in response.json()["errors"]

    def test_remocao_apaga_imagem(self, cliente, template, imagem):
        criado = cliente.post(
            self.url(template), {"imagem_desktop": imagem("a.png")}, format="multipart"
        ).json()["data"]
        caminho = Anuncio.objects.get(pk=criado["id"]).imagem_desktop.name

        response = cliente.delete(f"{self.url(template)}{criado['id']}/")

        assert response.status_code == 200
        assert response.json()["message"] == "Anúncio removido com sucesso."
        assert not default_storage.exists(caminho)

    def test_secao_de_outro_template(self, cliente, loja, template, imagem):
        outro = Template.objects.create(loja=loja, nome="Outro")
        criado = cliente.post(
            self.url(template), {"imagem_desktop": imagem("a.png")}, format="multipart"
        ).json()["data"]

        response = cliente.get(f"{self.url(outro)}{criado['id']}/")

        assert response.status_code == 404


@pytest.mark.django_db
class TestMostrarProduto:
    def url(self, template):
        return f"/api/templates/{template.id}/mostrar-produto/"

    def test_mensagem_obrigatoria_quando_ligada(self, cliente, template):
        response = cliente.post(self.url(template), {"mostrar_mensagem_ultima_unidade": True})

        assert response.status_code == 422
        assert response.json()["errors"]["mensagem_ultima_unidade"] == [
            "Este campo é obrigatório quando mostrar_mensagem_ultima_unidade está ativo."
        ]

    def test_cria_com_valores_padrao(self, cliente, template):
        response = cliente.post(
            self.url(template),
            {"mostrar_mensagem_ultima_unidade": True, "mensagem_ultima_unidade": "Última peça!"},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["titulo_produtos_alternativos"] == "Produtos similares"
        assert MostrarProduto.objects.get().template_id == template.id

    def test_atualizacao_parcial_respeita_valor_gravado(self, cliente, loja, template):
        secao = MostrarProduto.objects.create(
            loja=loja, template=template, facebook_perfil_id="123"
        )

        response = cliente.patch(
            f"{self.url(template)}{secao.id}/", {"permitir_comentarios_facebook": True}
        )

        assert response.status_code == 200
