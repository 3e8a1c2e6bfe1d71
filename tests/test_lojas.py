"""
Testes da loja e das configurações da loja
"""

import os
import re
from decimal import Decimal

import pytest

from accounts.models import User
from catalogo.models import Produto
from lojas.models import Dominio, Idioma, Loja, Moeda
from lojas.utils import gerar_pasta_loja
from pagamentos.models import FormaPagamento, MeioPagamento, TransacaoPagamento
from vendas.models import ItemPedido, Pedido
from .conftest import criar_produto


@pytest.mark.django_db
class TestCriacaoLoja:
    url = "/api/lojas/"

    def test_cria_loja_e_vincula_usuario(self, api_client, media_root):
        user = User.objects.create_user(email="novo@teste.com", password="segredo123", nome="Novo")
        api_client.force_authenticate(user=user)

        response = api_client.post(
            self.url, {"nome": "Loja Nova", "email": "loja@nova.com", "cor": "#FF0000"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Loja criada com sucesso."
        loja = Loja.objects.get(pk=body["data"]["loja_id"])
        user.refresh_from_db()
        assert user.loja_id == loja.id
        assert loja.pasta.startswith("loja_Loja_Nova_")
        assert os.path.isdir(media_root / loja.pasta / "assets" / "gestaoTemplate" / "anuncios")

    def test_usuario_com_loja_nao_cria_outra(self, cliente):
        response = cliente.post(self.url, {"nome": "Segunda", "email": "segunda@loja.com"})

        assert response.status_code == 422
        assert response.json()["errors"]["loja"] == ["Usuário já possui loja associada."]

    def test_cor_invalida(self, cliente_sem_loja):
        response = cliente_sem_loja.post(
            self.url, {"nome": "Loja", "email": "x@loja.com", "cor": "vermelho"}
        )

        assert response.status_code == 422
        assert "cor" in response.json()["errors"]

    def test_email_em_uso(self, cliente_sem_loja, loja):
        response = cliente_sem_loja.post(self.url, {"nome": "Loja", "email": loja.email})

        assert response.status_code == 422
        assert response.json()["errors"]["email"] == ["Este e-mail já está em uso por outra loja."]

    def test_falha_ao_criar_pastas_desfaz_a_loja(self, api_client, media_root, monkeypatch):
        """Sem a árvore de pastas a loja não é gravada e o usuário continua sem loja"""
        user = User.objects.create_user(email="novo@teste.com", password="segredo123", nome="Novo")
        api_client.force_authenticate(user=user)

        def sem_espaco(pasta):
            os.makedirs(media_root / pasta / "assets")
            raise OSError("disco cheio")

        monkeypatch.setattr("lojas.views.loja.criar_estrutura_pastas", sem_espaco)

        response = api_client.post(self.url, {"nome": "Loja Nova", "email": "loja@nova.com"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Erro interno do servidor."}
        assert Loja.objects.count() == 0
        user.refresh_from_db()
        assert user.loja_id is None
        assert not any(nome.startswith("loja_Loja_Nova_") for nome in os.listdir(media_root))


@pytest.mark.django_db
class TestLoja:
    def test_lista_apenas_a_propria_loja(self, cliente, loja, outra_loja):
        response = cliente.get("/api/lojas/")

        assert response.status_code == 200
        ids = [item["id"] for item in response.json()["data"]]
        assert ids == [loja.id]

    def test_loja_de_outro_tenant(self, cliente, outra_loja):
        response = cliente.get(f"/api/lojas/{outra_loja.id}/")

        assert response.status_code == 404
        assert response.json()["message"] == "Loja não encontrada."

    def test_atualiza_loja(self, cliente, loja):
        response = cliente.put(f"/api/lojas/{loja.id}/", {"descricao": "Nova descrição"})

        assert response.status_code == 200
        loja.refresh_from_db()
        assert loja.descricao == "Nova descrição"

    def test_remove_loja_e_pasta(self, cliente, loja, media_root):
        pasta = media_root / loja.pasta
        os.makedirs(pasta / "assets")

        response = cliente.delete(f"/api/lojas/{loja.id}/")

        assert response.status_code == 200
        assert response.json()["message"] == "Loja removida com sucesso."
        assert not Loja.objects.filter(pk=loja.id).exists()
        assert not pasta.exists()

    def test_remove_loja_com_dependentes(self, cliente, loja, usuario):
        """Catálogo, pedidos e pagamentos da loja são removidos junto com ela"""
        produto = criar_produto(loja)
        pedido = Pedido.objects.create(loja=loja, valor_total=Decimal("25.00"))
        ItemPedido.objects.create(
            pedido=pedido, produto=produto, quantidade=1, preco_unitario=Decimal("25.00")
        )
        meio = MeioPagamento.objects.create(loja=loja, nome="Multicaixa")
        forma = FormaPagamento.objects.create(loja=loja, meio_pagamento=meio, dados_conta="IBAN 0001")
        TransacaoPagamento.objects.create(
            loja=loja, pedido=pedido, metodo_pagamento=forma, valor_total=Decimal("25.00")
        )

        response = cliente.delete(f"/api/lojas/{loja.id}/")

        assert response.status_code == 200
        assert not Loja.objects.filter(pk=loja.id).exists()
        assert not Produto.objects.exists()
        assert not Pedido.objects.exists()
        assert not TransacaoPagamento.objects.exists()
        usuario.refresh_from_db()
        assert usuario.loja_id is None


@pytest.mark.django_db
class TestControleDeAcesso:
    def test_usuario_sem_loja(self, cliente_sem_loja):
        response = cliente_sem_loja.get("/api/dominios/")

        assert response.status_code == 403
        assert response.json() == {
            "success": False,
            "message": "Usuário não possui loja associada.",
        }

    def test_sem_autenticacao(self, api_client):
        assert api_client.get("/api/dominios/").status_code == 401

    def test_registro_de_outra_loja_nao_existe(self, cliente, outra_loja):
        dominio = Dominio.objects.create(
            loja=outra_loja, dominio="outra.com", status_dominio="ativo", status_ssl="ativo"
        )

        assert cliente.get(f"/api/dominios/{dominio.id}/").status_code == 404
        assert cliente.delete(f"/api/dominios/{dominio.id}/").status_code == 404
        assert Dominio.objects.filter(pk=dominio.id).exists()

    def test_segunda_remocao_nao_encontra_o_registro(self, cliente, loja):
        dominio = Dominio.objects.create(
            loja=loja, dominio="minhaloja.com", status_dominio="ativo", status_ssl="ativo"
        )

        assert cliente.delete(f"/api/dominios/{dominio.id}/").status_code == 200

        response = cliente.delete(f"/api/dominios/{dominio.id}/")
        assert response.status_code == 404
        assert response.json()["success"] is False


@pytest.mark.django_db
class TestConfiguracoes:
    def test_dominio_unico(self, cliente, outra_loja):
        Dominio.objects.create(
            loja=outra_loja, dominio="usado.com", status_dominio="ativo", status_ssl="ativo"
        )

        response = cliente.post(
            "/api/dominios/",
            {"dominio": "usado.com", "status_dominio": "pendente", "status_ssl": "pendente"},
        )

        assert response.status_code == 422
        assert response.json()["errors"]["dominio"] == ["Este domínio já está em uso."]

    def test_idioma_formato_e_unicidade(self, cliente):
        assert cliente.post("/api/idiomas/", {"codigo_idioma": "pt-BR"}).status_code == 201

        repetido = cliente.post("/api/idiomas/", {"codigo_idioma": "pt-BR"})
        assert repetido.status_code == 422

        invalido = cliente.post("/api/idiomas/", {"codigo_idioma": "portugues"})
        assert invalido.status_code == 422

    def test_idioma_normalizado(self, cliente, loja):
        """Códigos que só diferem em maiúsculas são o mesmo idioma"""
        criado = cliente.post("/api/idiomas/", {"codigo_idioma": "PT-br"})
        assert criado.status_code == 201
        assert criado.json()["data"]["codigo_idioma"] == "pt-BR"

        repetido = cliente.post("/api/idiomas/", {"codigo_idioma": "pt-BR"})
        assert repetido.status_code == 422
        assert "codigo_idioma" in repetido.json()["errors"]
        assert Idioma.objects.filter(loja=loja).count() == 1

        assert cliente.post("/api/idiomas/", {"codigo_idioma": "EN"}).json()["data"]["codigo_idioma"] == "en"

    def test_moeda_padrao_unica(self, cliente, loja):
        dados = {"nome": "Real", "codigo": "BRL", "simbolo": "R$", "taxa_cambio": "1.0000", "padrao": True}
        primeira = cliente.post("/api/moedas/", dados).json()["data"]

        cliente.post(
            "/api/moedas/",
            {"nome": "Dólar", "codigo": "USD", "simbolo": "$", "taxa_cambio": "5.1000", "padrao": True},
        )

        assert Moeda.objects.get(pk=primeira["id"]).padrao is False
        assert Moeda.objects.filter(loja=loja, padrao=True).count() == 1

    def test_redirecionamento_exige_uma_url(self, cliente):
        response = cliente.post("/api/redirecionamentos/", {})

        assert response.status_code == 422
        assert response.json()["errors"]["url"] == [
            "Pelo menos uma das URLs (nova ou antiga) deve ser fornecida."
        ]

    def test_email_tipo_invalido(self, cliente):
        response = cliente.post("/api/emails/", {"tipo": "promocao"})

        assert response.status_code == 422
        assert "tipo" in response.json()["errors"]

    def test_crud_ponto_levantamento(self, cliente, loja):
        criado = cliente.post("/api/pontos-levantamento/", {"nome_local": "Centro", "cidade": "Luanda"})
        assert criado.status_code == 201
        assert criado.json()["data"]["loja_id"] == loja.id
        pk = criado.json()["data"]["id"]

        atualizado = cliente.patch(f"/api/pontos-levantamento/{pk}/", {"bairro": "Maianga"})
        assert atualizado.json()["data"]["bairro"] == "Maianga"

        removido = cliente.delete(f"/api/pontos-levantamento/{pk}/")
        assert removido.status_code == 200
        assert removido.json()["message"] == "Ponto de levantamento removido com sucesso."


class TestPastaLoja:
    def test_nome_da_pasta(self):
        pasta = gerar_pasta_loja("Loja São João!")

        assert re.fullmatch(r"loja_Loja_S_o_Jo_o__[a-z0-9]{13}", pasta)

    def test_sufixo_muda_a_cada_chamada(self):
        assert gerar_pasta_loja("Loja") != gerar_pasta_loja("Loja")
