"""
Testes de meios, formas e transações de pagamento
"""

from decimal import Decimal

import pytest
from django.core.files.storage import default_storage

from pagamentos.models import FormaPagamento, MeioPagamento, TransacaoPagamento
from vendas.models import Pedido


@pytest.fixture
def meio(loja):
    return MeioPagamento.objects.create(loja=loja, nome="Multicaixa")


@pytest.fixture
def forma(loja, meio):
    return FormaPagamento.objects.create(loja=loja, meio_pagamento=meio, dados_conta="IBAN 0001")


@pytest.mark.django_db
class TestMeiosPagamento:
    url = "/api/meios-pagamento/"

    def test_cria_com_logo(self, cliente, loja, imagem):
        response = cliente.post(
            self.url, {"nome": "PayPal", "logo": imagem("paypal.png")}, format="multipart"
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Meio de pagamento criado com sucesso."
        meio = MeioPagamento.objects.get(nome="PayPal")
        assert meio.logo.name.startswith(f"{loja.pasta}/assets/meiosPagamento/logos/paypal-")
        assert default_storage.exists(meio.logo.name)

    def test_nome_repetido(self, cliente, meio):
        response = cliente.post(self.url, {"nome": meio.nome})

        assert response.status_code == 422
        assert response.json()["errors"]["nome"] == ["Este meio de pagamento já está cadastrado."]

    def test_lista_formas_aninhadas(self, cliente, meio, forma):
        data = cliente.get(f"{self.url}{meio.id}/").json()["data"]

        assert [f["id"] for f in data["formas_pagamento"]] == [forma.id]

    def test_troca_de_logo_remove_arquivo_anterior(self, cliente, imagem):
        criado = cliente.post(
            self.url, {"nome": "PIX", "logo": imagem("antigo.png")}, format="multipart"
        ).json()["data"]
        antigo = MeioPagamento.objects.get(pk=criado["id"]).logo.name

        response = cliente.patch(
            f"{self.url}{criado['id']}/", {"logo": imagem("novo.png")}, format="multipart"
        )

        assert response.status_code == 200
        novo = MeioPagamento.objects.get(pk=criado["id"]).logo.name
        assert novo != antigo
        assert default_storage.exists(novo)
        assert not default_storage.exists(antigo)

    def test_remocao_bloqueada_por_formas(self, cliente, meio, forma):
        response = cliente.delete(f"{self.url}{meio.id}/")

        assert response.status_code == 422
        assert MeioPagamento.objects.filter(pk=meio.id).exists()

    def test_remocao_apaga_logo(self, cliente, imagem):
        criado = cliente.post(
            self.url, {"nome": "Visa", "logo": imagem("visa.png")}, format="multipart"
        ).json()["data"]
        caminho = MeioPagamento.objects.get(pk=criado["id"]).logo.name

        response = cliente.delete(f"{self.url}{criado['id']}/")

        assert response.status_code == 200
        assert response.json()["message"] == "Meio de pagamento removido com sucesso."
        assert not default_storage.exists(caminho)


@pytest.mark.django_db
class TestFormasPagamento:
    url = "/api/formas-pagamento/"

    def test_cria_forma(self, cliente, meio):
        response = cliente.post(self.url, {"meio_pagamento_id": meio.id, "dados_conta": "Conta 123"})

        assert response.status_code == 201
        assert response.json()["message"] == "Forma de pagamento criada com sucesso."

    def test_meio_de_outra_loja(self, cliente, outra_loja):
        alheio = MeioPagamento.objects.create(loja=outra_loja, nome="Alheio")

        response = cliente.post(self.url, {"meio_pagamento_id": alheio.id, "dados_conta": "x"})

        assert response.status_code == 422
        assert "meio_pagamento_id" in response.json()["errors"]


@pytest.mark.django_db
class TestTransacoes:
    url = "/api/transacoes/"

    def test_registra_transacao(self, cliente, loja, forma):
        pedido = Pedido.objects.create(loja=loja, valor_total=Decimal("80.00"))

        response = cliente.post(
            self.url,
            {"pedido_id": pedido.id, "metodo_pagamento_id": forma.id, "valor_total": "80.00"},
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Transação de pagamento criada com sucesso."
        assert TransacaoPagamento.objects.get().loja_id == loja.id

    def test_pedido_de_outra_loja(self, cliente, forma, outra_loja):
        pedido = Pedido.objects.create(loja=outra_loja, valor_total=Decimal("10.00"))

        response = cliente.post(
            self.url,
            {"pedido_id": pedido.id, "metodo_pagamento_id": forma.id, "valor_total": "10.00"},
        )

        assert response.status_code == 422
        assert "pedido_id" in response.json()["errors"]
        assert not TransacaoPagamento.objects.exists()

    def test_forma_com_transacoes_nao_pode_ser_removida(self, cliente, loja, forma):
        pedido = Pedido.objects.create(loja=loja, valor_total=Decimal("10.00"))
        TransacaoPagamento.objects.create(
            loja=loja, pedido=pedido, metodo_pagamento=forma, valor_total=Decimal("10.00")
        )

        response = cliente.delete(f"/api/formas-pagamento/{forma.id}/")

        assert response.status_code == 422
        assert response.json()["message"] == (
            "Não é possível remover a forma de pagamento devido a dependências."
        )
