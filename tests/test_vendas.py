"""
Testes de vendas: descontos, clientes, endereços e pedidos
"""

from decimal import Decimal

import pytest

from vendas.models import Cliente, Desconto, Endereco, ItemPedido, Pedido
from .conftest import criar_produto


@pytest.mark.django_db
class TestDescontos:
    url = "/api/descontos/"
    dados = {
        "codigo": "DESC10",
        "tipo": "percentagem",
        "valor": "10",
        "data_inicio": "2025-01-01",
        "data_fim": "2025-12-31",
        "status": "ativo",
    }

    def test_cria_desconto(self, cliente, loja):
        response = cliente.post(self.url, self.dados)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Desconto criado com sucesso."
        assert body["data"]["loja_id"] == loja.id
        assert body["data"]["codigo"] == "DESC10"

    def test_codigo_repetido_na_mesma_loja(self, cliente, cliente_outra_loja):
        assert cliente.post(self.url, self.dados).status_code == 201

        repetido = cliente.post(self.url, self.dados)
        assert repetido.status_code == 422
        assert repetido.json()["errors"]["codigo"] == ["O código já está em uso."]

        # Outra loja pode usar o mesmo código
        assert cliente_outra_loja.post(self.url, self.dados).status_code == 201
        assert Desconto.objects.filter(codigo="DESC10").count() == 2

    def test_percentagem_acima_de_100(self, cliente):
        response = cliente.post(self.url, {**self.dados, "valor": "150"})

        assert response.status_code == 422
        assert response.json()["errors"]["valor"] == ["A percentagem não pode ser maior que 100."]

    def test_valor_fixo_acima_de_100(self, cliente):
        response = cliente.post(self.url, {**self.dados, "tipo": "dinheiro", "valor": "150"})

        assert response.status_code == 201

    def test_data_fim_anterior(self, cliente):
        response = cliente.post(
            self.url, {**self.dados, "data_inicio": "2025-06-01", "data_fim": "2025-05-01"}
        )

        assert response.status_code == 422
        assert "data_fim" in response.json()["errors"]

    def test_data_em_formato_invalido(self, cliente):
        response = cliente.post(self.url, {**self.dados, "data_inicio": "01/06/2025"})

        assert response.status_code == 422
        assert "data_inicio" in response.json()["errors"]

    def test_atualizacao_parcial_compara_com_valores_gravados(self, cliente):
        criado = cliente.post(self.url, self.dados).json()["data"]

        response = cliente.patch(f"{self.url}{criado['id']}/", {"data_fim": "2024-12-31"})

        assert response.status_code == 422

    def test_filtro_por_codigo(self, cliente):
        cliente.post(self.url, self.dados)
        cliente.post(self.url, {**self.dados, "codigo": "FRETE"})

        data = cliente.get(self.url, {"codigo": "desc10"}).json()["data"]

        assert [d["codigo"] for d in data] == ["DESC10"]


@pytest.mark.django_db
class TestEnderecos:
    url = "/api/enderecos/"
    dados = {"estado": "SP", "cidade": "São Paulo", "bairro": "Centro", "rua": "Rua A", "numero": "10"}

    def test_endereco_pertence_ao_usuario(self, cliente, usuario):
        response = cliente.post(self.url, self.dados)

        assert response.status_code == 201
        assert response.json()["data"]["usuario_id"] == usuario.id

    def test_usuario_sem_loja_gerencia_enderecos(self, cliente_sem_loja):
        assert cliente_sem_loja.post(self.url, self.dados).status_code == 201
        assert len(cliente_sem_loja.get(self.url).json()["data"]) == 1

    def test_endereco_de_outro_usuario(self, cliente, outra_loja):
        alheio = Endereco.objects.create(usuario=outra_loja.usuarios.get(), **self.dados)

        assert cliente.get(f"{self.url}{alheio.id}/").status_code == 404
        assert cliente.get(self.url).json()["data"] == []


@pytest.mark.django_db
class TestClientes:
    def test_cliente_com_endereco_de_outro_usuario(self, cliente, outra_loja):
        alheio = Endereco.objects.create(
            usuario=outra_loja.usuarios.get(), estado="RJ", cidade="Rio", bairro="B", rua="R", numero="1"
        )

        response = cliente.post("/api/clientes/", {"nome": "João", "endereco_id": alheio.id})

        assert response.status_code == 422
        assert "endereco_id" in response.json()["errors"]

    def test_usuario_de_outra_loja(self, cliente, outra_loja):
        response = cliente.post(
            "/api/clientes/", {"nome": "João", "user_id": outra_loja.usuarios.get().id}
        )

        assert response.status_code == 422
        assert response.json()["errors"]["user_id"] == ["Este usuário não pertence à sua loja."]
        assert not Cliente.objects.exists()

    def test_usuario_da_propria_loja(self, cliente, usuario):
        response = cliente.post("/api/clientes/", {"nome": "João", "user_id": usuario.id})

        assert response.status_code == 201
        assert response.json()["data"]["user_id"] == usuario.id

    def test_lista_apenas_clientes_da_loja(self, cliente, loja, outra_loja):
        Cliente.objects.create(loja=loja, nome="Maria")
        Cliente.objects.create(loja=outra_loja, nome="Pedro")

        data = cliente.get("/api/clientes/").json()["data"]

        assert [c["nome"] for c in data] == ["Maria"]


@pytest.mark.django_db
class TestPedidos:
    url = "/api/pedidos/"

    def itens(self, produto):
        return [
            {"produto_id": produto.id, "quantidade": 2, "preco_unitario": "25.00"},
            {"produto_id": produto.id, "quantidade": 1, "preco_unitario": "10.00"},
        ]

    def test_cria_pedido_com_itens(self, cliente, loja, produto):
        response = cliente.post(
            self.url,
            {"itens": self.itens(produto), "valor_desconto": "5.00", "frete": "7.50"},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "pendente"
        assert data["valor_total"] == "62.50"
        assert data["codigo_unico_pedido"]
        assert [item["subtotal"] for item in data["itens"]] == ["50.00", "10.00"]

        pedido = Pedido.objects.get(pk=data["id"])
        assert pedido.loja_id == loja.id
        assert pedido.itens.count() == 2

    def test_valor_total_informado(self, cliente, produto):
        response = cliente.post(
            self.url, {"itens": self.itens(produto), "valor_total": "55.00"}
        )

        assert response.json()["data"]["valor_total"] == "55.00"

    def test_desconto_maior_que_o_total(self, cliente, produto):
        """O total calculado nunca fica negativo"""
        response = cliente.post(
            self.url,
            {
                "itens": [{"produto_id": produto.id, "quantidade": 1, "preco_unitario": "10.00"}],
                "valor_desconto": "20.00",
            },
        )

        assert response.status_code == 422
        assert "valor_desconto" in response.json()["errors"]
        assert not Pedido.objects.exists()

    def test_desconto_igual_ao_total(self, cliente, produto):
        response = cliente.post(
            self.url,
            {
                "itens": [{"produto_id": produto.id, "quantidade": 1, "preco_unitario": "10.00"}],
                "valor_desconto": "15.00",
                "frete": "5.00",
            },
        )

        assert response.status_code == 201
        assert response.json()["data"]["valor_total"] == "0.00"

    def test_sem_itens(self, cliente):
        response = cliente.post(self.url, {"valor_total": "10.00"})

        assert response.status_code == 422
        assert response.json()["errors"]["itens"] == ["Este campo é obrigatório."]

    def test_lista_de_itens_vazia(self, cliente):
        response = cliente.post(self.url, {"itens": []})

        assert response.status_code == 422
        assert "itens" in response.json()["errors"]
        assert not Pedido.objects.exists()

    def test_item_com_produto_de_outra_loja(self, cliente, produto, outra_loja):
        alheio = criar_produto(outra_loja)
        itens = self.itens(produto) + [
            {"produto_id": alheio.id, "quantidade": 1, "preco_unitario": "1.00"}
        ]

        response = cliente.post(self.url, {"itens": itens})

        assert response.status_code == 422
        assert response.json()["errors"]["itens"][2]["produto_id"] == [
            "Este produto não pertence à sua loja."
        ]
        assert not Pedido.objects.exists()
        assert not ItemPedido.objects.exists()

    def test_quantidade_minima(self, cliente, produto):
        itens = [{"produto_id": produto.id, "quantidade": 0, "preco_unitario": "1.00"}]

        response = cliente.post(self.url, {"itens": itens})

        assert response.status_code == 422

    def test_itens_nao_podem_ser_alterados(self, cliente, produto):
        criado = cliente.post(self.url, {"itens": self.itens(produto)}).json()["data"]

        response = cliente.put(f"{self.url}{criado['id']}/", {"itens": self.itens(produto)})
        assert response.status_code == 422
        assert response.json()["errors"]["itens"] == [
            "Os itens de um pedido não podem ser alterados."
        ]

        response = cliente.put(f"{self.url}{criado['id']}/", {"observacoes": "Entregar à tarde"})
        assert response.status_code == 200
        assert response.json()["data"]["observacoes"] == "Entregar à tarde"

    def test_atualiza_status(self, cliente, produto):
        criado = cliente.post(self.url, {"itens": self.itens(produto)}).json()["data"]

        response = cliente.patch(f"{self.url}{criado['id']}/status/", {"status": "enviado"})

        assert response.status_code == 200
        assert response.json()["message"] == "Status do pedido atualizado com sucesso."
        assert response.json()["data"]["status"] == "enviado"

    def test_status_invalido(self, cliente, produto):
        criado = cliente.post(self.url, {"itens": self.itens(produto)}).json()["data"]

        response = cliente.patch(f"{self.url}{criado['id']}/status/", {"status": "perdido"})

        assert response.status_code == 422
        assert response.json()["errors"]["status"] == [
            '"perdido" não é um status de pedido válido.'
        ]

    def test_remocao_de_pedido_com_itens(self, cliente, produto):
        criado = cliente.post(self.url, {"itens": self.itens(produto)}).json()["data"]

        response = cliente.delete(f"{self.url}{criado['id']}/")

        assert response.status_code == 422
        assert response.json()["message"] == "Não é possível remover o pedido devido a dependências."
        assert Pedido.objects.filter(pk=criado["id"]).exists()

    def test_remocao_de_pedido_sem_itens(self, cliente, loja):
        pedido = Pedido.objects.create(loja=loja, valor_total=Decimal("0"))

        response = cliente.delete(f"{self.url}{pedido.id}/")

        assert response.status_code == 200
        assert response.json()["message"] == "Pedido removido com sucesso."

    def test_produto_com_pedido_nao_pode_ser_removido(self, cliente, produto):
        cliente.post(self.url, {"itens": self.itens(produto)})

        response = cliente.delete(f"/api/produtos/{produto.id}/")

        assert response.status_code == 422

    def test_filtro_por_status(self, cliente, loja):
        Pedido.objects.create(loja=loja, valor_total=Decimal("10"), status="pago")
        Pedido.objects.create(loja=loja, valor_total=Decimal("20"), status="cancelado")

        data = cliente.get(self.url, {"status": "pago"}).json()["data"]

        assert [p["status"] for p in data] == ["pago"]

    def test_pedido_de_outra_loja(self, cliente, outra_loja):
        pedido = Pedido.objects.create(loja=outra_loja, valor_total=Decimal("10"))

        assert cliente.get(f"{self.url}{pedido.id}/").status_code == 404
        assert cliente.patch(f"{self.url}{pedido.id}/status/", {"status": "pago"}).status_code == 404
