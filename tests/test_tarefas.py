"""
Testes da API pública de tarefas
"""

import pytest

from tarefas.models import Tarefa

MENSAGEM_STATUS = "O status deve ser pendente, em_andamento ou concluida."


@pytest.mark.django_db
class TestTarefas:
    url = "/api/tarefas/"

    def test_cria_tarefa_sem_autenticacao(self, api_client):
        response = api_client.post(self.url, {"titulo": "Comprar pão"})

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Tarefa criada com sucesso."
        assert body["data"]["status"] == "pendente"

    def test_titulo_obrigatorio(self, api_client):
        response = api_client.post(self.url, {"descricao": "sem título"})

        assert response.status_code == 422
        assert response.json()["errors"]["titulo"] == ["O título é obrigatório."]

    def test_status_invalido(self, api_client):
        response = api_client.post(self.url, {"titulo": "X", "status": "feito"})

        assert response.status_code == 422
        assert response.json()["errors"]["status"] == [MENSAGEM_STATUS]

    def test_lista_com_filtro_opcional(self, api_client):
        Tarefa.objects.create(titulo="A", status="pendente")
        Tarefa.objects.create(titulo="B", status="concluida")

        assert len(api_client.get(self.url).json()["data"]) == 2
        data = api_client.get(self.url, {"status": "concluida"}).json()["data"]
        assert [t["titulo"] for t in data] == ["B"]

    def test_filtrar_exige_status(self, api_client):
        response = api_client.get(f"{self.url}filtrar/")

        assert response.status_code == 422
        assert response.json()["errors"]["status"] == ["O status é obrigatório."]

    def test_filtrar_com_status_invalido(self, api_client):
        response = api_client.get(f"{self.url}filtrar/", {"status": "parada"})

        assert response.status_code == 422
        assert response.json()["errors"]["status"] == [MENSAGEM_STATUS]

    def test_filtrar(self, api_client):
        Tarefa.objects.create(titulo="A", status="em_andamento")
        Tarefa.objects.create(titulo="B", status="pendente")

        response = api_client.get(f"{self.url}filtrar/", {"status": "em_andamento"})

        assert response.status_code == 200
        assert [t["titulo"] for t in response.json()["data"]] == ["A"]

    def test_atualiza_tarefa(self, api_client):
        tarefa = Tarefa.objects.create(titulo="A")

        response = api_client.patch(f"{self.url}{tarefa.id}/", {"status": "concluida"})

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "concluida"

    def test_remove_tarefa(self, api_client):
        tarefa = Tarefa.objects.create(titulo="A")

        response = api_client.delete(f"{self.url}{tarefa.id}/")

        assert response.status_code == 204
        assert not response.content
        assert not Tarefa.objects.exists()

    def test_tarefa_inexistente(self, api_client):
        response = api_client.get(f"{self.url}999/")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Tarefa não encontrada."}
