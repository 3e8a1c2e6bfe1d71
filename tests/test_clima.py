"""
Testes do proxy de clima (a API externa é sempre simulada)
"""

import pytest
import requests

URL = "/api/clima/"

PAYLOAD_LUANDA = {
    "name": "Luanda",
    "main": {"temp": 27.4, "humidity": 78},
    "weather": [{"description": "nuvens dispersas"}],
}


class RespostaFalsa:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code}", response=self)


@pytest.fixture
def chave(settings):
    settings.OPENWEATHER_API_KEY = "chave-teste"


class TestClima:
    def test_retorna_clima(self, api_client, chave, monkeypatch):
        chamadas = []

        def get_falso(url, params=None, timeout=None):
            chamadas.append(params)
            return RespostaFalsa(PAYLOAD_LUANDA)

        monkeypatch.setattr("clima.services.requests.get", get_falso)

        response = api_client.get(URL, {"cidade": "Luanda"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Clima obtido com sucesso.",
            "data": {
                "cidade": "Luanda",
                "temperatura": 27.4,
                "umidade": 78,
                "descricao": "nuvens dispersas",
            },
        }
        assert chamadas[0]["units"] == "metric"
        assert chamadas[0]["lang"] == "pt_br"
        assert chamadas[0]["appid"] == "chave-teste"

    def test_cidade_curta(self, api_client, chave):
        response = api_client.get(URL, {"cidade": "L"})

        assert response.status_code == 422
        assert response.json()["errors"]["cidade"] == ["A cidade deve ter pelo menos 2 caracteres."]

    def test_cidade_ausente(self, api_client, chave):
        response = api_client.get(URL)

        assert response.status_code == 422
        assert "cidade" in response.json()["errors"]

    def test_sem_chave_configurada(self, api_client):
        response = api_client.get(URL, {"cidade": "Luanda"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Chave da API não configurada."}

    def test_timeout(self, api_client, chave, monkeypatch):
        def get_falso(*args, **kwargs):
            raise requests.exceptions.Timeout("lento")

        monkeypatch.setattr("clima.services.requests.get", get_falso)

        response = api_client.get(URL, {"cidade": "Luanda"})

        assert response.status_code == 504
        assert response.json()["success"] is False

    def test_falha_de_conexao(self, api_client, chave, monkeypatch):
        def get_falso(*args, **kwargs):
            raise requests.exceptions.ConnectionError("offline")

        monkeypatch.setattr("clima.services.requests.get", get_falso)

        assert api_client.get(URL, {"cidade": "Luanda"}).status_code == 503

    def test_cidade_nao_encontrada(self, api_client, chave, monkeypatch):
        monkeypatch.setattr(
            "clima.services.requests.get",
            lambda *args, **kwargs: RespostaFalsa({"cod": "404", "message": "city not found"}, 404),
        )

        response = api_client.get(URL, {"cidade": "Atlantida"})

        assert response.status_code == 404
        assert response.json()["message"] == "Erro da API: city not found"

    def test_corpo_de_erro_que_nao_e_objeto(self, api_client, chave, monkeypatch):
        monkeypatch.setattr(
            "clima.services.requests.get",
            lambda *args, **kwargs: RespostaFalsa(["erro interno"], 500),
        )

        response = api_client.get(URL, {"cidade": "Luanda"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Erro da API: Falha ao obter dados climáticos",
        }

    def test_resposta_inesperada(self, api_client, chave, monkeypatch):
        monkeypatch.setattr(
            "clima.services.requests.get", lambda *args, **kwargs: RespostaFalsa({"name": "X"})
        )

        assert api_client.get(URL, {"cidade": "Luanda"}).status_code == 502
