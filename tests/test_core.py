"""
Testes de infraestrutura: health check e tratamento de erros
"""

import pytest
from rest_framework.test import APIRequestFactory

from core.exceptions import envelope_exception_handler
from lojas.views import DominioListCreateView


@pytest.mark.django_db
def test_health_check(api_client):
    response = api_client.get("/api/health/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


class TestEnvelopeDeErros:
    def test_erro_inesperado_nao_vaza_detalhes(self):
        request = APIRequestFactory().get("/api/dominios/")
        context = {"view": DominioListCreateView(), "request": request}

        response = envelope_exception_handler(RuntimeError("senha do banco: 123"), context)

        assert response.status_code == 500
        assert response.data == {"success": False, "message": "Erro interno do servidor."}

    @pytest.mark.django_db
    def test_rota_inexistente_na_api(self, cliente):
        response = cliente.get("/api/dominios/999/")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_documentacao_da_api(self, api_client, db):
        response = api_client.get("/api/schema/")

        assert response.status_code == 200
