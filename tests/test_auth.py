"""
Testes de registro, login, logout e usuário autenticado
"""

import pytest

from accounts.models import User
from accounts.tokens import emitir_tokens


@pytest.mark.django_db
class TestRegistro:
    url = "/api/auth/register/"

    def test_registro_retorna_tokens(self, api_client):
        """Registro cria o usuário e devolve access/refresh token"""
        response = api_client.post(
            self.url, {"nome": "Ana", "email": "ana@teste.com", "password": "segredo123"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["token_type"] == "Bearer"
        assert body["data"]["access_token"]
        assert User.objects.filter(email="ana@teste.com").exists()

    def test_email_duplicado(self, api_client, usuario):
        response = api_client.post(
            self.url, {"nome": "Outro", "email": usuario.email, "password": "segredo123"}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["errors"]["email"] == ["Este e-mail já está em uso."]

    def test_senha_curta(self, api_client):
        response = api_client.post(
            self.url, {"nome": "Ana", "email": "ana@teste.com", "password": "123"}
        )

        assert response.status_code == 422
        assert "password" in response.json()["errors"]


@pytest.mark.django_db
class TestLogin:
    url = "/api/auth/login/"

    def test_login_valido(self, api_client, usuario):
        response = api_client.post(self.url, {"email": usuario.email, "password": "segredo123"})

        assert response.status_code == 200
        assert response.json()["data"]["access_token"]

    def test_credenciais_invalidas(self, api_client, usuario):
        response = api_client.post(self.url, {"email": usuario.email, "password": "errada"})

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Credenciais inválidas."


@pytest.mark.django_db
class TestSessao:
    def test_usuario_autenticado(self, cliente, usuario, loja):
        response = cliente.get("/api/auth/user/")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["email"] == usuario.email
        assert data["loja_id"] == loja.id

    def test_sem_token(self, api_client):
        response = api_client.get("/api/auth/user/")

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Não autorizado."}

    def test_logout_revoga_token(self, cliente):
        """Depois do logout o mesmo token deixa de ser aceito"""
        response = cliente.post("/api/auth/logout/")
        assert response.status_code == 200
        assert response.json()["message"] == "Logout realizado com sucesso."

        response = cliente.get("/api/auth/user/")
        assert response.status_code == 401

    def test_novo_login_apos_logout(self, cliente, api_client, usuario):
        cliente.post("/api/auth/logout/")

        login = api_client.post(
            "/api/auth/login/", {"email": usuario.email, "password": "segredo123"}
        )
        token = login.json()["data"]["access_token"]
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        assert api_client.get("/api/auth/user/").status_code == 200


@pytest.mark.django_db
class TestRefresh:
    url = "/api/auth/refresh/"

    def test_renova_access_token(self, api_client, usuario):
        tokens = emitir_tokens(usuario)

        response = api_client.post(self.url, {"refresh": tokens["refresh_token"]})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["token_type"] == "Bearer"

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {body['data']['access_token']}")
        assert api_client.get("/api/auth/user/").status_code == 200

    def test_refresh_emitido_antes_do_logout(self, api_client, usuario):
        """O refresh token anterior ao logout não gera novos access tokens"""
        tokens = emitir_tokens(usuario)
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access_token']}")
        assert api_client.post("/api/auth/logout/").status_code == 200
        api_client.credentials()

        response = api_client.post(self.url, {"refresh": tokens["refresh_token"]})

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Token inválido."}

    def test_refresh_malformado(self, api_client):
        response = api_client.post(self.url, {"refresh": "nao-e-um-jwt"})

        assert response.status_code == 401
        assert response.json()["success"] is False
