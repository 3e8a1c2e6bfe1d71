"""
Documentação das rotas de autenticação.
"""

from drf_spectacular.utils import (
    extend_schema,
    OpenApiResponse,
    OpenApiExample,
)
from ..serializers import LoginSerializer, RefreshSerializer, RegisterSerializer, UserSerializer


EXEMPLO_TOKENS = {
    "success": True,
    "message": "Login realizado com sucesso.",
    "data": {
        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
        "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
        "token_type": "Bearer",
    },
}


register_schema = extend_schema(
    operation_id="auth_register",
    tags=["auth"],
    summary="Registrar usuário",
    description="""
    Cria um novo usuário e já retorna os tokens de acesso.

    **Campos:**
    - `nome`: obrigatório
    - `email`: obrigatório e único
    - `password`: mínimo de 6 caracteres
    """,
    request=RegisterSerializer,
    responses={
        201: OpenApiResponse(
            description="Usuário registrado com sucesso",
            examples=[OpenApiExample(name="Registro", value=EXEMPLO_TOKENS)],
        ),
        422: OpenApiResponse(description="Erro de validação"),
    },
)


login_schema = extend_schema(
    operation_id="auth_login",
    tags=["auth"],
    summary="Login",
    description="Autentica com e-mail e senha e retorna o par de tokens JWT.",
    request=LoginSerializer,
    responses={
        200: OpenApiResponse(
            description="Login realizado com sucesso",
            examples=[OpenApiExample(name="Login", value=EXEMPLO_TOKENS)],
        ),
        401: OpenApiResponse(
            description="Credenciais inválidas",
            examples=[
                OpenApiExample(
                    name="Credenciais inválidas",
                    value={
                        "success": False,
                        "message": "Credenciais inválidas.",
                        "errors": {
                            "email": ["As credenciais fornecidas estão incorretas."]
                        },
                    },
                )
            ],
        ),
    },
)


refresh_schema = extend_schema(
    operation_id="auth_refresh",
    tags=["auth"],
    summary="Renovar access token",
    description="Gera um novo access token. Refresh tokens emitidos antes do último logout são recusados.",
    request=RefreshSerializer,
    responses={
        200: OpenApiResponse(
            description="Token renovado com sucesso",
            examples=[
                OpenApiExample(
                    name="Refresh",
                    value={
                        "success": True,
                        "message": "Token renovado com sucesso.",
                        "data": {
                            "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "token_type": "Bearer",
                        },
                    },
                )
            ],
        ),
        401: OpenApiResponse(description="Token inválido ou revogado"),
    },
)

logout_schema = extend_schema(
    operation_id="auth_logout",
    tags=["auth"],
    summary="Logout",
    description="Revoga todos os tokens emitidos para o usuário autenticado.",
    request=None,
    responses={
        200: OpenApiResponse(description="Logout realizado com sucesso"),
        401: OpenApiResponse(description="Não autorizado"),
    },
)


user_schema = extend_schema(
    operation_id="auth_user",
    tags=["auth"],
    summary="Usuário autenticado",
    description="Retorna os dados do usuário dono do token.",
    responses={
        200: OpenApiResponse(
            response=UserSerializer,
            description="Usuário autenticado recuperado com sucesso",
        ),
        401: OpenApiResponse(description="Não autorizado"),
    },
)
