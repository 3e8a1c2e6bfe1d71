"""
Emissão de tokens JWT com a versão de token do usuário
"""

from rest_framework_simplejwt.tokens import RefreshToken

CLAIM_VERSAO_TOKEN = "versao_token"


def emitir_tokens(user):
    """
    Gera o par refresh/access para o usuário.

    A versão atual do usuário vai como claim; o access token herda a claim do refresh.
    """
    refresh = RefreshToken.for_user(user)
    refresh[CLAIM_VERSAO_TOKEN] = user.versao_token
    return {
        "access_token": str(refresh.access_token),
        "refresh_token": str(refresh),
        "token_type": "Bearer",
    }
