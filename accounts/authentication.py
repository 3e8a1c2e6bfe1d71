from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed

from .tokens import CLAIM_VERSAO_TOKEN


class VersionedJWTAuthentication(JWTAuthentication):
    """
    JWTAuthentication que rejeita tokens emitidos antes do último logout.
    """

    def get_user(self, validated_token):
        user = super().get_user(validated_token)
        if validated_token.get(CLAIM_VERSAO_TOKEN) != user.versao_token:
            raise AuthenticationFailed("Token revogado.", code="token_revoked")
        return user
