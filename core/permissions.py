from rest_framework.permissions import BasePermission


class TemLojaAssociada(BasePermission):
    """
    Permite acesso apenas a usuários vinculados a uma loja.
    Deve ser usada depois de IsAuthenticated.
    """

    message = "Usuário não possui loja associada."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.loja_id)
