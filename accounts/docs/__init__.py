"""
Documentação das rotas do módulo accounts.
"""

from .auth import login_schema, logout_schema, refresh_schema, register_schema, user_schema

__all__ = [
    "login_schema",
    "logout_schema",
    "refresh_schema",
    "register_schema",
    "user_schema",
]
