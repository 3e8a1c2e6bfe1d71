"""
Views do módulo accounts
"""

from .auth import LoginView, LogoutView, RefreshView, RegisterView
from .user import UserView

__all__ = [
    "LoginView",
    "LogoutView",
    "RefreshView",
    "RegisterView",
    "UserView",
]
