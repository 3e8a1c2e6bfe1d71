"""
Serializers do módulo accounts
"""

from .auth import (
    LoginSerializer,
    RefreshSerializer,
    RegisterSerializer,
    TokenResponseSerializer,
)
from .user import UserSerializer

__all__ = [
    "LoginSerializer",
    "RefreshSerializer",
    "RegisterSerializer",
    "TokenResponseSerializer",
    "UserSerializer",
]
