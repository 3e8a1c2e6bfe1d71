"""
Serializers do módulo de lojas
"""

from .loja import LojaSerializer
from .configuracoes import (
    CheckoutSerializer,
    DominioSerializer,
    EmailSerializer,
    IdiomaSerializer,
    MoedaSerializer,
    PontoLevantamentoSerializer,
    RedirecionamentoSerializer,
)

__all__ = [
    "LojaSerializer",
    "CheckoutSerializer",
    "DominioSerializer",
    "EmailSerializer",
    "IdiomaSerializer",
    "MoedaSerializer",
    "PontoLevantamentoSerializer",
    "RedirecionamentoSerializer",
]
