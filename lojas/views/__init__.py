"""
Views do módulo de lojas
"""

from .loja import LojaListCreateView, LojaDetailView
from .configuracoes import (
    CheckoutDetailView,
    CheckoutListCreateView,
    DominioDetailView,
    DominioListCreateView,
    EmailDetailView,
    EmailListCreateView,
    IdiomaDetailView,
    IdiomaListCreateView,
    MoedaDetailView,
    MoedaListCreateView,
    PontoLevantamentoDetailView,
    PontoLevantamentoListCreateView,
    RedirecionamentoDetailView,
    RedirecionamentoListCreateView,
)

__all__ = [
    "LojaListCreateView",
    "LojaDetailView",
    "CheckoutDetailView",
    "CheckoutListCreateView",
    "DominioDetailView",
    "DominioListCreateView",
    "EmailDetailView",
    "EmailListCreateView",
    "IdiomaDetailView",
    "IdiomaListCreateView",
    "MoedaDetailView",
    "MoedaListCreateView",
    "PontoLevantamentoDetailView",
    "PontoLevantamentoListCreateView",
    "RedirecionamentoDetailView",
    "RedirecionamentoListCreateView",
]
