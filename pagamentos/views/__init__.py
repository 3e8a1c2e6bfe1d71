"""
Views do módulo de pagamentos
"""

from .meio_pagamento import (
    FormaPagamentoDetailView,
    FormaPagamentoListCreateView,
    MeioPagamentoDetailView,
    MeioPagamentoListCreateView,
)
from .transacao import TransacaoPagamentoDetailView, TransacaoPagamentoListCreateView

__all__ = [
    "FormaPagamentoDetailView",
    "FormaPagamentoListCreateView",
    "MeioPagamentoDetailView",
    "MeioPagamentoListCreateView",
    "TransacaoPagamentoDetailView",
    "TransacaoPagamentoListCreateView",
]
