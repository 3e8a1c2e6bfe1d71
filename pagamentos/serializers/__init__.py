"""
Serializers do módulo de pagamentos
"""

from .meio_pagamento import FormaPagamentoSerializer, MeioPagamentoSerializer
from .transacao import TransacaoPagamentoSerializer

__all__ = [
    "FormaPagamentoSerializer",
    "MeioPagamentoSerializer",
    "TransacaoPagamentoSerializer",
]
