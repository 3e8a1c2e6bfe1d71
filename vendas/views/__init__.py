"""
Views do módulo de vendas
"""

from .cliente import (
    ClienteDetailView,
    ClienteListCreateView,
    EnderecoDetailView,
    EnderecoListCreateView,
)
from .desconto import DescontoDetailView, DescontoListCreateView
from .pedido import PedidoDetailView, PedidoListCreateView, PedidoStatusView

__all__ = [
    "ClienteDetailView",
    "ClienteListCreateView",
    "EnderecoDetailView",
    "EnderecoListCreateView",
    "DescontoDetailView",
    "DescontoListCreateView",
    "PedidoDetailView",
    "PedidoListCreateView",
    "PedidoStatusView",
]
