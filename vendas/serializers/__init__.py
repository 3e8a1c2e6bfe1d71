"""
Serializers do módulo de vendas
"""

from .cliente import ClienteSerializer, EnderecoSerializer
from .desconto import DescontoSerializer
from .pedido import ItemPedidoSerializer, PedidoSerializer, PedidoStatusSerializer

__all__ = [
    "ClienteSerializer",
    "EnderecoSerializer",
    "DescontoSerializer",
    "ItemPedidoSerializer",
    "PedidoSerializer",
    "PedidoStatusSerializer",
]
