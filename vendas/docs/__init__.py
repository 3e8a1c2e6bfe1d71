"""
Documentação das rotas do módulo de vendas.
"""

from .pedido import (
    descontos_create_schema,
    pedidos_create_schema,
    pedidos_list_schema,
    pedidos_status_schema,
)

__all__ = [
    "descontos_create_schema",
    "pedidos_create_schema",
    "pedidos_list_schema",
    "pedidos_status_schema",
]
