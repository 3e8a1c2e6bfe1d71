"""
Documentação das rotas do módulo de lojas.
"""

from .loja import lojas_create_schema, lojas_list_schema

__all__ = [
    "lojas_create_schema",
    "lojas_list_schema",
]
