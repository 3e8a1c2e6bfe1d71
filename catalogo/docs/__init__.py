"""
Documentação das rotas do catálogo.
"""

from .produto import (
    produtos_create_schema,
    produtos_estoque_schema,
    produtos_exportar_csv_schema,
    produtos_list_schema,
)

__all__ = [
    "produtos_create_schema",
    "produtos_estoque_schema",
    "produtos_exportar_csv_schema",
    "produtos_list_schema",
]
