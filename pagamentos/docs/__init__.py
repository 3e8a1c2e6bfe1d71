"""
Documentação das rotas do módulo de pagamentos.
"""

from .meio_pagamento import meios_pagamento_create_schema

__all__ = [
    "meios_pagamento_create_schema",
]
