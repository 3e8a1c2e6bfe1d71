"""
Views do módulo de gestão de template
"""

from .secoes import SecaoDetailView, SecaoListCreateView
from .template import TemplateDetailView, TemplateListCreateView

__all__ = [
    "SecaoDetailView",
    "SecaoListCreateView",
    "TemplateDetailView",
    "TemplateListCreateView",
]
