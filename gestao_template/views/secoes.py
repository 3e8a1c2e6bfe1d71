"""
Views genéricas para as seções de um template.

As rotas ficam em /templates/<template_id>/<seção>/ e cada view é instanciada
com o modelo e o serializer da seção (ver gestao_template.secoes).
"""

import logging

from rest_framework.exceptions import NotFound

from core.views import RecursoLojaDetailView, RecursoLojaListCreateView
from ..models import Template

logger = logging.getLogger(__name__)


class TemplateDaLojaMixin:
    """Resolve o template da URL dentro da loja do usuário"""

    def get_template(self):
        if not hasattr(self, "_template"):
            self._template = Template.objects.filter(
                pk=self.kwargs["template_id"], loja_id=self.request.user.loja_id
            ).first()
            if self._template is None:
                raise NotFound("Template não encontrado.")
        return self._template

    def get_queryset(self):
        queryset = super().get_queryset()
        if getattr(self, "swagger_fake_view", False):
            return queryset
        return queryset.filter(template=self.get_template())


class SecaoListCreateView(TemplateDaLojaMixin, RecursoLojaListCreateView):
    def perform_create(self, serializer):
        template = self.get_template()
        serializer.save(loja=self.request.user.loja, template=template)
        logger.info(
            f"{self.queryset.model.__name__} criado no template {template.pk} "
            f"(loja_id={template.loja_id})"
        )


class SecaoDetailView(TemplateDaLojaMixin, RecursoLojaDetailView):
    pass
