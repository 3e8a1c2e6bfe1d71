"""
Views para templates
"""

from core.views import RecursoLojaDetailView, RecursoLojaListCreateView
from ..models import Template
from ..serializers import TemplateSerializer


class TemplateListCreateView(RecursoLojaListCreateView):
    queryset = Template.objects.all()
    serializer_class = TemplateSerializer


class TemplateDetailView(RecursoLojaDetailView):
    queryset = Template.objects.all()
    serializer_class = TemplateSerializer
