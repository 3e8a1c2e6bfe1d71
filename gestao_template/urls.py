from django.urls import path
from . import views
from .secoes import SECOES

app_name = "gestao_template"

urlpatterns = [
    path("templates/", views.TemplateListCreateView.as_view(), name="template-list"),
    path("templates/<int:pk>/", views.TemplateDetailView.as_view(), name="template-detail"),
]

# Seções do template
for secao in SECOES:
    opcoes = {
        "queryset": secao.model.objects.all(),
        "serializer_class": secao.serializer_class,
        "genero": secao.genero,
    }
    urlpatterns += [
        path(
            f"templates/<int:template_id>/{secao.rota}/",
            views.SecaoListCreateView.as_view(**opcoes),
            name=f"{secao.rota}-list",
        ),
        path(
            f"templates/<int:template_id>/{secao.rota}/<int:pk>/",
            views.SecaoDetailView.as_view(**opcoes),
            name=f"{secao.rota}-detail",
        ),
    ]
