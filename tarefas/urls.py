from django.urls import path
from . import views

app_name = "tarefas"

urlpatterns = [
    path("tarefas/", views.TarefaListCreateView.as_view(), name="tarefa-list"),
    path("tarefas/filtrar/", views.TarefaFiltrarView.as_view(), name="tarefa-filtrar"),
    path("tarefas/<int:pk>/", views.TarefaDetailView.as_view(), name="tarefa-detail"),
]
