from django.urls import path
from . import views

app_name = "vendas"

urlpatterns = [
    path("descontos/", views.DescontoListCreateView.as_view(), name="desconto-list"),
    path("descontos/<int:pk>/", views.DescontoDetailView.as_view(), name="desconto-detail"),
    path("clientes/", views.ClienteListCreateView.as_view(), name="cliente-list"),
    path("clientes/<int:pk>/", views.ClienteDetailView.as_view(), name="cliente-detail"),
    path("enderecos/", views.EnderecoListCreateView.as_view(), name="endereco-list"),
    path("enderecos/<int:pk>/", views.EnderecoDetailView.as_view(), name="endereco-detail"),
    # Pedidos
    path("pedidos/", views.PedidoListCreateView.as_view(), name="pedido-list"),
    path("pedidos/<int:pk>/", views.PedidoDetailView.as_view(), name="pedido-detail"),
    path(
        "pedidos/<int:pk>/status/",
        views.PedidoStatusView.as_view(),
        name="pedido-status",
    ),
]
