from django.urls import path
from . import views

app_name = "pagamentos"

urlpatterns = [
    path(
        "meios-pagamento/",
        views.MeioPagamentoListCreateView.as_view(),
        name="meio-pagamento-list",
    ),
    path(
        "meios-pagamento/<int:pk>/",
        views.MeioPagamentoDetailView.as_view(),
        name="meio-pagamento-detail",
    ),
    path(
        "formas-pagamento/",
        views.FormaPagamentoListCreateView.as_view(),
        name="forma-pagamento-list",
    ),
    path(
        "formas-pagamento/<int:pk>/",
        views.FormaPagamentoDetailView.as_view(),
        name="forma-pagamento-detail",
    ),
    path(
        "transacoes/",
        views.TransacaoPagamentoListCreateView.as_view(),
        name="transacao-list",
    ),
    path(
        "transacoes/<int:pk>/",
        views.TransacaoPagamentoDetailView.as_view(),
        name="transacao-detail",
    ),
]
