from django.urls import path
from . import views

app_name = "lojas"

urlpatterns = [
    path("lojas/", views.LojaListCreateView.as_view(), name="loja-list"),
    path("lojas/<int:pk>/", views.LojaDetailView.as_view(), name="loja-detail"),
    # Configurações da loja
    path("dominios/", views.DominioListCreateView.as_view(), name="dominio-list"),
    path("dominios/<int:pk>/", views.DominioDetailView.as_view(), name="dominio-detail"),
    path("idiomas/", views.IdiomaListCreateView.as_view(), name="idioma-list"),
    path("idiomas/<int:pk>/", views.IdiomaDetailView.as_view(), name="idioma-detail"),
    path("moedas/", views.MoedaListCreateView.as_view(), name="moeda-list"),
    path("moedas/<int:pk>/", views.MoedaDetailView.as_view(), name="moeda-detail"),
    path("emails/", views.EmailListCreateView.as_view(), name="email-list"),
    path("emails/<int:pk>/", views.EmailDetailView.as_view(), name="email-detail"),
    path(
        "redirecionamentos/",
        views.RedirecionamentoListCreateView.as_view(),
        name="redirecionamento-list",
    ),
    path(
        "redirecionamentos/<int:pk>/",
        views.RedirecionamentoDetailView.as_view(),
        name="redirecionamento-detail",
    ),
    path(
        "pontos-levantamento/",
        views.PontoLevantamentoListCreateView.as_view(),
        name="ponto-levantamento-list",
    ),
    path(
        "pontos-levantamento/<int:pk>/",
        views.PontoLevantamentoDetailView.as_view(),
        name="ponto-levantamento-detail",
    ),
    path("checkouts/", views.CheckoutListCreateView.as_view(), name="checkout-list"),
    path(
        "checkouts/<int:pk>/", views.CheckoutDetailView.as_view(), name="checkout-detail"
    ),
]
