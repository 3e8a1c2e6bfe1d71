from django.urls import path
from . import views

app_name = "clima"

urlpatterns = [
    path("clima/", views.ClimaView.as_view(), name="clima"),
]
