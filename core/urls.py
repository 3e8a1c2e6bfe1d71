from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from .health import HealthCheckView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/health/", HealthCheckView.as_view(), name="health"),
    # Documentação
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    # Apps
    path("api/auth/", include("accounts.urls")),
    path("api/", include("lojas.urls")),
    path("api/", include("catalogo.urls")),
    path("api/", include("vendas.urls")),
    path("api/", include("pagamentos.urls")),
    path("api/", include("gestao_template.urls")),
    path("api/", include("tarefas.urls")),
    path("api/", include("clima.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
