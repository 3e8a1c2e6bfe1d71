from django.apps import AppConfig


class PagamentosConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pagamentos"
    verbose_name = "Pagamentos"
