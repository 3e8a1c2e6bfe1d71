from django.apps import AppConfig


class LojasConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "lojas"
    verbose_name = "Lojas"
