from django.apps import AppConfig


class GestaoTemplateConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "gestao_template"
    verbose_name = "Gestão de template"

    def ready(self):
        import gestao_template.signals  # noqa: F401
