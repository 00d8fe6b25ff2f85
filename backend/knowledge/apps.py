from django.apps import AppConfig


class KnowledgeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "knowledge"
    verbose_name = "Knowledge base proxy"

    # Shared upstream service, built once in ready()
    coze_service = None

    def ready(self):
        """Build the process-wide Coze service from settings.

        Missing credentials are only reported; the proxy still starts and
        upstream calls fail with an authentication error.
        """
        # Import within method to avoid side effects at import time
        from infrastructure.coze import CozeConfig, CozeService

        config = CozeConfig.from_settings()
        config.log_status()
        self.coze_service = CozeService.from_config(config)
