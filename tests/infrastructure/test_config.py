"""Tests for environment-driven settings."""

from ordersvc.infrastructure.config import Settings


class TestSettingsFromEnv:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.database_url.startswith("sqlite:///")
        assert settings.api_prefix == "/api/v1/orders"
        assert settings.environment == "development"
        assert settings.log_level == "DEBUG"
        assert settings.smtp_host is None
        assert settings.confirmation_fallback_email == "customer@example.com"
        assert settings.shop_name == "Applitech"
        assert not settings.uses_json_logs

    def test_values_from_environment(self):
        settings = Settings.from_env(
            {
                "DATABASE_URL": "postgresql://db/orders",
                "API_PREFIX": "/orders/",
                "ENVIRONMENT": "Production",
                "SMTP_HOST": "mail.example.com",
                "SMTP_PORT": "465",
                "SMTP_EMAIL": "shop@example.com",
                "SMTP_PASSWORD": "secret",
                "SMTP_STARTTLS": "false",
                "SMTP_TIMEOUT": "2.5",
                "ORDER_CONFIRMATION_FALLBACK_EMAIL": "orders@example.com",
                "SHOP_NAME": "Acme",
            }
        )
        assert settings.database_url == "postgresql://db/orders"
        assert settings.api_prefix == "/orders"
        assert settings.environment == "production"
        assert settings.log_level == "INFO"
        assert settings.uses_json_logs
        assert settings.smtp_port == 465
        assert settings.smtp_user == "shop@example.com"
        assert settings.smtp_starttls is False
        assert settings.smtp_timeout == 2.5
        assert settings.confirmation_fallback_email == "orders@example.com"
        assert settings.shop_name == "Acme"

    def test_explicit_log_level_wins(self):
        settings = Settings.from_env({"ENVIRONMENT": "test", "LOG_LEVEL": "debug"})
        assert settings.log_level == "DEBUG"

    def test_test_environment_is_quiet(self):
        assert Settings.from_env({"ENVIRONMENT": "test"}).log_level == "WARNING"
