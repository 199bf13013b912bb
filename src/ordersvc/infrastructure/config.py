"""Runtime configuration, read once from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def _flag(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = f"sqlite:///{_DATA_DIR / 'orders.db'}"
    api_prefix: str = "/api/v1/orders"
    environment: str = "development"
    log_level: str = "DEBUG"

    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_from_name: str = "Order Desk"
    smtp_from_email: str = "no-reply@example.com"
    smtp_starttls: bool = True
    smtp_timeout: float = 10.0

    confirmation_fallback_email: str = "customer@example.com"
    shop_name: str = "Applitech"

    @property
    def uses_json_logs(self) -> bool:
        return self.environment in ("production", "staging")

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = Settings()

        environment = (env.get("ENVIRONMENT") or defaults.environment).lower()
        log_level = env.get("LOG_LEVEL") or _LEVEL_BY_ENV.get(environment, "INFO")

        return Settings(
            database_url=env.get("DATABASE_URL") or defaults.database_url,
            api_prefix=(env.get("API_PREFIX") or defaults.api_prefix).rstrip("/"),
            environment=environment,
            log_level=log_level.upper(),
            smtp_host=env.get("SMTP_HOST") or None,
            smtp_port=int(env.get("SMTP_PORT") or defaults.smtp_port),
            smtp_user=env.get("SMTP_EMAIL") or None,
            smtp_password=env.get("SMTP_PASSWORD") or None,
            smtp_from_name=env.get("SMTP_FROM_NAME") or defaults.smtp_from_name,
            smtp_from_email=env.get("SMTP_FROM_EMAIL") or defaults.smtp_from_email,
            smtp_starttls=_flag(env.get("SMTP_STARTTLS"), defaults.smtp_starttls),
            smtp_timeout=float(env.get("SMTP_TIMEOUT") or defaults.smtp_timeout),
            confirmation_fallback_email=(
                env.get("ORDER_CONFIRMATION_FALLBACK_EMAIL")
                or defaults.confirmation_fallback_email
            ),
            shop_name=env.get("SHOP_NAME") or defaults.shop_name,
        )
