"""
Application configuration settings.

Centralized configuration using Pydantic Settings for type safety and validation.

Decision: Environment variable names follow the storefront deployment
(EMAIL_SERVICE, EMAIL_USER, EMAIL_PASSWORD, PORT) so existing .env files
keep working. SMTP_* variables are optional overrides for relays that are
not covered by a service preset.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "order-confirmation-mailer"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # API
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # Mail transport
    email_service: str = "gmail"
    email_user: str | None = None
    email_password: str | None = None
    smtp_host: str | None = None
    smtp_port: int | None = None
    smtp_use_tls: bool | None = None
    smtp_timeout_seconds: float = 10.0
    verify_transport_on_startup: bool = True

    # Branding
    shop_name: str = "Zone 5 Shop"
    shop_tagline: str = "Boldly Graceful"
    support_email: str = "support@zone5shop.com"
    instagram_url: str = "https://www.instagram.com/zone5shop/"
    currency_symbol: str = "₹"

    # Static assets
    static_dir: str = "public"


# Global settings instance
settings = Settings()
