"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_DELIVERY_CHANNELS = "sendgrid,smtp,ses"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite:///./notifier.db",
        description="Database connection URL used by SQLAlchemy for the document store",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used for server-assigned timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logger level")
    accept_legacy_schema: bool = Field(
        default=True,
        description="Accept documents written with the legacy field conventions",
    )
    delivery_channels: str = Field(
        default=DEFAULT_DELIVERY_CHANNELS,
        description="Comma separated, ordered list of confirmation email channels",
    )
    confirmation_subject: str = Field(
        default="Welcome to our newsletter",
        description="Subject line of the subscription confirmation email",
    )
    currency_symbol: str = Field(
        default="Rs",
        description="Symbol used when formatting budgets inside notification messages",
    )

    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of SendGrid messages",
        min_length=3,
    )

    smtp_host: str | None = Field(default=None, description="SMTP server hostname")
    smtp_port: int = Field(default=587, gt=0, description="SMTP server port")
    smtp_username: str | None = Field(default=None)
    smtp_password: str | None = Field(default=None)
    smtp_use_tls: bool = Field(default=True, description="Use STARTTLS on connect")
    smtp_sender: str | None = Field(
        default=None,
        description="Email address used as the sender of SMTP messages",
    )

    ses_region: str | None = Field(default=None, description="AWS region for Amazon SES")
    ses_sender: str | None = Field(
        default=None,
        description="Verified sender address used for Amazon SES messages",
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    def delivery_channel_order(self) -> list[str]:
        """Return the configured channel names, lower-cased, in order."""

        return [
            name.strip().lower()
            for name in self.delivery_channels.split(",")
            if name.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
