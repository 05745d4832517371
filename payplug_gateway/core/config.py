from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _normalize_pem(value: str | None) -> str | None:
    """Turn escaped newlines from env files into real ones; blank means unset."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    return value.replace("\\n", "\n")


class GatewayAccountConfig(BaseModel):
    """Read-only PayPlug account configuration.

    Missing values are allowed here and reported when they are needed,
    so a partially configured account fails per request, not at startup.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str | None = Field(
        default=None,
        description="PayPlug payment page URL from account configuration",
    )
    private_key: str | None = Field(
        default=None,
        description="Merchant private key (PEM) used to sign payment data",
    )
    public_key: str | None = Field(
        default=None,
        description="PayPlug public key (PEM) used to verify IPN callbacks",
    )
    ipn_url: str | None = Field(
        default=None,
        description="Default notification URL for payments without one",
    )

    @field_validator("private_key", "public_key", mode="before")
    @classmethod
    def normalize_pem(cls, value: str | None) -> str | None:
        return _normalize_pem(value)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAYPLUG_",
        case_sensitive=False,
        extra="ignore",
    )

    # PayPlug account
    account_url: str | None = Field(
        default=None,
        description="PayPlug payment page URL",
    )
    private_key: str | None = Field(
        default=None,
        description="Merchant private key (PEM, \\n escapes allowed)",
    )
    public_key: str | None = Field(
        default=None,
        description="PayPlug public key for IPN verification (PEM)",
    )
    ipn_url: str | None = Field(
        default=None,
        description="Absolute URL of the IPN endpoint",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["json", "standard"] = Field(
        default="standard",
        description="Log format (json for production, standard for dev)",
    )

    def account_config(self) -> GatewayAccountConfig:
        """Build the immutable account config handed to providers."""
        return GatewayAccountConfig(
            base_url=self.account_url or None,
            private_key=self.private_key,
            public_key=self.public_key,
            ipn_url=self.ipn_url or None,
        )


settings = Settings()
