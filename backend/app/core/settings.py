# app/core/settings.py
import re
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SMTP_PORT = 587


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_title: str = Field(default="Contact Relay API", alias="API_TITLE")

    # "development" exposes error detail in 500 responses
    node_env: str = Field(default="production", alias="NODE_ENV")

    # "standard" or "extended", see app/lib/cors.py
    cors_profile: str = Field(default="standard", alias="CORS_PROFILE")

    contact_target_email: str = Field(default="info@davidncreative.com", alias="CONTACT_TARGET_EMAIL")

    # SMTP relay; empty values fall back to the defaults in app/core/mailer.py
    smtp_host: Optional[str] = Field(default=None, alias="SMTP_HOST")
    smtp_port: int = Field(default=DEFAULT_SMTP_PORT, alias="SMTP_PORT")
    smtp_user: Optional[str] = Field(default=None, alias="SMTP_USER")
    smtp_pass: Optional[str] = Field(default=None, alias="SMTP_PASS")
    smtp_timeout: float = Field(default=20.0, alias="SMTP_TIMEOUT")

    @field_validator("smtp_port", mode="before")
    @classmethod
    def _parse_port(cls, value):
        # Leading digits only ("587abc" -> 587); anything else uses the default.
        if isinstance(value, int):
            return value
        match = re.match(r"\s*(\d+)", str(value or ""))
        return int(match.group(1)) if match else DEFAULT_SMTP_PORT

    @field_validator("cors_profile")
    @classmethod
    def _check_cors_profile(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("standard", "extended"):
            raise ValueError("CORS_PROFILE must be 'standard' or 'extended'")
        return value

    @property
    def is_development(self) -> bool:
        return self.node_env.strip().lower() == "development"


def get_settings() -> Settings:
    """Read configuration from the environment. Not cached: each call sees current values."""
    return Settings()


settings = Settings()
