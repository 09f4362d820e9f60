"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Centralised settings — passed explicitly to the services that need them."""

    # Database
    database_url: str = Field(...)
    database_name: Optional[str] = Field(None)

    # Email (Brevo transactional API)
    sender_email: str = Field(...)
    brevo_api_key: str = Field(...)
    brevo_api_url: str = Field("https://api.brevo.com/v3/smtp/email")
    email_timeout_seconds: float = Field(10.0)
    otp_email_subject: str = Field("ChatBot")

    # Security
    activation_secret: str = Field(...)
    jwt_secret: str = Field(...)
    verify_token_minutes: int = Field(5)
    session_token_days: int = Field(5)
    allowed_origins: str = Field(
        "https://chatfrontend-six-sigma.vercel.app,http://localhost:5173",
    )

    # App
    host: str = Field("0.0.0.0")
    port: int = Field(5000)
    app_env: str = Field("development")
    log_level: str = Field("INFO")

    # Derived
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
