"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables, with defaults suitable for local development.  Variable names
follow the ones the web client deployment already sets (``PORT``,
``NODE_ENV``, ``ACCESS_TOKEN_SECRET``, ``DB_USER``/``DB_PASS``,
``TRANSPORTER_EMAIL``/``TRANSPORTER_PASS``).
"""

import os
from dataclasses import dataclass, field
from typing import List
from urllib.parse import quote_plus


def _default_mongodb_uri() -> str:
    """Build the MongoDB connection string.

    ``MONGODB_URI`` wins when set.  Otherwise, if ``DB_USER`` and
    ``DB_PASS`` are present, an Atlas ``mongodb+srv`` URI is assembled
    for ``DB_HOST``.  Falls back to a local server.
    """
    uri = os.getenv("MONGODB_URI")
    if uri:
        return uri
    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASS")
    host = os.getenv("DB_HOST")
    if user and password and host:
        return (
            f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{host}/"
            "?retryWrites=true&w=majority"
        )
    return "mongodb://localhost:27017"


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Neighbourly API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("NODE_ENV", os.getenv("ENVIRONMENT", "development"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Browser origins allowed to send credentialed (cookie) requests.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:5174")
        )
    )

    secret_key: str = os.getenv("ACCESS_TOKEN_SECRET", "change_me")
    access_token_expire_minutes: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(365 * 24 * 60))
    )
    algorithm: str = "HS256"
    token_cookie_name: str = "token"

    mongodb_uri: str = field(default_factory=_default_mongodb_uri)
    database_name: str = os.getenv("DB_NAME", "neighbourlyDB")

    smtp_host: str = os.getenv("SMTP_HOST", "smtp.gmail.com")
    smtp_port: int = int(os.getenv("SMTP_PORT", "587"))
    smtp_timeout: int = int(os.getenv("SMTP_TIMEOUT", "30"))
    transporter_email: str = os.getenv("TRANSPORTER_EMAIL", "")
    transporter_pass: str = os.getenv("TRANSPORTER_PASS", "")
    mail_sender_name: str = os.getenv("MAIL_SENDER_NAME", "Neighbourly")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
