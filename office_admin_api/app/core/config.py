"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so that the API starts
with no configuration at all; in a production deployment override at
least ``SECRET_KEY`` and ``UPLOADS_DIR``.
"""

import os
from dataclasses import dataclass

from fastapi import Request


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Office Admin API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Name of the cookie carrying the session token for browser clients.
    # API clients may send the same token as ``Authorization: Bearer``.
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "office_admin_session")

    # Directory receiving invoice and document uploads.  Relative paths
    # are resolved against the current working directory, as the
    # dashboard expects paths like ``uploads/invoice_<ms>.pdf``.
    uploads_dir: str = os.getenv("UPLOADS_DIR", "uploads")

    # Seed the store with a manager employee and an ``admin`` login at
    # start-up.  Without it nobody could log in to a fresh process.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be set
# before importing this module.
settings = Settings()


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings
