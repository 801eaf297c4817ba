"""
Application Configuration

Environment-driven settings for the welcome service: localization
options, server binding and security.
"""

import os
from enum import Enum
from pathlib import Path


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


MISSING_KEY_POLICIES = ("key", "raise")


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable."""
    env_value = os.getenv("ENVIRONMENT")
    if env_value is None:
        raise RuntimeError(
            "ENVIRONMENT is required. Set to 'production', 'development', or 'test'."
        )
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


class Settings:
    """Welcome service configuration"""

    # Project Paths
    PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent
    TEMPLATE_DIR: Path = PACKAGE_DIR / "templates"
    STATIC_DIR: Path = PACKAGE_DIR / "static"

    # Environment
    ENVIRONMENT: Environment = _get_environment()

    # Localization
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "en")
    # "key" renders the message key as a placeholder, "raise" fails the render
    MISSING_KEY_POLICY: str = os.getenv("MISSING_KEY_POLICY", "key").lower()
    ESCAPE_VALUE: bool = os.getenv("ESCAPE_VALUE", "False").lower() == "true"
    # Empty means flat keys ("messages.welcome" is a single key)
    KEY_SEPARATOR: str | None = os.getenv("KEY_SEPARATOR") or None
    LANG_COOKIE_NAME: str = os.getenv("LANG_COOKIE_NAME", "lang")

    # Rate Limits
    RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "True").lower() == "true"
    RATE_LIMIT_PAGE: str = os.getenv("RATE_LIMIT_PAGE", "60/minute")
    RATE_LIMIT_SWITCH: str = os.getenv("RATE_LIMIT_SWITCH", "30/minute")

    # Security
    ALLOWED_HOSTS: list[str] = os.getenv(
        "ALLOWED_HOSTS", "localhost,127.0.0.1,testclient,testserver"
    ).split(",")
    CORS_ORIGINS: list[str] = (
        os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else []
    )

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"


settings = Settings()


def _validate_required(settings: Settings) -> None:
    """Validate settings outside of tests."""
    if settings.ENVIRONMENT == Environment.TEST:
        return

    if settings.MISSING_KEY_POLICY not in MISSING_KEY_POLICIES:
        raise RuntimeError(
            f"Invalid MISSING_KEY_POLICY value: '{settings.MISSING_KEY_POLICY}'. "
            "Must be 'key' or 'raise'."
        )


_validate_required(settings)
