"""
Configuration management using Pydantic Settings
Loads and validates environment variables (and an optional .env file)
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://route53.amazonaws.com/"
DEFAULT_API_VERSION = "2013-04-01"


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.
    Credentials are optional here: the client only warns when they are absent
    and refuses to sign a request later.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # AWS credentials
    aws_access_key_id: Optional[str] = Field(
        default=None,
        description="AWS access key id used to sign Route 53 requests"
    )
    aws_secret_access_key: Optional[str] = Field(
        default=None,
        description="AWS secret access key used to sign Route 53 requests"
    )

    # Route 53 endpoint
    route53_api_version: str = Field(
        default=DEFAULT_API_VERSION,
        description="Route 53 API version: 2011-05-05 or 2013-04-01"
    )
    route53_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Route 53 endpoint, must end with a slash"
    )

    # Transport
    request_timeout: float = Field(
        default=30,
        gt=0,
        description="HTTP timeout in seconds"
    )
    max_attempts: int = Field(
        default=1,
        ge=1,
        description="Attempts per request; 1 disables automatic retries"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("route53_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Versioned paths are appended to the base URL, so it needs a trailing slash"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("route53_base_url must be an http(s) URL")
        if not v.endswith("/"):
            v += "/"
        return v

    def has_credentials(self) -> bool:
        """Check if both halves of the credential pair are set"""
        return bool(self.aws_access_key_id and self.aws_secret_access_key)


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If environment variables are present but invalid
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None
