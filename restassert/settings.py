"""
restassert configuration using pydantic-settings.

All settings can be set via environment variables with RESTASSERT_ prefix,
or via a .env file in the working directory.
"""

from importlib.metadata import version

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from restassert.model import RequestLogLevel, ResponseLogLevel

try:
    VERSION = version("restassert")
except Exception:
    VERSION = "0.0.0"


class Settings(BaseSettings):
    """
    restassert configuration using pydantic-settings.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables with RESTASSERT_ prefix
    2. .env file
    """

    model_config = SettingsConfigDict(
        env_prefix="restassert_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    debug: bool = Field(default=False)

    # Transport
    disable_ssl_certificate_validation: bool = Field(default=False)
    use_relaxed_https_validation: bool = Field(
        default=False,
        description="Deprecated, use disable_ssl_certificate_validation",
    )
    user_agent: str = Field(default=f"restassert/{VERSION}")

    # Logging of exchanged messages
    request_log_level: RequestLogLevel = Field(default=RequestLogLevel.NONE)
    response_log_level: ResponseLogLevel = Field(default=ResponseLogLevel.NONE)

    @property
    def verify_ssl(self) -> bool:
        if self.disable_ssl_certificate_validation:
            return False
        return not self.use_relaxed_https_validation
