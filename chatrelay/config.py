"""
Process configuration, read once at startup and handed to the app
"""

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENAI_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


class RelaySettings(BaseSettings):
    """Settings sourced from the environment and an optional .env file"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    OPENAI_API_KEY: SecretStr = Field(description="Bearer token for the completion endpoint")
    UPSTREAM_URL: str = Field(default=OPENAI_CHAT_COMPLETIONS_URL)
    # None leaves the call unbounded
    UPSTREAM_TIMEOUT_SECONDS: Optional[float] = Field(default=None, gt=0)
    FORWARD_UPSTREAM_STATUS: bool = Field(
        default=False,
        description="Relay the upstream status code instead of always answering 200",
    )

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
