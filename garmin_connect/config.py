"""Client configuration using Pydantic Settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GarminDomain = Literal["garmin.com", "garmin.cn"]


class GarminConfig(BaseSettings):
    """Garmin Connect settings loaded from arguments or environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GARMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    username: str = Field(default="", description="Garmin Connect account e-mail")
    password: str = Field(default="", description="Garmin Connect account password")

    # Connection
    domain: GarminDomain = Field(default="garmin.com", description="Garmin Connect domain")
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    # Token storage used by the command line
    token_dir: str = Field(default="data/garmin_tokens", description="Directory holding exported tokens")
