"""Configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (CODEDEPLOY_OPS_* prefix)
2. .env file in current directory
3. Default values
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodeDeployOpsConfig(BaseSettings):
    """Settings for building CodeDeploy requests.

    Environment variables are prefixed with CODEDEPLOY_OPS_.
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEDEPLOY_OPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Endpoint
    region: str = "us-east-1"
    endpoint_url: str = ""

    # Wire protocol
    namespace: str = "CodeDeploy"
    api_version: str = "20141006"
    content_type: str = "application/x-amz-json-1.1"
    service: str = "codedeploy"

    # Parameter handling
    max_depth: int = 64
    strict_tags: bool = False

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return upper

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v: int) -> int:
        if v < 1:
            msg = f"max_depth must be positive, got {v}"
            raise ValueError(msg)
        return v

    @property
    def resolved_endpoint_url(self) -> str:
        """Endpoint URL, derived from the region when not set explicitly."""
        if self.endpoint_url:
            return self.endpoint_url.rstrip("/")
        return f"https://{self.service}.{self.region}.amazonaws.com"


@lru_cache
def get_config() -> CodeDeployOpsConfig:
    """Get the global configuration.

    Configuration is cached after first load.

    Returns:
        CodeDeployOpsConfig instance.
    """
    return CodeDeployOpsConfig()


def clear_config_cache() -> None:
    """Clear the configuration cache (for testing)."""
    get_config.cache_clear()
