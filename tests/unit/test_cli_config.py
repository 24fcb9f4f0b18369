"""Tests for configuration."""
from __future__ import annotations

import os
from unittest.mock import patch

import pytest


class TestCodeDeployOpsConfig:
    """Tests for CodeDeployOpsConfig."""

    def test_default_values(self) -> None:
        """Config has sensible defaults."""
        from codedeploy_ops.cli.config import CodeDeployOpsConfig

        with patch.dict(os.environ, {}, clear=True):
            config = CodeDeployOpsConfig()

        assert config.namespace == "CodeDeploy"
        assert config.api_version == "20141006"
        assert config.content_type == "application/x-amz-json-1.1"
        assert config.strict_tags is False
        assert config.resolved_endpoint_url == "https://codedeploy.us-east-1.amazonaws.com"

    def test_from_environment(self) -> None:
        """Config reads from environment variables."""
        from codedeploy_ops.cli.config import CodeDeployOpsConfig

        env = {
            "CODEDEPLOY_OPS_REGION": "ap-south-1",
            "CODEDEPLOY_OPS_STRICT_TAGS": "true",
            "CODEDEPLOY_OPS_MAX_DEPTH": "8",
            "CODEDEPLOY_OPS_LOG_LEVEL": "debug",
        }

        with patch.dict(os.environ, env, clear=True):
            config = CodeDeployOpsConfig()

        assert config.region == "ap-south-1"
        assert config.strict_tags is True
        assert config.max_depth == 8
        assert config.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        from pydantic import ValidationError

        from codedeploy_ops.cli.config import CodeDeployOpsConfig

        with pytest.raises(ValidationError, match="Invalid log level"):
            CodeDeployOpsConfig(log_level="loud")

    def test_invalid_max_depth(self) -> None:
        from pydantic import ValidationError

        from codedeploy_ops.cli.config import CodeDeployOpsConfig

        with pytest.raises(ValidationError, match="max_depth must be positive"):
            CodeDeployOpsConfig(max_depth=0)

    def test_explicit_endpoint_trailing_slash(self) -> None:
        from codedeploy_ops.cli.config import CodeDeployOpsConfig

        config = CodeDeployOpsConfig(endpoint_url="http://localhost:4566/")

        assert config.resolved_endpoint_url == "http://localhost:4566"


class TestGetConfig:
    """Tests for get_config function."""

    def test_returns_cached_config(self) -> None:
        from codedeploy_ops.cli.config import clear_config_cache, get_config

        clear_config_cache()
        config = get_config()

        assert config is get_config()
        assert hasattr(config, "api_version")
        clear_config_cache()
