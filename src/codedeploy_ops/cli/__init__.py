"""CLI module."""

from __future__ import annotations

from codedeploy_ops.cli.config import CodeDeployOpsConfig, get_config
from codedeploy_ops.cli.main import app

__all__ = ["CodeDeployOpsConfig", "app", "get_config"]
