"""Request envelope for CodeDeploy JSON operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from codedeploy_ops.casing.engine import render
from codedeploy_ops.casing.rules import CasingPolicy
from codedeploy_ops.cli.config import CodeDeployOpsConfig, get_config

logger = structlog.get_logger()


@dataclass(frozen=True)
class JsonOperation:
    """A fully built request, ready to hand to a transport.

    Attributes:
        action: PascalCase operation name, e.g. "ListApplications".
        data: Request body with wire-format keys.
        headers: Ordered header name/value pairs.
        service: Routing identifier for the transport layer.
    """

    action: str
    data: dict[str, Any]
    headers: tuple[tuple[str, str], ...]
    service: str = "codedeploy"
    http_method: str = "POST"
    path: str = "/"
    params: dict[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Look up a header value by case-insensitive name."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None


def operation_name(action: str) -> str:
    """PascalCase operation name for a snake_case action."""
    return render(action, CasingPolicy.UPPER_INITIAL)


def operation_target(action: str, config: CodeDeployOpsConfig | None = None) -> str:
    """Value of the routing header, e.g. "CodeDeploy_20141006.ListApplications"."""
    config = config or get_config()
    return f"{config.namespace}_{config.api_version}.{operation_name(action)}"


def build_headers(
    action: str, config: CodeDeployOpsConfig | None = None
) -> tuple[tuple[str, str], ...]:
    config = config or get_config()
    return (
        ("x-amz-target", operation_target(action, config)),
        ("content-type", config.content_type),
    )


def request(
    data: dict[str, Any],
    action: str,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Wrap an already camelized body into a `JsonOperation`.

    Args:
        data: Request body with wire-format keys.
        action: snake_case operation name, e.g. "list_applications".
        config: Settings override; the cached global config by default.
    """
    config = config or get_config()
    operation = JsonOperation(
        action=operation_name(action),
        data=data,
        headers=build_headers(action, config),
        service=config.service,
    )
    logger.debug(
        "operation_built",
        action=operation.action,
        field_count=len(data),
    )
    return operation
