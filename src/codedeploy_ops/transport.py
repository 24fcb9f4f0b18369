"""Conversion of built operations into HTTP requests.

Requests are built but never sent; signing and delivery belong to the
caller's HTTP stack.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from codedeploy_ops import __version__
from codedeploy_ops.cli.config import CodeDeployOpsConfig, get_config
from codedeploy_ops.operation import JsonOperation


def encode_body(data: dict[str, Any]) -> bytes:
    """Serialize a request body as compact, key-sorted UTF-8 JSON."""
    return json.dumps(
        data,
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
    ).encode("utf-8")


def to_http_request(
    operation: JsonOperation,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> httpx.Request:
    """Build an unsent `httpx.Request` for an operation.

    Args:
        operation: The operation to convert.
        config: Settings override; supplies the endpoint URL.

    Returns:
        A request carrying the operation's method, headers and JSON body.
    """
    config = config or get_config()
    headers = httpx.Headers(list(operation.headers))
    headers.setdefault("User-Agent", f"codedeploy-ops/{__version__}")
    return httpx.Request(
        operation.http_method,
        f"{config.resolved_endpoint_url}{operation.path}",
        headers=headers,
        params=operation.params or None,
        content=encode_body(operation.data),
    )
