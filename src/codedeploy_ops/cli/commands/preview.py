"""Preview command implementation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from codedeploy_ops.casing import CasingPolicy, KeyTypeError, camelize_map
from codedeploy_ops.cli.config import get_config
from codedeploy_ops.operation import JsonOperation, request
from codedeploy_ops.transport import to_http_request

console = Console()
err_console = Console(stderr=True)


def run_preview(
    *,
    operation: str,
    params: str | None,
    file: Path | None,
    upper: bool,
    json_output: bool,
) -> None:
    """Execute preview command.

    Args:
        operation: snake_case operation name.
        params: Inline JSON object with the parameters.
        file: Path to a JSON file with the parameters.
        upper: Render keys in PascalCase.
        json_output: Print the request as raw JSON.
    """
    if params is not None and file is not None:
        err_console.print("[red]✗[/red] Use either --params or --file, not both")
        raise SystemExit(1)

    try:
        raw = _load_params(params, file)
    except (OSError, ValueError) as err:
        err_console.print(f"[red]✗[/red] Could not read parameters: {err}")
        raise SystemExit(1) from None

    config = get_config()
    policy = CasingPolicy.UPPER_INITIAL if upper else None
    try:
        data = camelize_map(raw, policy=policy, max_depth=config.max_depth)
        op = request(data, operation, config=config)
    except (KeyTypeError, ValueError) as err:
        err_console.print(f"[red]✗[/red] Request build failed: {err}")
        raise SystemExit(1) from None

    url = str(to_http_request(op, config=config).url)
    if json_output:
        console.print_json(data=_as_dict(op, url))
        return

    console.print(_render_headers(op, url))
    console.print_json(data=op.data)


def _load_params(params: str | None, file: Path | None) -> dict[str, Any]:
    if file is not None:
        text = file.read_text(encoding="utf-8")
    elif params is not None:
        text = params
    else:
        return {}

    loaded = json.loads(text)
    if not isinstance(loaded, dict):
        msg = f"parameters must be a JSON object, got {type(loaded).__name__}"
        raise ValueError(msg)
    return loaded


def _as_dict(op: JsonOperation, url: str) -> dict[str, Any]:
    return {
        "action": op.action,
        "httpMethod": op.http_method,
        "url": url,
        "path": op.path,
        "service": op.service,
        "headers": [list(header) for header in op.headers],
        "data": op.data,
    }


def _render_headers(op: JsonOperation, url: str) -> Table:
    table = Table(title=f"{op.http_method} {url} ({op.service})")
    table.add_column("Header", style="cyan")
    table.add_column("Value")
    for name, value in op.headers:
        table.add_row(name, value)
    return table
