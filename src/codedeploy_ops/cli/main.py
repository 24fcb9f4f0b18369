"""Main CLI entry point using Typer.

This module defines the top-level CLI commands:
- codedeploy-ops preview: Build a request for an operation and print it
- codedeploy-ops keys: Render raw parameter keys in wire format
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path  # noqa: TC003 - Typer requires runtime access
from typing import Annotated

import typer
from rich.console import Console

from codedeploy_ops import __version__

app = typer.Typer(
    name="codedeploy-ops",
    help="CodeDeploy request builder",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"codedeploy-ops {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
) -> None:
    """CodeDeploy request builder.

    Use 'codedeploy-ops COMMAND --help' for information on specific commands.
    """
    import structlog  # noqa: PLC0415

    from codedeploy_ops.cli.config import get_config  # noqa: PLC0415

    level = logging.DEBUG if verbose else logging.getLevelName(get_config().log_level)
    # stdout carries command output only
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


@app.command()
def preview(
    operation: Annotated[
        str,
        typer.Argument(help="Operation name (snake_case, e.g. list_deployments)."),
    ],
    params: Annotated[
        str | None,
        typer.Option("--params", "-p", help="Parameters as a JSON object."),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Read parameters from a JSON file."),
    ] = None,
    upper: Annotated[
        bool,
        typer.Option("--upper", help="Render keys in PascalCase."),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output raw JSON."),
    ] = False,
) -> None:
    """Build the request for an operation without sending it.

    Examples:
        codedeploy-ops preview list_applications --params '{"next_token": "abc"}'

        codedeploy-ops preview create_deployment --file deployment.json

        codedeploy-ops preview tag_resource --upper -p '{"resource_arn": "arn:..."}'
    """
    from codedeploy_ops.cli.commands.preview import run_preview  # noqa: PLC0415

    run_preview(
        operation=operation,
        params=params,
        file=file,
        upper=upper,
        json_output=json_output,
    )


@app.command()
def keys(
    names: Annotated[
        list[str],
        typer.Argument(help="Raw keys to render."),
    ],
    upper: Annotated[
        bool,
        typer.Option("--upper", help="Render keys in PascalCase."),
    ] = False,
) -> None:
    """Render raw parameter keys in wire format.

    Examples:
        codedeploy-ops keys deployment_group_name ec2_tag_filters

        codedeploy-ops keys resource_arn --upper
    """
    from codedeploy_ops.cli.commands.keys import show_keys  # noqa: PLC0415

    show_keys(names=names, upper=upper)


if __name__ == "__main__":
    app()
