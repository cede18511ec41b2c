"""
CLI entry point for gitstore.

Uses Typer for modern CLI with auto-completion and help generation.

Usage:
    gitstore ref validate https://github.com/org/repo.git
    gitstore ref validate git@github.com:org/repo.git --private-key ~/.ssh/id_ed25519
    gitstore ref inspect host:org/repo --json
"""

from __future__ import annotations

import sys
from typing import Annotated

import typer

from gitstore.cli.commands.ref import app as ref_app
from gitstore.common.exceptions import ConfigurationError
from gitstore.common.logging import setup_logging
from gitstore.services.config_models import load_settings

# Create main app
app = typer.Typer(
    name="gitstore",
    help="gitstore CLI - Classify and validate git repository references",
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(ref_app, name="ref")


@app.callback()
def configure(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (defaults to GITSTORE_LOG_LEVEL)"),
    ] = None,
) -> None:
    """Configure logging before any command runs."""
    if log_level is None:
        try:
            log_level = load_settings().log_level
        except ConfigurationError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    try:
        setup_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> int:
    """Main entry point."""
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
