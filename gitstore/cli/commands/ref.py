"""
Repository reference CLI commands.

Provides commands for validating and inspecting repository URLs.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from gitstore.adapters.repository import (
    RefValidator,
    RepoRef,
    ValidationError,
    classify,
    match,
)
from gitstore.common.exceptions import ConfigurationError
from gitstore.common.logging import mask_credentials
from gitstore.services.config_models import GitstoreSettings, load_settings

app = typer.Typer(name="ref", help="Validate and inspect repository references")


def _mask(value: str) -> str:
    return "***" if value else ""


def _read_private_key(path: str | None) -> bytes:
    """Read key material from disk. Returns empty bytes when no path is given."""
    if not path:
        return b""
    try:
        return Path(path).expanduser().read_bytes()
    except OSError as e:
        raise ConfigurationError(f"unable to read private key {path}: {e}") from e


def _build_ref(
    url: str,
    user: str | None,
    password: str | None,
    private_key: str | None,
    settings: GitstoreSettings,
) -> RepoRef:
    """Build a RepoRef, using settings for anything not given on the command line."""
    return RepoRef(
        url=url,
        user=user if user is not None else settings.user,
        password=password if password is not None else settings.password.get_secret_value(),
        private_key=_read_private_key(private_key or settings.private_key_path),
    )


def _load_settings() -> GitstoreSettings:
    try:
        return load_settings()
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _print_result(data: dict[str, Any], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(data, indent=2))
        return
    for key, value in data.items():
        if isinstance(value, dict):
            typer.echo(f"  {key}:")
            for sub_key, sub_value in value.items():
                typer.echo(f"    {sub_key + ':':<16}{sub_value}")
        else:
            typer.echo(f"  {key + ':':<18}{value}")


@app.command("validate")
def ref_validate(
    url: Annotated[str, typer.Argument(help="Repository URL to validate")],
    user: Annotated[
        str | None, typer.Option("-u", "--user", help="Username (overrides the URL)")
    ] = None,
    password: Annotated[
        str | None, typer.Option("-p", "--password", help="Password (overrides the URL)")
    ] = None,
    private_key: Annotated[
        str | None, typer.Option("-k", "--private-key", help="Path to an SSH private key")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON output")] = False,
) -> None:
    """Validate a repository URL and its credentials."""
    settings = _load_settings()

    try:
        ref = _build_ref(url, user, password, private_key, settings)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    validator = RefValidator(default_user=settings.default_user)
    try:
        validator.validate(ref)
    except ValidationError as e:
        typer.echo(f"Error: {mask_credentials(str(e))}", err=True)
        raise typer.Exit(1)

    _print_result(
        {
            "url": mask_credentials(ref.url),
            "protocol": ref.protocol_kind.value if ref.protocol_kind else "",
            "user": ref.user,
            "password": _mask(ref.password),
            "private_key": "set" if ref.private_key else "unset",
        },
        as_json,
    )


@app.command("inspect")
def ref_inspect(
    url: Annotated[str, typer.Argument(help="Repository URL to inspect")],
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON output")] = False,
) -> None:
    """Show how a URL is parsed, without checking credentials."""
    settings = _load_settings()

    try:
        found = match(url)
        if found is None:
            typer.echo(f"Error: invalid git url: {mask_credentials(url)}", err=True)
            raise typer.Exit(1)
        parsed = classify(found, default_user=settings.default_user)
    except ValidationError as e:
        typer.echo(f"Error: {mask_credentials(str(e))}", err=True)
        raise typer.Exit(1)

    groups = found.to_dict()
    groups["text"] = mask_credentials(groups["text"])
    for key in ("scp_userinfo", "url_userinfo"):
        if ":" in groups[key]:
            groups[key] = groups[key].split(":", 1)[0] + ":***@"

    _print_result(
        {
            "protocol": parsed.kind.value,
            "user": parsed.user,
            "password": _mask(parsed.password),
            "groups": groups,
        },
        as_json,
    )
