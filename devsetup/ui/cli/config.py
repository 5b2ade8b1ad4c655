"""
CLI commands for devsetup's own settings.

Thin wrappers over ``devsetup.core.config.loader``.
"""

from __future__ import annotations

import json
import sys

import click
import yaml

from devsetup.core.context import settings_path


@click.group()
def config() -> None:
    """Settings — show the effective configuration."""


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Print the effective settings and where they came from."""
    from devsetup.core.config.loader import find_settings_file, load_settings
    from devsetup.core.services.tool_install.domain.errors import ConfigError

    explicit = ctx.obj.get("config_path")
    try:
        source = find_settings_file(explicit)
        settings = load_settings(explicit)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(e.exit_code)

    data = settings.model_dump(mode="json")
    if as_json:
        click.echo(json.dumps({"source": str(source) if source else None, "settings": data}, indent=2))
        return

    label = str(source) if source else f"defaults (no {settings_path()})"
    click.secho(f"⚙️  Settings: {label}", fg="cyan", bold=True)
    click.echo(yaml.safe_dump(data, sort_keys=False).rstrip())
