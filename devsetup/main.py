"""
devsetup — CLI entrypoint.

Usage:
    devsetup                  # same as `devsetup provision`
    devsetup provision --dry-run
    devsetup detect
    devsetup config show
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from devsetup import __version__
from devsetup.core.observability.logging_config import resolve_level, setup_logging_from_env


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="devsetup")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to devsetup.yml (default: ~/.config/devsetup/devsetup.yml).",
)
@click.option(
    "--home",
    "home_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write configuration files under this directory instead of ~.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    home_dir: str | None,
) -> None:
    """devsetup — provision a developer workstation (Neovim, tmux, lazygit, Node.js)."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if home_dir:
        from devsetup.core.context import set_home_dir

        set_home_dir(Path(home_dir).expanduser().resolve())

    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    if ctx.invoked_subcommand is None:
        ctx.invoke(provision_cmd)


@cli.command("provision")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--dry-run", is_flag=True, help="Plan every step; run nothing, write nothing.")
@click.pass_context
def provision_cmd(ctx: click.Context, as_json: bool, dry_run: bool) -> None:
    """Install the tools and write the editor and tmux configs.

    Examples:

        devsetup provision

        devsetup provision --dry-run

        devsetup -c ~/dotfiles/devsetup.yml provision
    """
    from devsetup.core.config.loader import load_settings
    from devsetup.core.services.tool_install import ConfigError, provision
    from devsetup.ui.cli.summary import print_next_steps, render_report

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e), "exit_code": e.exit_code}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(e.exit_code)

    report = provision(settings, dry_run=dry_run)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        if report.exit_code:
            sys.exit(report.exit_code)
        return

    quiet = ctx.obj.get("quiet", False)
    if not quiet or report.exit_code:
        render_report(report, verbose=ctx.obj.get("verbose", False))

    if report.exit_code:
        click.echo()
        click.secho(f"❌ {report.error}", fg="red", bold=True)
        click.echo("   Aborting.")
        sys.exit(report.exit_code)

    if dry_run:
        click.echo()
        click.secho("   Dry run — nothing was installed or written.", fg="yellow")
        click.echo()
        return

    if not quiet:
        print_next_steps(report, settings)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def detect(as_json: bool) -> None:
    """Show the detected platform, package manager and tool presence."""
    from devsetup.core.services.tool_install import (
        MissingPackageManagerError,
        UnsupportedPlatformError,
        detect_platform,
        require_package_manager,
        tool_status,
    )
    from devsetup.core.services.tool_install.detection.environment import detect_nvm

    try:
        host = detect_platform()
    except UnsupportedPlatformError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(e.exit_code)

    try:
        pm_path: str | None = require_package_manager(host)
    except MissingPackageManagerError:
        pm_path = None

    tools = tool_status(host)
    nvm = detect_nvm() if host.os_id == "linux" else None

    if as_json:
        click.echo(json.dumps({
            "platform": host.model_dump(),
            "package_manager": {"name": host.package_manager, "path": pm_path},
            "tools": tools,
            "nvm": nvm,
        }, indent=2))
        return

    click.secho(f"\n🔍 {host.label} ({host.system})", fg="cyan", bold=True)
    if pm_path:
        click.echo(f"   📦 {host.package_manager} → {pm_path}")
    else:
        click.secho(f"   ❌ {host.package_manager} not found", fg="red")
    click.echo()

    for tool in tools:
        if tool["available"]:
            click.secho(f"   ✓ {tool['label']} ", fg="green", nl=False)
            click.echo(f"→ {tool['path']}")
        else:
            click.secho(f"   ✗ {tool['label']} ", fg="red", nl=False)
            click.echo("(missing)")

    if nvm is not None:
        if nvm["installed"]:
            versions = ", ".join(nvm["available_versions"]) or "no Node.js yet"
            click.secho("   ✓ nvm ", fg="green", nl=False)
            click.echo(f"→ {nvm['nvm_dir']} ({versions})")
        else:
            click.secho("   ✗ nvm ", fg="red", nl=False)
            click.echo("(missing)")

    click.echo()


# ── Register sub-command groups from devsetup/ui/cli/ ─────────────

from devsetup.ui.cli.config import config  # noqa: E402

cli.add_command(config)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
