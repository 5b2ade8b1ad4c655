"""
Report rendering for the terminal — step list and next steps.
"""

from __future__ import annotations

import click

from devsetup.core.context import tmux_conf_path
from devsetup.core.models.report import ProvisionReport
from devsetup.core.models.settings import Settings


def render_report(report: ProvisionReport, *, verbose: bool = False) -> None:
    """Print one line per step."""
    if report.platform:
        mode = "[dry-run] " if report.dry_run else ""
        click.secho(
            f"\n🛠  {mode}Provisioning {report.platform.label} ({report.platform.package_manager})",
            fg="cyan", bold=True,
        )
        click.echo()

    for receipt in report.receipts:
        name = receipt.label or receipt.step
        if receipt.ok:
            detail = "installed" if receipt.commands else receipt.output
            timing = f" ({receipt.duration_ms}ms)" if receipt.duration_ms else ""
            click.secho(f"   ✓ {name}", fg="green", nl=False)
            click.echo(f" — {detail}{timing}")
            if verbose:
                for cmd in receipt.commands:
                    click.echo(f"     │ $ {' '.join(cmd)}")
        elif receipt.failed:
            click.secho(f"   ✗ {name}", fg="red")
            stderr = receipt.metadata.get("stderr") or ""
            for line in stderr.strip().splitlines()[-5:]:
                click.echo(f"     │ {line}")
        else:
            click.secho(f"   ⊘ {name} ", fg="yellow", nl=False)
            click.echo(f"({receipt.output})")

    if report.runtime and not report.runtime.available:
        click.echo()
        click.secho(f"   ⚠️  {report.runtime.message}", fg="yellow")


def print_next_steps(report: ProvisionReport, settings: Settings) -> None:
    """The closing summary: what to do after provisioning."""
    city = settings.weather.city
    tmux_conf = tmux_conf_path()

    click.echo()
    click.secho("Neovim, Tmux, and lazygit setup completed.", fg="green", bold=True)
    click.echo("-----------------------------------------")
    click.echo("Next steps:")
    click.echo("1. Open Neovim (nvim) or Tmux (tmux).")
    click.echo(
        "2. Neovim: Lazy.nvim will automatically install plugins on first startup. "
        "Restart Neovim after plugin installation."
    )
    click.echo(
        "3. Tmux: Configuration is applied automatically on next Tmux session. "
        "Start tmux by typing 'tmux' in your terminal."
    )
    click.echo("4. Open a JavaScript file in Neovim within a Tmux session and test the IDE features.")
    step = 5
    if report.runtime and report.runtime.status == "installed" and report.runtime.nvm_dir:
        click.echo(
            f"{step}. nvm was just installed: restart your terminal or source your "
            "shell configuration (.bashrc or .zshrc) to use it in new sessions."
        )
        step += 1
    click.echo(
        f"{step}. Tmux weather: start a new Tmux session to see the weather for "
        f"'{city}' in the status bar. To change the city, edit WEATHER_CITY in "
        f"{tmux_conf} (or set weather.city in your devsetup.yml and run again), "
        f"then reload with prefix + :source-file {tmux_conf}."
    )
    click.echo(
        f"{step + 1}. lazygit: navigate to a Git repository in your terminal and type 'lazygit'."
    )
    click.echo("-----------------------------------------")
