"""
L4 Execution — Best-effort Node.js runtime bootstrap.

Linux: install nvm from its remote install script, load it, install
the LTS Node release when nvm manages none, then the global npm
packages.  macOS: install the global npm packages when npm is present.

Failing commands are fatal like everywhere else.  The one degraded
case is nvm (or npm on macOS) not being loadable afterwards: the
Node/npm steps are skipped and the result says ``unavailable``.
"""

from __future__ import annotations

import logging
import shlex

from devsetup.core.models.action import StepReceipt
from devsetup.core.models.report import Platform, RuntimeBootstrapResult
from devsetup.core.models.settings import Settings
from devsetup.core.services.tool_install.data.recipes import NVM_INSTALL_URL
from devsetup.core.services.tool_install.detection.environment import (
    default_nvm_dir,
    detect_nvm,
    missing_npm_globals,
)
from devsetup.core.services.tool_install.detection.platform import is_installed
from devsetup.core.services.tool_install.execution.installer import run_commands
from devsetup.core.services.tool_install.execution.subprocess_runner import (
    Runner,
    _run_subprocess,
)

logger = logging.getLogger(__name__)


def _nvm_shell(nvm: dict, script: str) -> list[str]:
    """Wrap *script* so it runs with nvm sourced (nvm is a shell function)."""
    return [
        "bash", "-c",
        f"export NVM_DIR={shlex.quote(nvm['nvm_dir'])}; "
        f". {shlex.quote(nvm['nvm_sh'])} && {script}",
    ]


def _install_npm_globals(
    packages: list[str],
    *,
    nvm: dict | None,
    runner: Runner,
    timeout: int,
) -> StepReceipt:
    missing = missing_npm_globals(packages, nvm["nvm_dir"] if nvm else None)
    if not missing:
        return StepReceipt.skip(
            "npm-globals", reason="already installed", label="npm global packages",
        )

    logger.info("Installing global npm packages: %s", " ".join(missing))
    if nvm:
        cmd = _nvm_shell(nvm, "npm install -g " + " ".join(shlex.quote(p) for p in missing))
    else:
        cmd = ["npm", "install", "-g", *missing]
    receipt = run_commands(
        "npm-globals", [cmd], runner=runner, timeout=timeout, label="npm global packages",
    )
    receipt.metadata["packages"] = missing
    return receipt


def bootstrap_node_runtime(
    host: Platform,
    settings: Settings,
    *,
    runner: Runner = _run_subprocess,
) -> tuple[RuntimeBootstrapResult, list[StepReceipt]]:
    """Bring up Node.js and the global npm packages.

    Returns:
        The bootstrap result and the receipts of every step it ran.

    Raises:
        StepFailedError: When an install command itself fails.
    """
    if host.os_id == "macos":
        return _bootstrap_macos(settings, runner=runner)
    return _bootstrap_linux(settings, runner=runner)


def _bootstrap_macos(
    settings: Settings,
    *,
    runner: Runner,
) -> tuple[RuntimeBootstrapResult, list[StepReceipt]]:
    # Node.js itself is left to the user on macOS
    if not is_installed("npm"):
        message = (
            "npm command not found. Install Node.js from nodejs.org or with "
            "Homebrew (brew install node), then run again to install the "
            "global npm packages."
        )
        logger.warning(message)
        return RuntimeBootstrapResult(status="unavailable", message=message), [
            StepReceipt.skip("npm-globals", reason="npm not found", label="npm global packages"),
        ]

    receipt = _install_npm_globals(
        settings.npm_globals, nvm=None, runner=runner, timeout=settings.install_timeout,
    )
    return RuntimeBootstrapResult(status="ready", message="npm found on PATH"), [receipt]


def _bootstrap_linux(
    settings: Settings,
    *,
    runner: Runner,
) -> tuple[RuntimeBootstrapResult, list[StepReceipt]]:
    timeout = settings.install_timeout
    receipts: list[StepReceipt] = []
    status = "ready"

    nvm = detect_nvm()
    if nvm["installed"]:
        receipts.append(StepReceipt.skip(
            "nvm", reason="already installed", label="nvm",
            metadata={"nvm_dir": nvm["nvm_dir"]},
        ))
    else:
        # The installer follows $NVM_DIR, not $HOME, so --home DIR lands in DIR/.nvm
        nvm_dir = default_nvm_dir()
        logger.info("nvm (Node Version Manager) not found, installing it into %s", nvm_dir)
        receipts.append(run_commands(
            "nvm",
            [[
                "bash", "-c",
                'set -o pipefail; mkdir -p "$NVM_DIR" && '
                f"curl -o- {shlex.quote(NVM_INSTALL_URL)} | bash",
            ]],
            runner=runner,
            timeout=timeout,
            label="nvm",
            env_overrides={"NVM_DIR": str(nvm_dir)},
        ))
        status = "installed"
        nvm = detect_nvm()

    if not nvm["installed"]:
        if receipts[-1].skipped:
            message = "[dry-run] nvm would be installed; Node.js and npm steps follow it"
        else:
            message = (
                "nvm installation or loading failed, skipping Node.js and global "
                "npm packages. Restart your terminal (or source ~/.bashrc) and "
                "run again, or install Node.js manually."
            )
        logger.warning(message)
        return RuntimeBootstrapResult(status="unavailable", message=message), receipts

    if nvm["available_versions"]:
        receipts.append(StepReceipt.skip(
            "node", reason=f"managed by nvm ({nvm['available_versions'][0]})", label="Node.js",
        ))
    else:
        logger.info("No Node.js version managed by nvm, installing the latest LTS")
        receipts.append(run_commands(
            "node",
            [_nvm_shell(nvm, "nvm install --lts && nvm alias default 'lts/*'")],
            runner=runner,
            timeout=timeout,
            label="Node.js (LTS)",
        ))
        status = "installed"

    receipts.append(_install_npm_globals(
        settings.npm_globals, nvm=nvm, runner=runner, timeout=timeout,
    ))

    return RuntimeBootstrapResult(
        status=status,
        message="Node.js and npm available through nvm",
        nvm_dir=nvm["nvm_dir"],
    ), receipts
