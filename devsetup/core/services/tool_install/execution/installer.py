"""
L4 Execution — Idempotent installers.

One table-driven operation replaces the per-tool check/install
blocks: look the executable up on PATH, and only when it is missing
run the recipe's commands for this platform, in order.  The first
non-zero exit aborts the whole run (``StepFailedError``); nothing
already installed is rolled back.
"""

from __future__ import annotations

import logging
import time

from devsetup.core.context import plugin_manager_dir
from devsetup.core.models.action import StepReceipt
from devsetup.core.models.report import Platform
from devsetup.core.services.tool_install.data.recipes import LAZY_NVIM_REPO, TOOL_RECIPES
from devsetup.core.services.tool_install.detection.platform import is_installed
from devsetup.core.services.tool_install.domain.errors import StepFailedError
from devsetup.core.services.tool_install.execution.subprocess_runner import (
    Runner,
    _run_subprocess,
)

logger = logging.getLogger(__name__)


def run_commands(
    step: str,
    commands: list[list[str]],
    *,
    runner: Runner = _run_subprocess,
    needs_sudo: bool = False,
    timeout: int = 600,
    label: str = "",
    env_overrides: dict[str, str] | None = None,
) -> StepReceipt:
    """Run *commands* in order; raise on the first failure.

    Returns:
        ``ok`` receipt listing the commands, or a ``skipped`` receipt
        marked ``[dry-run]`` when the runner only planned them.

    Raises:
        StepFailedError: carrying the failing command's exit code.
    """
    start = time.monotonic()
    dry_run = False
    outputs: list[str] = []

    for cmd in commands:
        result = runner(
            cmd, needs_sudo=needs_sudo, timeout=timeout, env_overrides=env_overrides,
        )
        if not result["ok"]:
            logger.error("%s: %s failed: %s", step, " ".join(cmd), result.get("error"))
            raise StepFailedError(
                step,
                cmd,
                exit_code=result.get("returncode", 1),
                error=result.get("error", ""),
                stderr=result.get("stderr", ""),
            )
        dry_run = dry_run or bool(result.get("dry_run"))
        if result.get("stdout"):
            outputs.append(result["stdout"])

    elapsed_ms = int((time.monotonic() - start) * 1000)
    if dry_run:
        return StepReceipt.skip(
            step,
            reason="[dry-run] would run " + "; ".join(" ".join(c) for c in commands),
            label=label,
            commands=commands,
            metadata={"dry_run": True, "needs_sudo": needs_sudo},
        )
    return StepReceipt.success(
        step,
        output="\n".join(outputs),
        label=label,
        commands=commands,
        duration_ms=elapsed_ms,
        metadata={"needs_sudo": needs_sudo},
    )


def ensure_tool(
    tool_id: str,
    host: Platform,
    *,
    runner: Runner = _run_subprocess,
    timeout: int = 600,
) -> StepReceipt:
    """Install *tool_id* unless its executable is already on PATH."""
    recipe = TOOL_RECIPES[tool_id]
    label = recipe["label"]

    if is_installed(recipe["cli"]):
        logger.info("%s is already installed", label)
        return StepReceipt.skip(tool_id, reason="already installed", label=label)

    logger.info("%s not found, installing with %s", label, host.package_manager)
    return run_commands(
        tool_id,
        recipe["install"][host.os_id],
        runner=runner,
        needs_sudo=recipe["needs_sudo"][host.os_id],
        timeout=timeout,
        label=label,
    )


def ensure_plugin_manager(
    *,
    runner: Runner = _run_subprocess,
    timeout: int = 600,
) -> StepReceipt:
    """Clone lazy.nvim into ``~/.config/nvim/lazy-plugins`` if missing."""
    target = plugin_manager_dir()
    if target.is_dir():
        return StepReceipt.skip(
            "lazy.nvim", reason="already installed", label="lazy.nvim",
            metadata={"path": str(target)},
        )

    receipt = run_commands(
        "lazy.nvim",
        [["git", "clone", "--depth", "1", LAZY_NVIM_REPO, str(target)]],
        runner=runner,
        timeout=timeout,
        label="lazy.nvim",
    )
    receipt.metadata["path"] = str(target)
    return receipt
