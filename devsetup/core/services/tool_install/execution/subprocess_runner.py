"""
L4 Execution — Core subprocess runner.

The SINGLE PLACE where ``subprocess.run`` is called for provisioning
commands.  Sudo prefixing, environment, timeouts and logging are
centralised here.  Runners return result dicts and never raise;
the caller decides whether a failure is fatal.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)

# (cmd, *, needs_sudo=..., timeout=..., env_overrides=...) -> result dict
Runner = Callable[..., dict[str, Any]]

_TAIL = 2000


def _is_root() -> bool:
    return hasattr(os, "geteuid") and os.geteuid() == 0


def _with_sudo(cmd: list[str], needs_sudo: bool) -> list[str]:
    """Prefix ``sudo`` unless the process already runs as root."""
    if needs_sudo and not _is_root():
        return ["sudo"] + cmd
    return cmd


def _run_subprocess(
    cmd: list[str],
    *,
    needs_sudo: bool = False,
    timeout: int = 600,
    env_overrides: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Run one provisioning command and wait for it.

    ``sudo`` prompts for its password on the controlling terminal,
    so stdin is left attached.  Output is captured and logged at
    DEBUG; the tail is kept in the result for error reporting.

    Args:
        cmd: Command list for ``subprocess.run()``.
        needs_sudo: Whether the command requires root.
        timeout: Seconds before ``TimeoutExpired``.
        env_overrides: Extra env vars, ``$VAR`` references expanded.

    Returns:
        ``{"ok": True, "returncode": 0, "stdout": "...", "elapsed_ms": N}``
        on success, ``{"ok": False, "returncode": N, "error": "...", ...}``
        on failure.
    """
    full_cmd = _with_sudo(cmd, needs_sudo)

    env = os.environ.copy()
    if env_overrides:
        for key, value in env_overrides.items():
            env[key] = os.path.expandvars(value)

    logger.info("Running: %s", " ".join(full_cmd))
    start = time.monotonic()
    try:
        result = subprocess.run(
            full_cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            env=env,
        )
    except subprocess.TimeoutExpired:
        logger.error("Timed out after %ss: %s", timeout, " ".join(full_cmd))
        return {"ok": False, "returncode": 1, "error": f"Command timed out ({timeout}s)"}
    except FileNotFoundError:
        return {"ok": False, "returncode": 127, "error": f"Command not found: {full_cmd[0]}"}
    except OSError as e:
        logger.exception("Subprocess error: %s", full_cmd)
        return {"ok": False, "returncode": 1, "error": str(e)}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = result.stdout[-_TAIL:] if result.stdout else ""
    stderr = result.stderr[-_TAIL:] if result.stderr else ""
    if stdout:
        logger.debug("stdout:\n%s", stdout)

    if result.returncode == 0:
        return {
            "ok": True,
            "returncode": 0,
            "stdout": stdout,
            "elapsed_ms": elapsed_ms,
        }

    logger.debug("stderr:\n%s", stderr)
    return {
        "ok": False,
        "returncode": result.returncode,
        "error": f"Command failed (exit {result.returncode})",
        "stderr": stderr,
        "stdout": stdout,
        "elapsed_ms": elapsed_ms,
    }


def _plan_only(
    cmd: list[str],
    *,
    needs_sudo: bool = False,
    **_: Any,
) -> dict[str, Any]:
    """Dry-run runner: report the command, execute nothing."""
    full_cmd = _with_sudo(cmd, needs_sudo)
    logger.info("[dry-run] %s", " ".join(full_cmd))
    return {"ok": True, "returncode": 0, "dry_run": True, "stdout": "", "elapsed_ms": 0}
