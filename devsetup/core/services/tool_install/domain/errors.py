"""
L1 Domain — Provisioning failures.

Every fatal condition is a ``ProvisionError`` carrying the process exit
code the CLI should use.  Callers never catch these mid-run: the first
one aborts the whole provisioning pass, with no rollback of steps that
already completed.

The optional runtime bootstrap is the one step that does NOT raise;
its degraded outcome is a ``RuntimeBootstrapResult``.
"""

from __future__ import annotations


class ProvisionError(Exception):
    """Base class for fatal provisioning errors."""

    exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UnsupportedPlatformError(ProvisionError):
    """The system identifier is neither macOS nor Linux."""

    def __init__(self, system: str):
        super().__init__(
            f"Unsupported operating system: {system or 'unknown'}. "
            "This tool supports macOS (Homebrew) and Ubuntu/Debian (apt-get)."
        )
        self.system = system


class MissingPackageManagerError(ProvisionError):
    """The platform's package manager is not on PATH."""

    def __init__(self, package_manager: str, hint: str = ""):
        message = f"{package_manager} package manager not found."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)
        self.package_manager = package_manager


def _shell_exit_code(returncode: int) -> int:
    if returncode < 0:
        return 128 - returncode
    return returncode or 1


class StepFailedError(ProvisionError):
    """An external command exited non-zero (or could not run).

    ``exit_code`` is the failing command's own return code, so the CLI
    exits with exactly what the first failing command returned.  A
    command killed by signal N (negative return code) maps to 128+N,
    as a shell reports it.
    """

    def __init__(
        self,
        step: str,
        command: list[str],
        *,
        exit_code: int = 1,
        error: str = "",
        stderr: str = "",
    ):
        detail = error or f"exit {exit_code}"
        super().__init__(
            f"{step} failed: {' '.join(command)} ({detail})",
            exit_code=_shell_exit_code(exit_code),
        )
        self.step = step
        self.command = command
        self.stderr = stderr


class ConfigError(ProvisionError):
    """Raised when the settings file is invalid or unreadable."""


class ConfigFileError(ProvisionError):
    """A generated config file could not be read or written."""

    def __init__(self, path, error: OSError):
        super().__init__(f"Cannot update {path}: {error.strerror or error}")
        self.path = str(path)
