"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, Callable

import pytest

from devsetup.core.context import set_home_dir
from devsetup.core.services.tool_install.data.recipes import TOOL_RECIPES


class FakeRunner:
    """Records every command instead of executing it.

    By default every command succeeds.  ``fail_when`` makes the first
    command matching a predicate return the given exit code, and
    ``on_run`` lets a test simulate a command's side effects.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._failures: list[tuple[Callable[[list[str]], bool], int]] = []
        self.on_run: Callable[[list[str]], None] | None = None

    @property
    def commands(self) -> list[list[str]]:
        return [c["cmd"] for c in self.calls]

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def fail_when(self, predicate: Callable[[list[str]], bool], returncode: int = 1) -> None:
        self._failures.append((predicate, returncode))

    def __call__(self, cmd: list[str], *, needs_sudo: bool = False, **kwargs: Any) -> dict:
        self.calls.append({"cmd": cmd, "needs_sudo": needs_sudo, **kwargs})
        for predicate, returncode in self._failures:
            if predicate(cmd):
                return {
                    "ok": False,
                    "returncode": returncode,
                    "error": f"Command failed (exit {returncode})",
                    "stderr": "E: simulated failure",
                }
        if self.on_run:
            self.on_run(cmd)
        return {"ok": True, "returncode": 0, "stdout": "", "elapsed_ms": 1}


class FakeWhich:
    """Stands in for ``shutil.which`` over a set of installed executables."""

    def __init__(self, installed: set[str] | None = None) -> None:
        self.installed: set[str] = set(installed or ())

    def __call__(self, name: str, *args: Any, **kwargs: Any) -> str | None:
        return f"/usr/bin/{name}" if name in self.installed else None


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """A throwaway home directory registered as the provisioning target."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.delenv("NVM_DIR", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    set_home_dir(home_dir)
    yield home_dir
    set_home_dir(None)


@pytest.fixture
def which(monkeypatch: pytest.MonkeyPatch) -> FakeWhich:
    """Nothing installed; tests add executables to ``which.installed``."""
    fake = FakeWhich()
    monkeypatch.setattr(shutil, "which", fake)
    return fake


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


def make_nvm(home_dir: Path, versions: tuple[str, ...] = (), bins: tuple[str, ...] = ()) -> Path:
    """Create a fake nvm install under ``~/.nvm``."""
    nvm_dir = home_dir / ".nvm"
    nvm_dir.mkdir(exist_ok=True)
    (nvm_dir / "nvm.sh").write_text("# nvm\n")
    for version in versions:
        bin_dir = nvm_dir / "versions" / "node" / version / "bin"
        bin_dir.mkdir(parents=True, exist_ok=True)
        for name in bins:
            (bin_dir / name).write_text("")
    return nvm_dir


def make_fully_provisioned(home_dir: Path, which: FakeWhich, os_id: str = "linux") -> None:
    """Everything a provisioning run would install is already there."""
    which.installed |= {r["cli"] for r in TOOL_RECIPES.values()}
    which.installed |= {"apt-get", "brew", "npm", "git"}
    (home_dir / ".config" / "nvim" / "lazy-plugins").mkdir(parents=True, exist_ok=True)
    if os_id == "linux":
        make_nvm(
            home_dir,
            versions=("v20.11.0",),
            bins=("node", "npm", "prettier", "eslint_d", "typescript-language-server"),
        )
    else:
        which.installed |= {"prettier", "eslint_d", "typescript-language-server"}


@pytest.fixture
def fake_nvm(home: Path) -> Callable[..., Path]:
    """Factory: ``fake_nvm(versions=(...), bins=(...))``."""
    return lambda versions=(), bins=(): make_nvm(home, versions, bins)


@pytest.fixture
def provisioned(home: Path, which: FakeWhich) -> Callable[..., None]:
    """Factory: mark everything as installed for ``os_id``."""
    return lambda os_id="linux": make_fully_provisioned(home, which, os_id)
