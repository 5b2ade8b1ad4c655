"""
L3 Detection — Node version manager (nvm) and npm globals.

nvm is a shell function, not an executable, so ``shutil.which``
cannot see it.  It counts as installed when ``nvm.sh`` exists (and
is non-empty) in the nvm directory, the same test nvm's own
installer prints for loading it.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from devsetup.core.context import get_home_dir


def nvm_dir_candidates() -> list[Path]:
    """Directories nvm may live in, most specific first.

    ``$NVM_DIR`` wins; otherwise the installer's default: ``~/.nvm``,
    or ``$XDG_CONFIG_HOME/nvm`` when that variable is set.
    """
    candidates: list[Path] = []
    if os.environ.get("NVM_DIR"):
        candidates.append(Path(os.environ["NVM_DIR"]))
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        candidates.append(Path(xdg) / "nvm")
    candidates.append(get_home_dir() / ".nvm")
    return candidates


def default_nvm_dir() -> Path:
    """Where the nvm installer puts nvm when NVM_DIR is unset."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) / "nvm" if xdg else get_home_dir() / ".nvm"


def detect_nvm() -> dict:
    """Detect an nvm installation.

    Returns::

        {
            "installed": True,
            "nvm_dir": "/home/user/.nvm",
            "nvm_sh": "/home/user/.nvm/nvm.sh",
            "available_versions": ["v20.11.0", "v18.19.0"],
        }

    ``available_versions`` empty means nvm manages no Node release.
    """
    for candidate in nvm_dir_candidates():
        nvm_sh = candidate / "nvm.sh"
        if nvm_sh.is_file() and nvm_sh.stat().st_size > 0:
            break
    else:
        return {"installed": False}

    versions_dir = candidate / "versions" / "node"
    versions: list[str] = []
    if versions_dir.is_dir():
        try:
            versions = sorted(
                (d.name for d in versions_dir.iterdir() if d.name.startswith("v")),
                reverse=True,
            )
        except OSError:
            versions = []

    return {
        "installed": True,
        "nvm_dir": str(candidate),
        "nvm_sh": str(nvm_sh),
        "available_versions": versions,
    }


def missing_npm_globals(packages: list[str], nvm_dir: str | None = None) -> list[str]:
    """npm packages whose executable is found neither on PATH nor under nvm.

    Each global package here ships a binary of the same name.  With
    nvm the binaries live in ``<nvm_dir>/versions/node/<v>/bin`` and
    are only on PATH once nvm is loaded, so that directory is checked
    as well.
    """
    bin_dirs: list[Path] = []
    if nvm_dir:
        versions_dir = Path(nvm_dir) / "versions" / "node"
        if versions_dir.is_dir():
            bin_dirs = [d / "bin" for d in versions_dir.iterdir() if d.is_dir()]

    missing = []
    for pkg in packages:
        if shutil.which(pkg):
            continue
        if any((d / pkg).exists() for d in bin_dirs):
            continue
        missing.append(pkg)
    return missing
