"""
Provisioning context — the single source of truth for "whose home are we setting up."

Every service that builds a home-relative path imports from here.
The home directory is set ONCE at startup by the entry point:

    - CLI:    main.py   → context.set_home_dir(<--home DIR>), when given
    - Tests:  conftest  → context.set_home_dir(tmp_path)

Module-level singleton (not a class).  get_home_dir() falls back to
``Path.home()`` when unset, so library callers work without setup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


_home_dir: Optional[Path] = None


def set_home_dir(home: Path | None) -> None:
    """Register the home directory for the current process (None resets)."""
    global _home_dir
    _home_dir = home


def get_home_dir() -> Path:
    """Return the registered home directory, or the user's real home."""
    return _home_dir if _home_dir is not None else Path.home()


def nvim_config_dir() -> Path:
    """``~/.config/nvim``"""
    return get_home_dir() / ".config" / "nvim"


def init_lua_path() -> Path:
    """``~/.config/nvim/init.lua``"""
    return nvim_config_dir() / "init.lua"


def plugin_manager_dir() -> Path:
    """``~/.config/nvim/lazy-plugins``"""
    return nvim_config_dir() / "lazy-plugins"


def tmux_conf_path() -> Path:
    """``~/.tmux.conf``"""
    return get_home_dir() / ".tmux.conf"


def settings_path() -> Path:
    """``~/.config/devsetup/devsetup.yml``"""
    return get_home_dir() / ".config" / "devsetup" / "devsetup.yml"
