"""
L0 Data — Workstation tool recipes.

Pure data, no logic.  One entry per tool, keyed by tool ID.

Each recipe:
  - ``cli``:        executable checked on PATH (the idempotency check)
  - ``install``:    os_id → ordered list of argv commands
  - ``needs_sudo``: os_id → whether those commands run through sudo
  - ``stage``:      where in the run the tool is installed
                    ("core" before the editor config, "late" after the runtime)

Commands are static.  Nothing is looked up at runtime.
"""

from __future__ import annotations


_APT = ["apt-get"]
_BREW = ["brew"]


TOOL_RECIPES: dict[str, dict] = {

    # ── Editor ──────────────────────────────────────────────────

    "neovim": {
        "label": "Neovim",
        "cli": "nvim",
        "stage": "core",
        "install": {
            "macos": [_BREW + ["install", "neovim"]],
            "linux": [
                _APT + ["update"],
                _APT + ["install", "-y", "neovim"],
            ],
        },
        "needs_sudo": {"macos": False, "linux": True},
    },

    # ── JSON processor (used by the tmux weather block) ─────────

    "jq": {
        "label": "jq",
        "cli": "jq",
        "stage": "core",
        "install": {
            "macos": [_BREW + ["install", "jq"]],
            "linux": [_APT + ["install", "-y", "jq"]],
        },
        "needs_sudo": {"macos": False, "linux": True},
    },

    # ── Git terminal UI (Ubuntu: from the lazygit PPA) ──────────

    "lazygit": {
        "label": "lazygit",
        "cli": "lazygit",
        "stage": "core",
        "install": {
            "macos": [_BREW + ["install", "lazygit"]],
            "linux": [
                ["add-apt-repository", "-y", "ppa:lazygit-team/release"],
                _APT + ["update"],
                _APT + ["install", "-y", "lazygit"],
            ],
        },
        "needs_sudo": {"macos": False, "linux": True},
    },

    # ── Terminal multiplexer ────────────────────────────────────

    "tmux": {
        "label": "Tmux",
        "cli": "tmux",
        "stage": "late",
        "install": {
            "macos": [_BREW + ["install", "tmux"]],
            "linux": [_APT + ["install", "-y", "tmux"]],
        },
        "needs_sudo": {"macos": False, "linux": True},
    },
}


# ── Package managers per OS branch ──────────────────────────────

PACKAGE_MANAGERS: dict[str, dict[str, str]] = {
    "macos": {
        "cli": "brew",
        "hint": "Please install Homebrew first from brew.sh",
    },
    "linux": {
        "cli": "apt-get",
        "hint": (
            "This tool is designed for Ubuntu/Debian-based systems. "
            "Please ensure you have apt-get or adapt it for your "
            "distribution's package manager."
        ),
    },
}

# platform.system() value → os_id
SYSTEM_IDS: dict[str, str] = {
    "Darwin": "macos",
    "Linux": "linux",
}


# ── Editor plugin manager ───────────────────────────────────────

LAZY_NVIM_REPO = "https://github.com/folke/lazy.nvim.git"


# ── Node.js runtime (nvm) ───────────────────────────────────────

NVM_VERSION = "v0.39.7"
NVM_INSTALL_URL = f"https://raw.githubusercontent.com/nvm-sh/nvm/{NVM_VERSION}/install.sh"


def recipes_for_stage(stage: str) -> list[tuple[str, dict]]:
    """Recipes of one stage, in declaration order."""
    return [(tid, r) for tid, r in TOOL_RECIPES.items() if r.get("stage") == stage]
