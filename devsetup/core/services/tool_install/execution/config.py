"""
L4 Execution — Configuration file emission.

Writes the editor and multiplexer configs from the fixed templates.

- ``init.lua`` is created once and never touched again.
- ``~/.tmux.conf`` is created with the base template and the weather
  block.  When the file already exists, only the weather block is
  managed: it lives between marker lines and is replaced in place on
  later runs, so repeated runs never stack up copies of it.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from devsetup.core.context import init_lua_path, nvim_config_dir, tmux_conf_path
from devsetup.core.models.action import StepReceipt
from devsetup.core.models.settings import WeatherSettings
from devsetup.core.services.tool_install.data.templates import (
    INIT_LUA,
    TMUX_BASE,
    TMUX_WEATHER_BLOCK,
    WEATHER_BLOCK_BEGIN,
    WEATHER_BLOCK_END,
)
from devsetup.core.services.tool_install.domain.errors import ConfigFileError

logger = logging.getLogger(__name__)

_BEGIN = re.escape(WEATHER_BLOCK_BEGIN)
_END = re.escape(WEATHER_BLOCK_END)

# A BEGIN with no END of its own never pairs with a later block's END.
_MARKED_BLOCK_RE = re.compile(
    rf"^{_BEGIN}\n(?:(?!^{_BEGIN}).)*?^{_END}[^\n]*\n?",
    re.DOTALL | re.MULTILINE,
)

# tmux.conf may hold bytes that are not UTF-8; they round-trip unchanged.
_TEXT_IO = {"encoding": "utf-8", "errors": "surrogateescape"}


def _render_template(template: str, inputs: dict) -> str:
    """Substitute ``{var}`` placeholders with input values.

    Simple string replacement — no Jinja, no escaping.  Braces that
    are not an input key (Lua tables, ``${SHELL_VARS}``, tmux ``#{}``
    formats) pass through unchanged.
    """
    result = template
    for key, value in inputs.items():
        result = result.replace(f"{{{key}}}", str(value))
    return result


def weather_block(weather: WeatherSettings) -> str:
    """The rendered weather block wrapped in its marker lines."""
    body = _render_template(
        TMUX_WEATHER_BLOCK,
        {"weather_city": weather.city, "weather_unit": weather.unit},
    )
    return f"{WEATHER_BLOCK_BEGIN}\n{body}{WEATHER_BLOCK_END}\n"


def ensure_config_dir(*, dry_run: bool = False) -> Path:
    """``mkdir -p ~/.config/nvim``"""
    path = nvim_config_dir()
    if not dry_run:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigFileError(path, e) from e
        logger.info("Neovim configuration directory: %s", path)
    return path


def write_editor_config(*, dry_run: bool = False) -> StepReceipt:
    """Create ``init.lua`` from the template if it does not exist."""
    path = init_lua_path()
    meta = {"path": str(path)}

    if path.exists():
        logger.info("init.lua already exists at %s, leaving it alone", path)
        return StepReceipt.skip(
            "init.lua",
            reason="already exists (replace it manually to update)",
            label="init.lua",
            metadata={**meta, "action": "kept"},
        )

    if dry_run:
        return StepReceipt.skip(
            "init.lua", reason=f"[dry-run] would create {path}", label="init.lua",
            metadata={**meta, "action": "create", "dry_run": True},
        )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(INIT_LUA, encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(path, e) from e
    logger.info("Created %s", path)
    return StepReceipt.success(
        "init.lua", output=f"created {path}", label="init.lua",
        metadata={**meta, "action": "created"},
    )


def upsert_marked_block(text: str, block: str) -> tuple[str, str]:
    """Put *block* into *text*, replacing a previous copy if one exists.

    Returns:
        ``(new_text, action)`` where action is ``"replaced"``,
        ``"unchanged"`` or ``"appended"``.
    """
    if _MARKED_BLOCK_RE.search(text):
        new_text = _MARKED_BLOCK_RE.sub(lambda _m: block, text, count=1)
        return new_text, "unchanged" if new_text == text else "replaced"

    separator = "\n" if text.endswith("\n") or not text else "\n\n"
    return text + separator + block, "appended"


def write_multiplexer_config(
    weather: WeatherSettings,
    *,
    dry_run: bool = False,
) -> StepReceipt:
    """Create ``~/.tmux.conf`` or refresh its weather block."""
    path = tmux_conf_path()
    block = weather_block(weather)
    meta = {"path": str(path), "city": weather.city, "unit": weather.unit}

    if not path.exists():
        action = "created"
        new_text = TMUX_BASE + "\n" + block
    else:
        try:
            current = path.read_text(**_TEXT_IO)
        except OSError as e:
            raise ConfigFileError(path, e) from e
        new_text, action = upsert_marked_block(current, block)
        if action == "unchanged":
            logger.info("%s weather block is up to date", path)
            return StepReceipt.skip(
                ".tmux.conf", reason="weather block up to date", label=".tmux.conf",
                metadata={**meta, "action": action},
            )

    if dry_run:
        return StepReceipt.skip(
            ".tmux.conf", reason=f"[dry-run] weather block would be {action}",
            label=".tmux.conf", metadata={**meta, "action": action, "dry_run": True},
        )

    try:
        path.write_text(new_text, **_TEXT_IO)
    except OSError as e:
        raise ConfigFileError(path, e) from e
    logger.info("%s: weather block %s", path, action)
    return StepReceipt.success(
        ".tmux.conf", output=f"{path} {action}", label=".tmux.conf",
        metadata={**meta, "action": action},
    )
