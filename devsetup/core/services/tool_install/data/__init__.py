"""
L0 Data — ``__init__.py`` re-exports all data constants.
"""

from devsetup.core.services.tool_install.data.recipes import (  # noqa: F401
    LAZY_NVIM_REPO,
    NVM_INSTALL_URL,
    PACKAGE_MANAGERS,
    SYSTEM_IDS,
    TOOL_RECIPES,
    recipes_for_stage,
)
from devsetup.core.services.tool_install.data.templates import (  # noqa: F401
    INIT_LUA,
    TMUX_BASE,
    TMUX_WEATHER_BLOCK,
    WEATHER_BLOCK_BEGIN,
    WEATHER_BLOCK_END,
)
