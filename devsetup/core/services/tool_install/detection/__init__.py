"""
L3 Detection — ``__init__.py`` re-exports all detection functions.

These functions READ system state but never WRITE.
"""

from devsetup.core.services.tool_install.detection.environment import (  # noqa: F401
    default_nvm_dir,
    detect_nvm,
    missing_npm_globals,
    nvm_dir_candidates,
)
from devsetup.core.services.tool_install.detection.platform import (  # noqa: F401
    detect_platform,
    is_installed,
    require_package_manager,
    tool_status,
)
