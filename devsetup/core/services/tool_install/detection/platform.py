"""
L3 Detection — Host platform and tool presence.

Read-only probes.  ``detect_platform`` maps the ``uname -s``
identifier onto one of the two supported branches; there is no
fallback strategy (no /etc/os-release inspection).
"""

from __future__ import annotations

import logging
import platform
import shutil

from devsetup.core.models.report import Platform
from devsetup.core.services.tool_install.data.recipes import (
    PACKAGE_MANAGERS,
    SYSTEM_IDS,
    TOOL_RECIPES,
)
from devsetup.core.services.tool_install.domain.errors import (
    MissingPackageManagerError,
    UnsupportedPlatformError,
)

logger = logging.getLogger(__name__)


def detect_platform(system: str | None = None) -> Platform:
    """Select the install branch for this host.

    Args:
        system: System identifier to use instead of ``platform.system()``.

    Raises:
        UnsupportedPlatformError: Anything other than Darwin or Linux.
    """
    if system is None:
        system = platform.system()
    logger.info("Detected OS: %s", system)

    os_id = SYSTEM_IDS.get(system)
    if os_id is None:
        raise UnsupportedPlatformError(system)

    return Platform(
        system=system,
        os_id=os_id,
        package_manager=PACKAGE_MANAGERS[os_id]["cli"],
    )


def is_installed(cli: str) -> bool:
    """Whether an executable named *cli* resolves on PATH."""
    return shutil.which(cli) is not None


def require_package_manager(host: Platform) -> str:
    """Return the package manager's path, or abort.

    Raises:
        MissingPackageManagerError: The branch's package manager is absent.
    """
    pm_path = shutil.which(host.package_manager)
    if pm_path is None:
        raise MissingPackageManagerError(
            host.package_manager,
            PACKAGE_MANAGERS[host.os_id]["hint"],
        )
    logger.debug("Package manager %s at %s", host.package_manager, pm_path)
    return pm_path


def tool_status(host: Platform) -> list[dict]:
    """Presence of every recipe's executable on this host."""
    results = []
    for tool_id, recipe in TOOL_RECIPES.items():
        path = shutil.which(recipe["cli"])
        results.append({
            "id": tool_id,
            "cli": recipe["cli"],
            "label": recipe["label"],
            "available": path is not None,
            "path": path,
            "install": recipe["install"].get(host.os_id, []),
        })
    return results
