"""
Workstation provisioning service — package re-exports.

    from devsetup.core.services.tool_install import provision

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → domain → detection → execution →
orchestration).
"""

# ── L0: Data ──
from devsetup.core.services.tool_install.data.recipes import TOOL_RECIPES  # noqa: F401

# ── L1: Domain ──
from devsetup.core.services.tool_install.domain.errors import (  # noqa: F401
    ConfigError,
    MissingPackageManagerError,
    ProvisionError,
    StepFailedError,
    UnsupportedPlatformError,
)

# ── L3: Detection ──
from devsetup.core.services.tool_install.detection.platform import (  # noqa: F401
    detect_platform,
    require_package_manager,
    tool_status,
)

# ── L5: Orchestration ──
from devsetup.core.services.tool_install.orchestration.orchestrator import (  # noqa: F401
    provision,
)
