"""
L5 Orchestration — top-level coordinators.
"""

from devsetup.core.services.tool_install.orchestration.orchestrator import (  # noqa: F401
    provision,
)
