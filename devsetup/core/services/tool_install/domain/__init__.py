"""
L1 Domain — pure types and rules, no I/O.
"""

from devsetup.core.services.tool_install.domain.errors import (  # noqa: F401
    ConfigError,
    ConfigFileError,
    MissingPackageManagerError,
    ProvisionError,
    StepFailedError,
    UnsupportedPlatformError,
)
