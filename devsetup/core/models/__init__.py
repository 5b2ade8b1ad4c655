"""
Domain models — Pydantic types for provisioning.

    from devsetup.core.models import Settings, StepReceipt, ProvisionReport
"""

from devsetup.core.models.action import StepReceipt
from devsetup.core.models.report import Platform, ProvisionReport, RuntimeBootstrapResult
from devsetup.core.models.settings import DEFAULT_NPM_GLOBALS, Settings, WeatherSettings

__all__ = [
    "DEFAULT_NPM_GLOBALS",
    "Platform",
    "ProvisionReport",
    "RuntimeBootstrapResult",
    "Settings",
    "StepReceipt",
    "WeatherSettings",
]
