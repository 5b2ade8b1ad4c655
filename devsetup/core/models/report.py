"""
Provisioning report models — platform, runtime bootstrap, full run.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from devsetup.core.models.action import StepReceipt


class Platform(BaseModel):
    """The detected host: raw identifier plus the branch it selects."""

    system: str                                 # platform.system() value
    os_id: Literal["macos", "linux"]
    package_manager: str                        # "brew" | "apt-get"

    @property
    def label(self) -> str:
        return "macOS" if self.os_id == "macos" else "Linux (Ubuntu/Debian)"


class RuntimeBootstrapResult(BaseModel):
    """Outcome of the optional Node.js runtime step.

    ``unavailable`` is the degraded case: the version manager could
    not be loaded (or npm is missing on macOS) and the Node/npm steps
    were skipped.  It is never an error.
    """

    status: Literal["ready", "installed", "unavailable"]
    message: str = ""
    nvm_dir: str | None = None

    @property
    def available(self) -> bool:
        return self.status != "unavailable"


class ProvisionReport(BaseModel):
    """Everything a provisioning run did, in order."""

    platform: Platform | None = None
    dry_run: bool = False
    receipts: list[StepReceipt] = Field(default_factory=list)
    runtime: RuntimeBootstrapResult | None = None
    error: str | None = None
    exit_code: int = 0

    @property
    def installed(self) -> list[str]:
        return [r.step for r in self.receipts if r.ok and r.commands]

    @property
    def commands_run(self) -> list[list[str]]:
        """Every command executed (empty for dry-runs)."""
        if self.dry_run:
            return []
        return [cmd for r in self.receipts for cmd in r.commands]

    def add(self, receipt: StepReceipt) -> StepReceipt:
        self.receipts.append(receipt)
        return receipt

    def get(self, step: str) -> StepReceipt | None:
        for receipt in self.receipts:
            if receipt.step == step:
                return receipt
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
