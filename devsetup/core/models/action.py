"""
Step receipts — the record of what each provisioning step did.

A receipt is produced for every step, whether it ran commands,
found the work already done, or only planned it (dry-run).
Fatal failures are raised as ``ProvisionError``; a ``failed``
receipt is only recorded for the step that raised, so the
report shows where the run stopped.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class StepReceipt(BaseModel):
    """Result of one provisioning step."""

    step: str                                   # e.g. "neovim", "init.lua"
    label: str = ""
    status: Literal["ok", "skipped", "failed"] = "ok"

    output: str = ""
    error: str | None = None
    duration_ms: int = 0
    commands: list[list[str]] = Field(default_factory=list)

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the step did its work."""
        return self.status == "ok"

    @property
    def skipped(self) -> bool:
        """Whether the step had nothing to do (or was only planned)."""
        return self.status == "skipped"

    @property
    def failed(self) -> bool:
        """Whether the step failed."""
        return self.status == "failed"

    @classmethod
    def success(cls, step: str, output: str = "", **kwargs: Any) -> StepReceipt:
        """Create a success receipt."""
        return cls(step=step, status="ok", output=output, **kwargs)

    @classmethod
    def failure(cls, step: str, error: str, **kwargs: Any) -> StepReceipt:
        """Create a failure receipt."""
        return cls(step=step, status="failed", error=error, **kwargs)

    @classmethod
    def skip(cls, step: str, reason: str = "", **kwargs: Any) -> StepReceipt:
        """Create a skip receipt."""
        return cls(step=step, status="skipped", output=reason, **kwargs)
