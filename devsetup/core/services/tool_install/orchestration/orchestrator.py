"""
L5 Orchestration — The provisioning run.

Ties the stages together in their fixed order:

    1. platform detection          → UnsupportedPlatformError
    2. package-manager check       → MissingPackageManagerError
    3. editor, JSON tool, Git UI
    4. config dir, plugin manager, init.lua
    5. Node.js runtime (best-effort)
    6. tmux
    7. ~/.tmux.conf

Strictly sequential.  The first ``ProvisionError`` stops the run; it
is recorded on the report (``error`` / ``exit_code``) instead of
propagating, so callers always get the steps that did complete.
"""

from __future__ import annotations

import logging
import time

from devsetup.core.models.action import StepReceipt
from devsetup.core.models.report import ProvisionReport
from devsetup.core.models.settings import Settings
from devsetup.core.services.tool_install.data.recipes import recipes_for_stage
from devsetup.core.services.tool_install.detection.platform import (
    detect_platform,
    require_package_manager,
)
from devsetup.core.services.tool_install.domain.errors import (
    ProvisionError,
    StepFailedError,
)
from devsetup.core.services.tool_install.execution.config import (
    ensure_config_dir,
    write_editor_config,
    write_multiplexer_config,
)
from devsetup.core.services.tool_install.execution.installer import (
    ensure_plugin_manager,
    ensure_tool,
)
from devsetup.core.services.tool_install.execution.runtime import bootstrap_node_runtime
from devsetup.core.services.tool_install.execution.subprocess_runner import (
    Runner,
    _plan_only,
    _run_subprocess,
)

logger = logging.getLogger(__name__)


def provision(
    settings: Settings | None = None,
    *,
    system: str | None = None,
    dry_run: bool = False,
    runner: Runner | None = None,
) -> ProvisionReport:
    """Provision the workstation.

    Args:
        settings: Effective settings (defaults when None).
        system: System identifier override (``platform.system()`` otherwise).
        dry_run: Plan every step; run no command and write no file.
        runner: Command runner override.  Defaults to the real
            subprocess runner, or the planning runner for dry-runs.

    Returns:
        The report.  ``report.exit_code`` is 0 on full completion.
    """
    settings = settings or Settings()
    if runner is None:
        runner = _plan_only if dry_run else _run_subprocess

    report = ProvisionReport(dry_run=dry_run)
    start = time.monotonic()

    try:
        _run_stages(report, settings, system=system, dry_run=dry_run, runner=runner)
    except ProvisionError as e:
        logger.error("Provisioning aborted: %s", e)
        report.error = str(e)
        report.exit_code = e.exit_code
        if isinstance(e, StepFailedError):
            report.add(StepReceipt.failure(
                e.step, str(e), label=e.step, commands=[e.command],
                metadata={"exit_code": e.exit_code, "stderr": e.stderr},
            ))

    logger.info(
        "Provisioning finished in %dms (exit %d)",
        int((time.monotonic() - start) * 1000), report.exit_code,
    )
    return report


def _run_stages(
    report: ProvisionReport,
    settings: Settings,
    *,
    system: str | None,
    dry_run: bool,
    runner: Runner,
) -> None:
    timeout = settings.install_timeout

    host = detect_platform(system)
    report.platform = host
    require_package_manager(host)

    for tool_id, _recipe in recipes_for_stage("core"):
        report.add(ensure_tool(tool_id, host, runner=runner, timeout=timeout))

    ensure_config_dir(dry_run=dry_run)
    report.add(ensure_plugin_manager(runner=runner, timeout=timeout))
    report.add(write_editor_config(dry_run=dry_run))

    runtime, receipts = bootstrap_node_runtime(host, settings, runner=runner)
    report.runtime = runtime
    for receipt in receipts:
        report.add(receipt)

    for tool_id, _recipe in recipes_for_stage("late"):
        report.add(ensure_tool(tool_id, host, runner=runner, timeout=timeout))

    report.add(write_multiplexer_config(settings.weather, dry_run=dry_run))
