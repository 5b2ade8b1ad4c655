"""
L4 Execution — ``__init__.py`` re-exports all execution functions.

Everything here has side effects: subprocesses and file writes.
"""

from devsetup.core.services.tool_install.execution.config import (  # noqa: F401
    ensure_config_dir,
    upsert_marked_block,
    weather_block,
    write_editor_config,
    write_multiplexer_config,
)
from devsetup.core.services.tool_install.execution.installer import (  # noqa: F401
    ensure_plugin_manager,
    ensure_tool,
    run_commands,
)
from devsetup.core.services.tool_install.execution.runtime import (  # noqa: F401
    bootstrap_node_runtime,
)
from devsetup.core.services.tool_install.execution.subprocess_runner import (  # noqa: F401
    Runner,
    _plan_only,
    _run_subprocess,
)
