"""
Tool Install — best-effort Node.js runtime bootstrap.
"""

from __future__ import annotations

import pytest

from devsetup.core.models.settings import Settings
from devsetup.core.services.tool_install.data.recipes import NVM_INSTALL_URL
from devsetup.core.services.tool_install.detection.platform import detect_platform
from devsetup.core.services.tool_install.domain.errors import StepFailedError
from devsetup.core.services.tool_install.execution.runtime import bootstrap_node_runtime
from devsetup.core.services.tool_install.execution.subprocess_runner import _plan_only

LINUX = detect_platform("Linux")
MACOS = detect_platform("Darwin")


class TestLinuxBootstrap:
    def test_nvm_not_loadable_degrades(self, home, which, runner):
        # install script "succeeds" but leaves no nvm.sh behind
        result, receipts = bootstrap_node_runtime(LINUX, Settings(), runner=runner)

        assert result.status == "unavailable"
        assert not result.available
        assert "skipping Node.js" in result.message
        assert [r.step for r in receipts] == ["nvm"]
        assert len(runner.commands) == 1
        assert NVM_INSTALL_URL in runner.commands[0][-1]

    def test_fresh_install_runs_every_step(self, home, which, runner, fake_nvm):
        runner.on_run = lambda cmd: fake_nvm() if "install.sh" in cmd[-1] else None

        result, receipts = bootstrap_node_runtime(LINUX, Settings(), runner=runner)

        assert result.status == "installed"
        assert result.nvm_dir == str(home / ".nvm")
        assert [r.step for r in receipts] == ["nvm", "node", "npm-globals"]
        node_cmd = runner.commands[1][-1]
        assert "nvm.sh" in node_cmd
        assert "nvm install --lts" in node_cmd
        npm_cmd = runner.commands[2][-1]
        assert "npm install -g prettier eslint_d typescript-language-server" in npm_cmd

    def test_already_ready_runs_nothing(self, home, which, runner, fake_nvm):
        fake_nvm(
            versions=("v20.11.0",),
            bins=("prettier", "eslint_d", "typescript-language-server"),
        )
        result, receipts = bootstrap_node_runtime(LINUX, Settings(), runner=runner)

        assert result.status == "ready"
        assert all(r.skipped for r in receipts)
        assert runner.call_count == 0

    def test_only_missing_globals_installed(self, home, which, runner, fake_nvm):
        fake_nvm(versions=("v20.11.0",), bins=("prettier",))
        _, receipts = bootstrap_node_runtime(LINUX, Settings(), runner=runner)

        assert runner.call_count == 1
        assert receipts[-1].metadata["packages"] == ["eslint_d", "typescript-language-server"]

    def test_install_script_failure_is_fatal(self, home, which, runner):
        runner.fail_when(lambda cmd: "install.sh" in cmd[-1], returncode=22)
        with pytest.raises(StepFailedError) as exc:
            bootstrap_node_runtime(LINUX, Settings(), runner=runner)
        assert exc.value.exit_code == 22

    def test_npm_failure_is_fatal(self, home, which, runner, fake_nvm):
        fake_nvm(versions=("v20.11.0",))
        runner.fail_when(lambda cmd: "npm install" in cmd[-1], returncode=243)
        with pytest.raises(StepFailedError) as exc:
            bootstrap_node_runtime(LINUX, Settings(), runner=runner)
        assert exc.value.exit_code == 243

    def test_install_script_targets_provisioned_home(self, home, which, runner, fake_nvm, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path / "real"))
        runner.on_run = lambda cmd: fake_nvm() if "install.sh" in cmd[-1] else None

        result, _ = bootstrap_node_runtime(LINUX, Settings(), runner=runner)

        assert runner.calls[0]["env_overrides"] == {"NVM_DIR": str(home / ".nvm")}
        assert 'mkdir -p "$NVM_DIR"' in runner.commands[0][-1]
        assert result.status == "installed"
        assert result.nvm_dir == str(home / ".nvm")

    def test_install_script_honours_xdg_config_home(self, home, which, runner, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        bootstrap_node_runtime(LINUX, Settings(), runner=runner)
        assert runner.calls[0]["env_overrides"] == {"NVM_DIR": str(tmp_path / "xdg" / "nvm")}

    def test_dry_run_plans_install_script(self, home, which):
        result, receipts = bootstrap_node_runtime(LINUX, Settings(), runner=_plan_only)
        assert result.status == "unavailable"
        assert result.message.startswith("[dry-run]")
        assert receipts[0].skipped


class TestMacosBootstrap:
    def test_without_npm_skips(self, home, which, runner):
        result, receipts = bootstrap_node_runtime(MACOS, Settings(), runner=runner)
        assert result.status == "unavailable"
        assert "brew install node" in result.message
        assert receipts[0].skipped
        assert runner.call_count == 0

    def test_with_npm_installs_globals(self, home, which, runner):
        which.installed.add("npm")
        result, _ = bootstrap_node_runtime(MACOS, Settings(), runner=runner)
        assert result.status == "ready"
        assert runner.commands == [
            ["npm", "install", "-g", "prettier", "eslint_d", "typescript-language-server"],
        ]
        assert runner.calls[0]["needs_sudo"] is False

    def test_custom_globals(self, home, which, runner):
        which.installed.add("npm")
        bootstrap_node_runtime(MACOS, Settings(npm_globals=["tsx"]), runner=runner)
        assert runner.commands == [["npm", "install", "-g", "tsx"]]
