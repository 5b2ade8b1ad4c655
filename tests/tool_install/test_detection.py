"""
Tool Install — platform, package manager and nvm detection.
"""

from __future__ import annotations

import platform

import pytest

from devsetup.core.services.tool_install.detection.environment import (
    default_nvm_dir,
    detect_nvm,
    missing_npm_globals,
)
from devsetup.core.services.tool_install.detection.platform import (
    detect_platform,
    is_installed,
    require_package_manager,
    tool_status,
)
from devsetup.core.services.tool_install.domain.errors import (
    MissingPackageManagerError,
    UnsupportedPlatformError,
)


class TestDetectPlatform:
    def test_darwin_is_macos_with_brew(self):
        host = detect_platform("Darwin")
        assert host.os_id == "macos"
        assert host.package_manager == "brew"
        assert host.system == "Darwin"

    def test_linux_uses_apt_get(self):
        host = detect_platform("Linux")
        assert host.os_id == "linux"
        assert host.package_manager == "apt-get"

    @pytest.mark.parametrize("system", ["Windows", "FreeBSD", "", "linux"])
    def test_unsupported(self, system):
        with pytest.raises(UnsupportedPlatformError) as exc:
            detect_platform(system)
        assert exc.value.exit_code == 1

    def test_reads_platform_system_by_default(self, monkeypatch):
        monkeypatch.setattr(platform, "system", lambda: "Darwin")
        assert detect_platform().os_id == "macos"


class TestPackageManager:
    def test_present(self, which):
        which.installed.add("apt-get")
        assert require_package_manager(detect_platform("Linux")) == "/usr/bin/apt-get"

    def test_missing_apt_get(self, which):
        with pytest.raises(MissingPackageManagerError) as exc:
            require_package_manager(detect_platform("Linux"))
        assert exc.value.exit_code == 1
        assert "apt-get" in str(exc.value)

    def test_missing_brew_points_to_brew_sh(self, which):
        with pytest.raises(MissingPackageManagerError) as exc:
            require_package_manager(detect_platform("Darwin"))
        assert "brew.sh" in str(exc.value)


class TestToolStatus:
    def test_is_installed(self, which):
        which.installed.add("nvim")
        assert is_installed("nvim")
        assert not is_installed("lazygit")

    def test_reports_every_recipe(self, which):
        which.installed |= {"jq", "tmux"}
        status = {t["id"]: t for t in tool_status(detect_platform("Darwin"))}
        assert status["jq"]["available"] is True
        assert status["neovim"]["available"] is False
        assert status["neovim"]["cli"] == "nvim"
        assert status["tmux"]["install"] == [["brew", "install", "tmux"]]


class TestDetectNvm:
    def test_not_installed(self, home):
        assert detect_nvm() == {"installed": False}

    def test_empty_nvm_sh_does_not_count(self, home):
        (home / ".nvm").mkdir()
        (home / ".nvm" / "nvm.sh").write_text("")
        assert detect_nvm()["installed"] is False

    def test_installed_without_node(self, fake_nvm):
        nvm_dir = fake_nvm()
        info = detect_nvm()
        assert info["installed"] is True
        assert info["nvm_dir"] == str(nvm_dir)
        assert info["available_versions"] == []

    def test_versions_newest_first(self, fake_nvm):
        fake_nvm(versions=("v18.19.0", "v20.11.0"))
        assert detect_nvm()["available_versions"] == ["v20.11.0", "v18.19.0"]

    def test_nvm_dir_env_wins(self, home, tmp_path, monkeypatch):
        custom = tmp_path / "custom-nvm"
        custom.mkdir()
        (custom / "nvm.sh").write_text("# nvm\n")
        monkeypatch.setenv("NVM_DIR", str(custom))
        assert detect_nvm()["nvm_dir"] == str(custom)

    def test_default_dir_follows_xdg(self, home, tmp_path, monkeypatch):
        assert default_nvm_dir() == home / ".nvm"
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert default_nvm_dir() == tmp_path / "xdg" / "nvm"


class TestMissingNpmGlobals:
    def test_all_missing(self, home, which):
        assert missing_npm_globals(["prettier", "eslint_d"]) == ["prettier", "eslint_d"]

    def test_found_on_path(self, home, which):
        which.installed.add("prettier")
        assert missing_npm_globals(["prettier", "eslint_d"]) == ["eslint_d"]

    def test_found_under_nvm(self, which, fake_nvm):
        nvm_dir = fake_nvm(versions=("v20.11.0",), bins=("eslint_d",))
        assert missing_npm_globals(["prettier", "eslint_d"], str(nvm_dir)) == ["prettier"]
