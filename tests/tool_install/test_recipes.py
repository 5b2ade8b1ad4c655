"""
Tool Install — recipe table and schema.
"""

from __future__ import annotations

import pytest

from devsetup.core.services.tool_install.data.recipe_schema import (
    validate_all_recipes,
    validate_recipe,
)
from devsetup.core.services.tool_install.data.recipes import (
    PACKAGE_MANAGERS,
    TOOL_RECIPES,
    recipes_for_stage,
)

ALL_TOOLS = sorted(TOOL_RECIPES)


class TestRecipeSchema:
    @pytest.mark.parametrize("tool_id", ALL_TOOLS)
    def test_schema_valid(self, tool_id: str) -> None:
        errors = validate_recipe(tool_id, TOOL_RECIPES[tool_id])
        assert errors == [], f"Schema errors for {tool_id}: {errors}"

    def test_all_recipes_clean(self) -> None:
        assert validate_all_recipes(TOOL_RECIPES) == {}

    def test_missing_fields_reported(self) -> None:
        errors = validate_recipe("broken", {"label": "Broken"})
        assert any("missing fields" in e for e in errors)

    def test_unknown_os_reported(self) -> None:
        recipe = dict(TOOL_RECIPES["jq"])
        recipe["install"] = {"windows": [["winget", "install", "jq"]]}
        errors = validate_recipe("jq", recipe)
        assert any("unknown os_id 'windows'" in e for e in errors)

    def test_string_command_rejected(self) -> None:
        recipe = dict(TOOL_RECIPES["jq"])
        recipe["install"] = {"linux": ["apt-get install -y jq"]}
        errors = validate_recipe("jq", recipe)
        assert any("list of str" in e for e in errors)


class TestRecipeTable:
    def test_expected_tools(self) -> None:
        assert set(TOOL_RECIPES) == {"neovim", "jq", "lazygit", "tmux"}

    @pytest.mark.parametrize("tool_id", ALL_TOOLS)
    def test_every_os_covered(self, tool_id: str) -> None:
        assert set(TOOL_RECIPES[tool_id]["install"]) == set(PACKAGE_MANAGERS)

    def test_linux_uses_sudo_macos_does_not(self) -> None:
        for recipe in TOOL_RECIPES.values():
            assert recipe["needs_sudo"]["linux"] is True
            assert recipe["needs_sudo"]["macos"] is False

    def test_neovim_refreshes_package_lists_first(self) -> None:
        commands = TOOL_RECIPES["neovim"]["install"]["linux"]
        assert commands[0] == ["apt-get", "update"]
        assert commands[-1] == ["apt-get", "install", "-y", "neovim"]

    def test_lazygit_uses_ppa_on_linux(self) -> None:
        commands = TOOL_RECIPES["lazygit"]["install"]["linux"]
        assert commands[0][0] == "add-apt-repository"
        assert "ppa:lazygit-team/release" in commands[0]

    def test_stages_keep_declaration_order(self) -> None:
        assert [t for t, _ in recipes_for_stage("core")] == ["neovim", "jq", "lazygit"]
        assert [t for t, _ in recipes_for_stage("late")] == ["tmux"]
