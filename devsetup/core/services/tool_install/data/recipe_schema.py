"""
L0 Data — Recipe schema validator.

Checks the shape of every recipe in TOOL_RECIPES so a typo in the
table shows up in the test suite, not halfway through a provisioning
run on somebody's laptop.
"""

from __future__ import annotations

from devsetup.core.services.tool_install.data.recipes import PACKAGE_MANAGERS

VALID_OS_IDS = set(PACKAGE_MANAGERS)
VALID_STAGES = {"core", "late"}

_REQUIRED_FIELDS = {"label", "cli", "stage", "install", "needs_sudo"}


def validate_recipe(tool_id: str, recipe: dict) -> list[str]:
    """Validate a single recipe.

    Returns:
        List of error strings (empty when valid).
    """
    errors: list[str] = []

    missing = _REQUIRED_FIELDS - set(recipe)
    if missing:
        errors.append(f"missing fields: {sorted(missing)}")
    unknown = set(recipe) - _REQUIRED_FIELDS
    if unknown:
        errors.append(f"unknown fields: {sorted(unknown)}")

    if not isinstance(recipe.get("cli", ""), str) or not recipe.get("cli"):
        errors.append("cli must be a non-empty string")

    if recipe.get("stage") not in VALID_STAGES:
        errors.append(f"stage must be one of {sorted(VALID_STAGES)}")

    install = recipe.get("install", {})
    if not isinstance(install, dict):
        errors.append("install must be a mapping of os_id → commands")
        install = {}
    for os_id, commands in install.items():
        if os_id not in VALID_OS_IDS:
            errors.append(f"install: unknown os_id '{os_id}'")
            continue
        if not commands:
            errors.append(f"install[{os_id}]: no commands")
        for i, cmd in enumerate(commands):
            if not isinstance(cmd, list) or not all(isinstance(a, str) for a in cmd):
                errors.append(f"install[{os_id}][{i}]: command must be a list of str")
            elif not cmd:
                errors.append(f"install[{os_id}][{i}]: empty command")

    sudo = recipe.get("needs_sudo", {})
    if isinstance(sudo, dict):
        for os_id in install:
            if os_id in VALID_OS_IDS and not isinstance(sudo.get(os_id), bool):
                errors.append(f"needs_sudo[{os_id}] must be a bool")
    else:
        errors.append("needs_sudo must be a mapping of os_id → bool")

    return errors


def validate_all_recipes(recipes: dict[str, dict]) -> dict[str, list[str]]:
    """Validate all recipes in the registry.

    Returns:
        Dict mapping tool_id → list of errors. Only tools with errors are included.
    """
    all_errors: dict[str, list[str]] = {}
    for tool_id, recipe in recipes.items():
        errs = validate_recipe(tool_id, recipe)
        if errs:
            all_errors[tool_id] = errs
    return all_errors
