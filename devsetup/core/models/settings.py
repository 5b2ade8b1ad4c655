"""
Settings model — the optional user configuration.

Loaded from ``~/.config/devsetup/devsetup.yml`` (or ``--config``).
Every field has a default, so a missing file means "stock setup":
weather for London in metric units, the stock npm globals.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_NPM_GLOBALS = ["prettier", "eslint_d", "typescript-language-server"]

# The city lands inside a double-quoted tmux string and a {}-template
_CITY_FORBIDDEN = set('"\\{}\n\r')


class WeatherSettings(BaseModel):
    """The two values substituted into the tmux weather block."""

    model_config = ConfigDict(extra="forbid")

    city: str = "London"
    unit: Literal["metric", "imperial"] = "metric"

    @field_validator("city")
    @classmethod
    def validate_city(cls, v: str) -> str:
        """Reject characters that would break out of the tmux string."""
        v = v.strip()
        if not v:
            raise ValueError("city must not be empty")
        bad = sorted(_CITY_FORBIDDEN.intersection(v))
        if bad:
            raise ValueError(f"city must not contain {' '.join(repr(c) for c in bad)}")
        return v


class Settings(BaseModel):
    """Root settings document."""

    model_config = ConfigDict(extra="forbid")

    weather: WeatherSettings = Field(default_factory=WeatherSettings)
    install_timeout: int = Field(default=600, gt=0)   # seconds per command
    npm_globals: list[str] = Field(default_factory=lambda: list(DEFAULT_NPM_GLOBALS))
