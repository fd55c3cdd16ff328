"""Environment-driven configuration."""

from .settings import (
    get_setting,
    get_all_settings,
    set_setting,
    reset_settings,
    force_overrides,
    sizing_overrides,
)

__all__ = [
    "get_setting",
    "get_all_settings",
    "set_setting",
    "reset_settings",
    "force_overrides",
    "sizing_overrides",
]
