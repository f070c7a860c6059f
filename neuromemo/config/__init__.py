"""Configuration package."""

from neuromemo.config.settings import (
    PROJECT_ROOT,
    Settings,
    get_settings,
    load_yaml_config,
    settings,
    yaml_config,
)

__all__ = [
    "PROJECT_ROOT",
    "Settings",
    "get_settings",
    "load_yaml_config",
    "settings",
    "yaml_config",
]
