"""Configuration page description for the Thin watchface."""

from .settings import (
    SETTINGS_SCHEMA,
    DataKey,
    get_default_settings_values,
    get_schema,
    get_settings_schema,
)

__all__ = [
    "SETTINGS_SCHEMA",
    "DataKey",
    "get_default_settings_values",
    "get_schema",
    "get_settings_schema",
]
