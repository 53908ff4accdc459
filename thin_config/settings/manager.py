from __future__ import annotations

import copy
from enum import IntEnum
from typing import Any, Dict, Optional

from ..config import CONFIG_JSON_FILE, LOG_PREFIX, SCHEMA_VERSION
from ..logger import logger
from ..paths import public_path
from ..utils import write_json
from .codec import get_settings_schema
from .options import iter_toggles


class DataKey(IntEnum):
    """Message keys the watch reads settings under."""

    DataKeyDate = 0
    DataKeyDay = 1
    DataKeyBT = 2
    DataKeyBattery = 3
    DataKeySecondHand = 4


DATA_KEY_COUNT = len(DataKey)


def get_default_settings_values() -> Dict[str, Any]:
    """Return a flat dictionary of toggle defaults keyed by setting key."""
    return {toggle.setting_key: toggle.default_value for toggle in iter_toggles()}


def merge_defaults_with_values(values: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge values returned by the renderer over the defaults. Unknown keys in
    `values` are preserved so nothing the renderer sent is dropped.
    """
    merged = get_default_settings_values()
    if isinstance(values, dict):
        merged.update(values)
    elif values is not None:
        logger.warning(f"{LOG_PREFIX}: ignoring settings payload of type {type(values).__name__}")
    return merged


def get_message_keys() -> Dict[str, int]:
    return {key.name: int(key) for key in DataKey}


def to_app_message(values: Optional[Dict[str, Any]]) -> Dict[int, Any]:
    """Re-key merged values by message key, sending booleans as 1/0."""
    merged = merge_defaults_with_values(values)
    message_keys = get_message_keys()
    message: Dict[int, Any] = {}
    for setting_key, value in merged.items():
        message_key = message_keys.get(setting_key)
        if message_key is None:
            logger.debug(f"{LOG_PREFIX}: no message key for {setting_key!r}; skipping")
            continue
        message[message_key] = int(value) if isinstance(value, bool) else value
    return message


def get_settings_payload(values: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return schema, version and current values for the renderer."""
    return {
        "version": SCHEMA_VERSION,
        "schema": get_settings_schema(),
        "values": copy.deepcopy(merge_defaults_with_values(values)),
    }


def export_schema(path: Optional[str] = None) -> str:
    """Write the renderer document and return the path written."""
    target = public_path(CONFIG_JSON_FILE) if path is None else path
    write_json(target, get_settings_schema())
    logger.info(f"{LOG_PREFIX}: exported settings schema to {target}")
    return target
