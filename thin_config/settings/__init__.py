"""Settings package exposing the page schema and payload helpers."""

from .codec import (
    SchemaDecodeError,
    dumps_schema,
    element_from_dict,
    element_to_dict,
    get_settings_schema,
    loads_schema,
)
from .manager import (
    DATA_KEY_COUNT,
    DataKey,
    export_schema,
    get_default_settings_values,
    get_message_keys,
    get_settings_payload,
    merge_defaults_with_values,
    to_app_message,
)
from .options import (
    SETTINGS_SCHEMA,
    Element,
    Heading,
    Section,
    Submit,
    Text,
    Toggle,
    get_schema,
    get_setting_keys,
    iter_elements,
    iter_toggles,
)

__all__ = [
    "DATA_KEY_COUNT",
    "SETTINGS_SCHEMA",
    "DataKey",
    "Element",
    "Heading",
    "SchemaDecodeError",
    "Section",
    "Submit",
    "Text",
    "Toggle",
    "dumps_schema",
    "element_from_dict",
    "element_to_dict",
    "export_schema",
    "get_default_settings_values",
    "get_message_keys",
    "get_schema",
    "get_setting_keys",
    "get_settings_payload",
    "get_settings_schema",
    "iter_elements",
    "iter_toggles",
    "loads_schema",
    "merge_defaults_with_values",
    "to_app_message",
]
