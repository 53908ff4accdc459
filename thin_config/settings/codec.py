"""Conversion between schema elements and the renderer's JSON document."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..config import JSON_INDENT
from .options import Element, Heading, Section, Submit, Text, Toggle, get_schema


class SchemaDecodeError(ValueError):
    """Raised when a document does not describe schema elements."""


def element_to_dict(element: Element) -> Dict[str, Any]:
    if isinstance(element, Heading):
        data: Dict[str, Any] = {"type": element.element_type, "defaultValue": element.text}
        if element.size is not None:
            data["size"] = element.size
        return data
    if isinstance(element, Section):
        return {
            "type": element.element_type,
            "items": [element_to_dict(item) for item in element.items],
        }
    if isinstance(element, Toggle):
        return {
            "type": element.element_type,
            "label": element.label,
            "appKey": element.setting_key,
            "defaultValue": element.default_value,
        }
    if isinstance(element, Text):
        return {"type": element.element_type, "defaultValue": element.body}
    if isinstance(element, Submit):
        return {"type": element.element_type, "defaultValue": element.label}
    raise TypeError(f"Unsupported element {element!r}")


def schema_to_list(elements: Sequence[Element]) -> List[Dict[str, Any]]:
    return [element_to_dict(element) for element in elements]


def _require(data: Dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SchemaDecodeError(f"{data.get('type')!r} element is missing {key!r}") from None


def element_from_dict(data: Any) -> Element:
    if not isinstance(data, dict):
        raise SchemaDecodeError(f"Element must be an object, got {type(data).__name__}")

    element_type = data.get("type")
    if element_type == Heading.element_type:
        return Heading(text=_require(data, "defaultValue"), size=data.get("size"))
    if element_type == Section.element_type:
        return Section(items=schema_from_list(_require(data, "items")))
    if element_type == Toggle.element_type:
        return Toggle(
            label=_require(data, "label"),
            setting_key=_require(data, "appKey"),
            default_value=_require(data, "defaultValue"),
        )
    if element_type == Text.element_type:
        return Text(body=_require(data, "defaultValue"))
    if element_type == Submit.element_type:
        return Submit(label=_require(data, "defaultValue"))
    raise SchemaDecodeError(f"Unknown element type {element_type!r}")


def schema_from_list(data: Any) -> Tuple[Element, ...]:
    if not isinstance(data, list):
        raise SchemaDecodeError(f"Schema must be a list, got {type(data).__name__}")
    return tuple(element_from_dict(item) for item in data)


def get_settings_schema() -> List[Dict[str, Any]]:
    """Return a serialisable representation of the settings schema."""
    return schema_to_list(get_schema())


def dumps_schema(elements: Optional[Sequence[Element]] = None, indent: Optional[int] = JSON_INDENT) -> str:
    if elements is None:
        elements = get_schema()
    return json.dumps(schema_to_list(elements), indent=indent)


def loads_schema(text: str) -> Tuple[Element, ...]:
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise SchemaDecodeError(f"Schema is not valid JSON: {exc}") from exc
    return schema_from_list(data)


__all__ = [
    "SchemaDecodeError",
    "dumps_schema",
    "element_from_dict",
    "element_to_dict",
    "get_settings_schema",
    "loads_schema",
    "schema_from_list",
    "schema_to_list",
]
