from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Sequence, Tuple, Union

from ..config import (
    FEATURES_DESCRIPTION,
    FEATURES_HEADING,
    PAGE_TITLE,
    PAGE_TITLE_SIZE,
    SUBMIT_LABEL,
)


@dataclass(frozen=True)
class Heading:
    element_type: ClassVar[str] = "heading"

    text: str
    size: Optional[int] = None


@dataclass(frozen=True)
class Text:
    element_type: ClassVar[str] = "text"

    body: str


@dataclass(frozen=True)
class Toggle:
    element_type: ClassVar[str] = "toggle"

    label: str
    setting_key: str
    default_value: bool


@dataclass(frozen=True)
class Submit:
    element_type: ClassVar[str] = "submit"

    label: str


@dataclass(frozen=True)
class Section:
    element_type: ClassVar[str] = "section"

    items: Tuple["Element", ...] = ()


Element = Union[Heading, Section, Toggle, Text, Submit]


SETTINGS_SCHEMA: Tuple[Element, ...] = (
    Heading(text=PAGE_TITLE, size=PAGE_TITLE_SIZE),
    Section(
        items=(
            Heading(text=FEATURES_HEADING),
            Text(body=FEATURES_DESCRIPTION),
            Toggle(
                label="Show weekday and month",
                setting_key="DataKeyDate",
                default_value=True,
            ),
            Toggle(
                label="Show day of the month",
                setting_key="DataKeyDay",
                default_value=True,
            ),
            Toggle(
                label="Show disconnected indicator",
                setting_key="DataKeyBT",
                default_value=True,
            ),
            Toggle(
                label="Show battery level (hour markers)",
                setting_key="DataKeyBattery",
                default_value=True,
            ),
            Toggle(
                label="Show second hand (uses more power)",
                setting_key="DataKeySecondHand",
                default_value=True,
            ),
        ),
    ),
    Submit(label=SUBMIT_LABEL),
)


def get_schema() -> Tuple[Element, ...]:
    """Return the settings page elements in on-screen order."""
    return SETTINGS_SCHEMA


def iter_elements(elements: Optional[Sequence[Element]] = None) -> Iterator[Element]:
    """Walk every element depth-first, section items included."""
    for element in SETTINGS_SCHEMA if elements is None else elements:
        yield element
        if isinstance(element, Section):
            yield from iter_elements(element.items)


def iter_toggles() -> Iterator[Toggle]:
    for element in iter_elements():
        if isinstance(element, Toggle):
            yield element


def get_setting_keys() -> Tuple[str, ...]:
    return tuple(toggle.setting_key for toggle in iter_toggles())
