from dataclasses import FrozenInstanceError

import pytest

from thin_config.settings import (
    SETTINGS_SCHEMA,
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

EXPECTED_KEYS = (
    "DataKeyDate",
    "DataKeyDay",
    "DataKeyBT",
    "DataKeyBattery",
    "DataKeySecondHand",
)


def test_top_level_order_is_heading_section_submit():
    kinds = [element.element_type for element in get_schema()]
    assert kinds == ["heading", "section", "submit"]


def test_page_heading_and_submit_values():
    heading, _section, submit = get_schema()
    assert heading == Heading(text="Thin Configuration", size=3)
    assert submit == Submit(label="Save")


def test_section_lists_features_in_order():
    section = get_schema()[1]
    assert isinstance(section, Section)
    assert section.items[0] == Heading(text="Features")
    assert section.items[1] == Text(body="Turn additional features on or off.")
    assert all(isinstance(item, Toggle) for item in section.items[2:])


def test_setting_keys_are_unique_and_ordered():
    keys = get_setting_keys()
    assert keys == EXPECTED_KEYS
    assert len(set(keys)) == len(keys)


def test_every_toggle_defaults_to_true():
    defaults = {toggle.setting_key: toggle.default_value for toggle in iter_toggles()}
    assert defaults == {key: True for key in EXPECTED_KEYS}
    assert all(isinstance(value, bool) for value in defaults.values())


def test_repeated_reads_are_equal():
    first = get_schema()
    second = get_schema()
    assert first == second
    assert first is SETTINGS_SCHEMA


def test_iter_elements_walks_depth_first():
    kinds = [element.element_type for element in iter_elements()]
    assert kinds == [
        "heading",
        "section",
        "heading",
        "text",
        "toggle",
        "toggle",
        "toggle",
        "toggle",
        "toggle",
        "submit",
    ]


def test_elements_are_immutable():
    toggle = next(iter_toggles())
    with pytest.raises(FrozenInstanceError):
        toggle.default_value = False  # type: ignore[misc]
    assert isinstance(get_schema()[1].items, tuple)
