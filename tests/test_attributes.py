from __future__ import annotations

import pytest

from menu_attributes.attributes import (
    TARGET_OPTIONS,
    AttributeInfo,
    WidgetDefinition,
    get_menu_attribute_info,
    load_attribute_infos,
    validate_attribute_info,
)
from menu_attributes.errors import RegistryEntryError


def _entry(**form_overrides):
    form = {"description": "desc", "widget": "textfield", "default": ""}
    form.update(form_overrides)
    return {"label": "Color", "enabled": True, "form": form}


class TestValidateAttributeInfo:
    def test_valid_textfield_entry(self) -> None:
        info = validate_attribute_info("color", _entry(default="#fff", max_length=7))
        assert info == AttributeInfo(
            label="Color",
            enabled=True,
            form=WidgetDefinition(description="desc", widget="textfield", default="#fff", max_length=7),
        )

    def test_default_value_is_optional(self) -> None:
        raw = {"label": "Color", "enabled": False, "form": {"description": "desc", "widget": "textfield"}}
        assert validate_attribute_info("color", raw).form.default == ""

    @pytest.mark.parametrize("missing", ["label", "enabled", "form"])
    def test_missing_top_level_key(self, missing: str) -> None:
        raw = _entry()
        del raw[missing]
        with pytest.raises(RegistryEntryError) as excinfo:
            validate_attribute_info("color", raw)
        assert excinfo.value.attribute == "color"
        assert missing in str(excinfo.value)

    def test_missing_description_reports_form_path(self) -> None:
        raw = _entry()
        del raw["form"]["description"]
        with pytest.raises(RegistryEntryError) as excinfo:
            validate_attribute_info("color", raw)
        assert excinfo.value.path == "form"

    def test_wrong_type_reports_nested_path(self) -> None:
        with pytest.raises(RegistryEntryError) as excinfo:
            validate_attribute_info("color", {"label": "Color", "enabled": "yes", "form": _entry()["form"]})
        assert excinfo.value.path == "enabled"

    def test_unknown_widget_rejected(self) -> None:
        with pytest.raises(RegistryEntryError) as excinfo:
            validate_attribute_info("color", _entry(widget="colorpicker"))
        assert excinfo.value.path == "form.widget"

    def test_non_mapping_entry_rejected(self) -> None:
        with pytest.raises(RegistryEntryError):
            validate_attribute_info("color", "Color")

    def test_select_requires_options(self) -> None:
        with pytest.raises(RegistryEntryError) as excinfo:
            validate_attribute_info("target", _entry(widget="select"))
        assert excinfo.value.path == "form.options"

    def test_select_default_must_be_an_option(self) -> None:
        with pytest.raises(RegistryEntryError) as excinfo:
            validate_attribute_info("target", _entry(widget="select", default="_new", options={"": "None"}))
        assert excinfo.value.path == "form.default"

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_attribute_info("color", {})


class TestBuiltinRegistry:
    def test_attribute_order(self) -> None:
        assert list(get_menu_attribute_info()) == [
            "title",
            "id",
            "name",
            "rel",
            "class",
            "style",
            "target",
            "accesskey",
        ]

    def test_every_entry_is_valid(self) -> None:
        infos = load_attribute_infos(get_menu_attribute_info())
        assert len(infos) == 8

    def test_enabled_defaults(self) -> None:
        infos = load_attribute_infos(get_menu_attribute_info())
        enabled = {key for key, info in infos.items() if info.enabled}
        assert enabled == {"title", "rel", "class", "target"}

    def test_target_is_a_select(self) -> None:
        target = load_attribute_infos(get_menu_attribute_info())["target"]
        assert target.form.widget == "select"
        assert target.form.options == TARGET_OPTIONS
        assert target.form.default == ""

    def test_accesskey_is_limited_to_one_character(self) -> None:
        accesskey = load_attribute_infos(get_menu_attribute_info())["accesskey"]
        assert accesskey.form.max_length == 1

    def test_returns_fresh_mapping(self) -> None:
        first = get_menu_attribute_info()
        first["title"]["label"] = "Changed"
        assert get_menu_attribute_info()["title"]["label"] == "Title"


class TestLoadAttributeInfos:
    def test_preserves_registry_order(self) -> None:
        infos = load_attribute_infos({"b": _entry(), "a": _entry()})
        assert list(infos) == ["b", "a"]

    def test_key_colliding_with_enable_checkbox_rejected(self) -> None:
        with pytest.raises(RegistryEntryError) as excinfo:
            load_attribute_infos({"x": _entry(), "enable_x": _entry()})
        assert excinfo.value.attribute == "enable_x"

    def test_collision_detected_regardless_of_order(self) -> None:
        with pytest.raises(RegistryEntryError):
            load_attribute_infos({"enable_x": _entry(), "x": _entry()})

    def test_enable_prefix_alone_is_allowed(self) -> None:
        infos = load_attribute_infos({"enable_x": _entry(), "y": _entry()})
        assert list(infos) == ["enable_x", "y"]
