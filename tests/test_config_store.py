"""Tests for configuration object persistence."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from menu_attributes.config_store import MemoryConfigStore, YamlConfigStore


class TestConfigHandle:
    def test_set_is_chainable(self) -> None:
        store = MemoryConfigStore()
        store.load("demo").set("a", 1).set("b", 2).save()
        assert store.load("demo").get("") == {"a": 1, "b": 2}

    def test_get_default(self) -> None:
        handle = MemoryConfigStore().load("demo")
        assert handle.get("missing") is None
        assert handle.get("missing", "fallback") == "fallback"

    def test_root_key_replaces_whole_mapping(self) -> None:
        store = MemoryConfigStore({"demo": {"old": True}})
        store.load("demo").set("", {"new": True}).save()
        assert store.load("demo").get("") == {"new": True}

    def test_root_key_requires_mapping(self) -> None:
        handle = MemoryConfigStore().load("demo")
        with pytest.raises(TypeError):
            handle.set("", ["not", "a", "mapping"])

    def test_unsaved_changes_are_discarded(self) -> None:
        store = MemoryConfigStore()
        store.load("demo").set("a", 1)
        assert store.load("demo").get("") == {}
        assert store.save_count == 0

    def test_returned_values_are_copies(self) -> None:
        store = MemoryConfigStore({"demo": {"items": [1, 2]}})
        handle = store.load("demo")
        handle.get("items").append(3)
        handle.raw_data["items"].append(4)
        assert handle.get("items") == [1, 2]


class TestYamlConfigStore:
    def test_missing_file_loads_empty(self, tmp_path: Path) -> None:
        assert YamlConfigStore(tmp_path).load("menu_attributes.settings").get("") == {}

    def test_save_writes_yaml_file(self, tmp_path: Path) -> None:
        store = YamlConfigStore(tmp_path / "config")
        store.load("menu_attributes.settings").set("enable_target", True).set("target", "_blank").save()

        path = tmp_path / "config" / "menu_attributes.settings.yml"
        assert path.exists()
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"enable_target": True, "target": "_blank"}

    def test_round_trip_preserves_key_order(self, tmp_path: Path) -> None:
        store = YamlConfigStore(tmp_path)
        store.load("demo").set("z", 1).set("a", 2).save()
        assert list(store.load("demo").get("")) == ["z", "a"]

    def test_non_mapping_file_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "demo.yml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            YamlConfigStore(tmp_path).load("demo")

    def test_invalid_yaml_propagates(self, tmp_path: Path) -> None:
        (tmp_path / "demo.yml").write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            YamlConfigStore(tmp_path).load("demo")

    def test_write_failure_propagates(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        handle = YamlConfigStore(blocker).load("demo").set("a", 1)
        with pytest.raises(OSError):
            handle.save()
