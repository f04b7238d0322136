from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from menu_attributes.logging_utils import (
    LogBlockBuilder,
    _coerce_items,
    _stringify,
    configure_logging,
    render_fields_block,
)


class TestCoerceItems:
    """Tests for _coerce_items helper function."""

    def test_coerce_items_with_dict(self):
        assert _coerce_items({"key1": "value1", "key2": "value2"}) == [("key1", "value1"), ("key2", "value2")]

    def test_coerce_items_preserves_order_in_sequence(self):
        fields = [("z", 1), ("a", 2), ("m", 3)]
        assert _coerce_items(fields) == [("z", 1), ("a", 2), ("m", 3)]

    def test_coerce_items_with_empty_input(self):
        assert _coerce_items({}) == []
        assert _coerce_items([]) == []


class TestStringify:
    """Tests for _stringify helper function."""

    def test_stringify_with_none(self):
        assert _stringify(None) == ""

    def test_stringify_with_booleans(self):
        assert _stringify(True) == "yes"
        assert _stringify(False) == "no"

    def test_stringify_with_string(self):
        assert _stringify("  _blank  ") == "_blank"

    def test_stringify_with_empty_string_is_visible(self):
        assert _stringify("") == '""'

    def test_stringify_with_list(self):
        assert _stringify(["a", "b", "c"]) == "a, b, c"


class TestLogBlockBuilder:
    def test_title_is_underlined(self):
        assert LogBlockBuilder("Saved").render() == "Saved\n-----"

    def test_fields_are_aligned(self):
        block = render_fields_block("Saved menu attribute settings", [("enable_target", True), ("target", "_blank")])
        lines = block.splitlines()
        assert lines[0] == "Saved menu attribute settings"
        assert lines[2] == "    enable_target: yes"
        assert lines[3] == "    target       : _blank"

    def test_long_values_wrap(self):
        builder = LogBlockBuilder("Block", wrap_width=60)
        builder.add_fields({"style": "word " * 30})
        lines = builder.render().splitlines()
        assert len(lines) > 3
        assert lines[3].startswith("    " + " " * 8 + "  ")

    def test_empty_fields_add_nothing(self):
        builder = LogBlockBuilder("Block")
        builder.add_fields(None)
        builder.add_fields([])
        assert builder.render() == "Block\n-----"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_single_rich_handler(self):
        configure_logging()
        configure_logging(verbose=True)
        rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logging.getLogger().level == logging.DEBUG

    def test_messages_reach_console(self):
        stream = io.StringIO()
        configure_logging(console=Console(file=stream, width=120, color_system=None))
        logging.getLogger("menu_attributes.test").info("saved settings")
        assert "saved settings" in stream.getvalue()
