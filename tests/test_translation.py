from __future__ import annotations

import pytest

from menu_attributes.translation import format_string, t


class TestTranslate:
    def test_plain_string_is_unchanged(self) -> None:
        assert t("Default") == "Default"

    def test_at_placeholder_is_escaped(self) -> None:
        assert t("Enable the @attribute attribute.", {"@attribute": "color"}) == "Enable the color attribute."
        assert t("@value", {"@value": "<b>"}) == "&lt;b&gt;"

    def test_percent_placeholder_is_emphasized(self) -> None:
        assert t("Saved %name", {"%name": "rel"}) == 'Saved <em class="placeholder">rel</em>'

    def test_bang_placeholder_is_verbatim(self) -> None:
        assert t("!markup", {"!markup": "<b>x</b>"}) == "<b>x</b>"

    def test_longer_placeholders_win(self) -> None:
        assert format_string("@attr @attribute", {"@attr": "a", "@attribute": "b"}) == "a b"

    def test_invalid_placeholder(self) -> None:
        with pytest.raises(ValueError):
            t("x", {"attribute": "y"})
