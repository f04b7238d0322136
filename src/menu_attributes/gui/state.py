"""
Form state for the menu attributes settings page.

Tracks the current field values of a rendered schema, which fields differ
from their rendered defaults, and notifies listeners of changes.
"""

from __future__ import annotations

import contextlib
import copy
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ..schema import FormSchema


@dataclass
class SettingsFormState:
    """State of one settings page.

    Attributes:
        original_data: Field defaults as rendered (for reset/comparison)
        form_data: Current field values keyed by field key
        modified_keys: Keys whose value differs from the rendered default
        active_tab: Key of the currently selected attribute group
        _update_callbacks: Callbacks to notify when state changes
    """

    original_data: dict[str, Any] = field(default_factory=dict)
    form_data: dict[str, Any] = field(default_factory=dict)
    modified_keys: set[str] = field(default_factory=set)
    active_tab: str | None = None
    _update_callbacks: list[Callable[[str, Any], None]] = field(default_factory=list)

    @classmethod
    def from_schema(cls, schema: FormSchema) -> SettingsFormState:
        defaults = schema.defaults()
        return cls(
            original_data=copy.deepcopy(defaults),
            form_data=copy.deepcopy(defaults),
            active_tab=schema.groups[0].key if schema.groups else None,
        )

    @property
    def is_modified(self) -> bool:
        return len(self.modified_keys) > 0

    def get_value(self, key: str, default: Any = None) -> Any:
        return self.form_data.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        """Set a field value and track whether it differs from the original."""
        self.form_data[key] = value
        if value == self.original_data.get(key):
            self.modified_keys.discard(key)
        else:
            self.modified_keys.add(key)
        self._notify_update("value_changed", {"key": key, "value": value})

    def is_field_modified(self, key: str) -> bool:
        return key in self.modified_keys

    def reset_to_original(self) -> None:
        self.form_data = copy.deepcopy(self.original_data)
        self.modified_keys = set()
        self._notify_update("reset", {})

    def mark_saved(self) -> None:
        """Adopt the current values as the new originals."""
        self.original_data = copy.deepcopy(self.form_data)
        self.modified_keys = set()
        self._notify_update("saved", {})

    def set_active_tab(self, tab: str) -> None:
        self.active_tab = tab
        self._notify_update("tab_changed", {"tab": tab})

    def register_callback(self, callback: Callable[[str, Any], None]) -> None:
        if callback not in self._update_callbacks:
            self._update_callbacks.append(callback)

    def _notify_update(self, event_type: str, data: Any) -> None:
        for callback in self._update_callbacks:
            with contextlib.suppress(Exception):
                callback(event_type, data)
