"""
Field components for the menu attributes settings page.

Each component renders one schema field bound to the settings form state and
returns the NiceGUI element so callers can attach visibility bindings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nicegui import ui

from ...schema import Checkbox, Field, Select, TextField

if TYPE_CHECKING:
    from ..state import SettingsFormState


def checkbox_field(state: SettingsFormState, spec: Checkbox) -> ui.checkbox:
    """Render an enable checkbox bound to settings state."""

    def handle_change(e) -> None:
        state.set_value(spec.key, bool(e.value))

    return ui.checkbox(spec.title, value=bool(state.get_value(spec.key, spec.default)), on_change=handle_change)


def text_field(state: SettingsFormState, spec: TextField) -> ui.column:
    """Render a text input bound to settings state.

    Returns:
        The column wrapping label, input and description
    """
    current_value = state.get_value(spec.key, spec.default)
    if current_value is None:
        current_value = ""

    with ui.column().classes("w-full gap-1") as container:
        ui.label(spec.title).classes("text-sm font-medium text-slate-700 dark:text-slate-200")

        def handle_change(e) -> None:
            state.set_value(spec.key, e.value or "")

        input_elem = ui.input(value=str(current_value), on_change=handle_change).classes("w-full").props(
            "outlined dense"
        )
        if spec.max_length is not None:
            input_elem.props(f'maxlength="{spec.max_length}"')

        if spec.description:
            ui.label(spec.description).classes("text-xs text-slate-500 dark:text-slate-400")

    return container


def select_field(state: SettingsFormState, spec: Select) -> ui.column:
    """Render a dropdown select bound to settings state."""
    current_value = state.get_value(spec.key, spec.default)
    if current_value not in spec.options:
        current_value = spec.default

    with ui.column().classes("w-full gap-1") as container:
        ui.label(spec.title).classes("text-sm font-medium text-slate-700 dark:text-slate-200")

        def handle_change(e) -> None:
            state.set_value(spec.key, e.value)

        ui.select(options=dict(spec.options), value=current_value, on_change=handle_change).classes("w-full").props(
            "outlined dense"
        )

        if spec.description:
            ui.label(spec.description).classes("text-xs text-slate-500 dark:text-slate-400")

    return container


def render_field(state: SettingsFormState, spec: Field) -> ui.element:
    if isinstance(spec, Checkbox):
        return checkbox_field(state, spec)
    if isinstance(spec, Select):
        return select_field(state, spec)
    return text_field(state, spec)
