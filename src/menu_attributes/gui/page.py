"""
Menu attributes settings page.

Renders a settings form schema as vertical tabs, one panel per attribute,
and routes the submitted values back to the form by its form id.
"""

from __future__ import annotations

import logging

from nicegui import ui

from ..forms import FormRegistry
from ..permissions import PermissionHolder
from ..schema import Checkbox, Details, FormSchema
from .components import checkbox_field, render_field
from .state import SettingsFormState

LOGGER = logging.getLogger(__name__)


def settings_page(forms: FormRegistry, form_id: str, user: PermissionHolder) -> None:
    """Render the settings page for ``form_id`` as seen by ``user``."""
    form = forms.get(form_id)
    schema = form.render(user)

    with ui.column().classes("w-full max-w-5xl mx-auto p-4 gap-4"):
        if schema is None:
            # Users without access get the bare page frame
            return

        state = SettingsFormState.from_schema(schema)

        with ui.row().classes("w-full items-center justify-between"):
            ui.label(schema.title.title).classes("text-3xl font-bold text-slate-800 dark:text-slate-100")

            with ui.row().classes("items-center gap-2"):
                modified_indicator = ui.label("").classes("text-sm text-amber-600 dark:text-amber-400")
                state.register_callback(
                    lambda event, data: modified_indicator.set_text("Modified" if state.is_modified else "")
                )
                ui.button("Reset", icon="undo", on_click=lambda: _reset_changes(state)).props("outline")
                ui.button(
                    "Save configuration",
                    icon="save",
                    on_click=lambda: _save_changes(forms, form_id, schema, state),
                ).props("color=primary")

        if not schema.groups:
            ui.label("No menu attributes are available.").classes("text-sm text-slate-500")
            return

        _render_tabs(schema, state)


def _render_tabs(schema: FormSchema, state: SettingsFormState) -> None:
    with ui.splitter(value=25).classes("w-full") as splitter:
        with splitter.before:
            with ui.tabs(on_change=lambda e: state.set_active_tab(e.value)).props("vertical") as tabs:
                tab_elements = {details.key: ui.tab(details.key, label=details.title) for details in schema}
        with splitter.after:
            with ui.tab_panels(tabs, value=tab_elements[state.active_tab]).props("vertical").classes("w-full"):
                for details in schema:
                    with ui.tab_panel(tab_elements[details.key]):
                        _render_group(details, state)


def _render_group(details: Details, state: SettingsFormState) -> None:
    if details.description:
        ui.label(details.description).classes("text-sm text-slate-500 dark:text-slate-400")

    toggles: dict[str, ui.checkbox] = {}
    for spec in details.fields:
        if isinstance(spec, Checkbox):
            toggles[spec.key] = checkbox_field(state, spec)
            continue

        element = render_field(state, spec)
        rule = getattr(spec, "visibility", None)
        if rule is not None and rule.field in toggles:
            element.bind_visibility_from(
                toggles[rule.field],
                "value",
                backward=lambda value, rule=rule: rule.is_visible({rule.field: value}),
            )


def _save_changes(forms: FormRegistry, form_id: str, schema: FormSchema, state: SettingsFormState) -> None:
    try:
        forms.submit(form_id, schema, {schema.tabs.key: dict(state.form_data)})
    except Exception as e:
        LOGGER.exception("Saving %s failed: %s", form_id, e)
        ui.notify(f"Save failed: {e}", type="negative")
        return

    state.mark_saved()
    ui.notify("The configuration options have been saved.", type="positive")


def _reset_changes(state: SettingsFormState) -> None:
    state.reset_to_original()
    ui.notify("Changes reset to original values", type="info")
    ui.navigate.reload()
