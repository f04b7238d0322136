"""Administrative settings form for menu attributes.

``MenuAttributesSettingsForm`` turns the attribute registry into a form schema
with one vertical tab per attribute and writes submitted values back to the
``menu_attributes.settings`` configuration object. All collaborators (the
registry, the translator and the configuration store) are passed in; the
current user is passed to ``render`` on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .attributes import (
    AttributeInfo,
    AttributeRegistry,
    enable_key,
    get_menu_attribute_info,
    load_attribute_infos,
)
from .config_store import ConfigHandle, ConfigStore
from .errors import FormError
from .logging_utils import render_fields_block
from .permissions import ADMINISTER_MENU_ATTRIBUTES, PermissionHolder
from .schema import Checkbox, Details, Field, FormSchema, Item, Select, TextField, VerticalTabs, VisibilityRule
from .translation import Translator, t

LOGGER = logging.getLogger(__name__)

FORM_ID = "menu_attributes_settings"
CONFIG_NAME = "menu_attributes.settings"
TITLE_KEY = "attributes_title"
TABS_KEY = "attributes_vertical_tabs"
TABS_LIBRARY = "menu_attributes/option_summary"


class MenuAttributesSettingsForm:
    """Configure menu attribute admin settings.

    Args:
        config_store: Backend holding the ``menu_attributes.settings`` object
        registry: Callable returning the attribute registry; defaults to the built-in set
        translate: Translation function used for every user-facing label
    """

    def __init__(
        self,
        config_store: ConfigStore,
        *,
        registry: AttributeRegistry = get_menu_attribute_info,
        translate: Translator = t,
    ) -> None:
        self._config_store = config_store
        self._registry = registry
        self._t = translate

    @property
    def form_id(self) -> str:
        return FORM_ID

    @property
    def editable_config_names(self) -> list[str]:
        return [CONFIG_NAME]

    def config(self) -> ConfigHandle:
        return self._config_store.load(CONFIG_NAME)

    def render(self, current_user: PermissionHolder) -> FormSchema | None:
        """Build the settings form for ``current_user``.

        Returns None when the user may not administer menu attributes.

        Raises:
            RegistryEntryError: If the registry supplies a malformed entry
        """
        if not current_user.has_permission(ADMINISTER_MENU_ATTRIBUTES):
            return None

        stored = self.config().get("")
        infos = load_attribute_infos(self._registry())

        schema = FormSchema(
            title=Item(key=TITLE_KEY, title=self._t("Menu item attribute options")),
            tabs=VerticalTabs(key=TABS_KEY, libraries=(TABS_LIBRARY,)),
        )
        for attribute, info in infos.items():
            schema.groups.append(self._build_group(attribute, info, stored))

        LOGGER.debug("Rendered %s with %d attribute groups", FORM_ID, len(schema.groups))
        return schema

    def _build_group(self, attribute: str, info: AttributeInfo, stored: Mapping[str, Any]) -> Details:
        toggle_key = enable_key(attribute)
        enable = Checkbox(
            key=toggle_key,
            title=self._t("Enable the @attribute attribute.", {"@attribute": info.label.lower()}),
            default=_stored_bool(stored, toggle_key, info.enabled),
        )
        return Details(
            key=attribute,
            title=info.label,
            group=TABS_KEY,
            description=info.form.description,
            fields=(enable, self._build_default_field(attribute, info, stored, toggle_key)),
        )

    def _build_default_field(
        self,
        attribute: str,
        info: AttributeInfo,
        stored: Mapping[str, Any],
        toggle_key: str,
    ) -> Field:
        widget = info.form
        default = stored.get(attribute, widget.default)
        visibility = VisibilityRule(field=toggle_key, checked=False)
        title = self._t("Default")
        if widget.widget == "select":
            if default not in widget.options:
                LOGGER.warning(
                    "Stored %s value %r is not a select option, using %r", attribute, default, widget.default
                )
                default = widget.default
            return Select(
                key=attribute,
                title=title,
                options=dict(widget.options),
                default=default,
                visibility=visibility,
            )
        return TextField(
            key=attribute,
            title=title,
            default=default,
            max_length=widget.max_length,
            visibility=visibility,
        )

    def submit(self, schema: FormSchema | None, submitted_values: Mapping[str, Any]) -> None:
        """Persist the values submitted under the vertical tabs container.

        Each field declared by ``schema`` is stored under its own key. The
        configuration object is saved exactly once; backend errors propagate.

        Raises:
            FormError: If there is no schema to submit against, or a submitted value
                does not fit its field
        """
        if schema is None:
            raise FormError(f"Form {FORM_ID} was not rendered for this user")

        values = submitted_values.get(schema.tabs.key, {})
        if not isinstance(values, Mapping):
            raise FormError(f"Expected a mapping under '{schema.tabs.key}', got {type(values).__name__}")

        declared = schema.field_keys()
        ignored = sorted(key for key in values if key not in declared)
        if ignored:
            LOGGER.debug("Ignoring undeclared keys on %s: %s", FORM_ID, ", ".join(ignored))

        accepted = [(key, values[key]) for key in declared if key in values]
        for key, value in accepted:
            _check_value(schema.get_field(key), value)

        config = self.config()
        for key, value in accepted:
            config.set(key, value)
        config.save()

        LOGGER.info("%s", render_fields_block("Saved menu attribute settings", accepted))


def _stored_bool(stored: Mapping[str, Any], key: str, fallback: bool) -> bool:
    value = stored.get(key, fallback)
    if not isinstance(value, bool):
        LOGGER.warning("Stored %s value %r is not a boolean, using %r", key, value, fallback)
        return fallback
    return value


def _check_value(spec: Field, value: Any) -> None:
    """Reject a submitted value that its field could not render back."""
    if isinstance(spec, Checkbox):
        if not isinstance(value, bool):
            raise FormError(f"'{spec.key}' expects true or false, got {value!r}")
    elif isinstance(spec, Select):
        if value not in spec.options:
            raise FormError(f"'{spec.key}' must be one of {sorted(spec.options)!r}, got {value!r}")
    else:
        if not isinstance(value, str):
            raise FormError(f"'{spec.key}' expects text, got {type(value).__name__}")
        if spec.max_length is not None and len(value) > spec.max_length:
            raise FormError(f"'{spec.key}' is limited to {spec.max_length} characters")
