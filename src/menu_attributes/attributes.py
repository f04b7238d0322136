"""Menu attribute definitions and the built-in attribute registry.

A registry maps attribute keys (``"target"``, ``"rel"``, ...) to raw entries of
the form::

    {
        "label": "Target",
        "enabled": True,
        "form": {
            "description": "Specifies where to open the link.",
            "widget": "select",
            "default": "",
            "options": {"": "None (i.e. same window)", "_blank": "New window (_blank)"},
        },
    }

Entries are validated with a JSON schema and turned into ``AttributeInfo``
objects before the settings form uses them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from jsonschema import Draft7Validator

from .errors import RegistryEntryError

WIDGET_TYPES = ("textfield", "select")

ATTRIBUTE_ENTRY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["label", "enabled", "form"],
    "properties": {
        "label": {"type": "string", "minLength": 1},
        "enabled": {"type": "boolean"},
        "form": {
            "type": "object",
            "required": ["description", "widget"],
            "properties": {
                "description": {"type": "string"},
                "widget": {"type": "string", "enum": list(WIDGET_TYPES)},
                "default": {"type": ["string", "number", "boolean", "null"]},
                "options": {
                    "type": "object",
                    "additionalProperties": {"type": "string"},
                },
                "max_length": {"type": "integer", "minimum": 1},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}

_VALIDATOR = Draft7Validator(ATTRIBUTE_ENTRY_SCHEMA)

AttributeRegistry = Callable[[], Mapping[str, Mapping[str, Any]]]


@dataclass(frozen=True)
class WidgetDefinition:
    """Field fragment describing the default-value widget of an attribute."""

    description: str
    widget: str = "textfield"
    default: Any = ""
    options: Dict[str, str] = field(default_factory=dict)
    max_length: Optional[int] = None


@dataclass(frozen=True)
class AttributeInfo:
    label: str
    enabled: bool
    form: WidgetDefinition


def _format_path(path: Sequence[Any]) -> str:
    if not path:
        return "<root>"
    return ".".join(str(part) for part in path)


def validate_attribute_info(attribute: str, raw: Any) -> AttributeInfo:
    """Validate a raw registry entry and convert it to an ``AttributeInfo``.

    Raises:
        RegistryEntryError: If the entry does not match the attribute entry schema,
            or a select widget's default is not one of its options.
    """
    errors = sorted(_VALIDATOR.iter_errors(raw), key=lambda exc: list(exc.absolute_path))
    if errors:
        first = errors[0]
        raise RegistryEntryError(attribute, _format_path(first.absolute_path), first.message)

    form = raw["form"]
    widget = WidgetDefinition(
        description=form["description"],
        widget=form["widget"],
        default=form.get("default", ""),
        options=dict(form.get("options") or {}),
        max_length=form.get("max_length"),
    )
    if widget.widget == "select":
        if not widget.options:
            raise RegistryEntryError(attribute, "form.options", "select widgets need at least one option")
        if widget.default not in widget.options:
            raise RegistryEntryError(
                attribute, "form.default", f"{widget.default!r} is not one of the select options"
            )
    return AttributeInfo(label=raw["label"], enabled=raw["enabled"], form=widget)


def enable_key(attribute: str) -> str:
    """Field key of the checkbox that enables ``attribute``."""
    return f"enable_{attribute}"


def load_attribute_infos(registry: Mapping[str, Any]) -> Dict[str, AttributeInfo]:
    """Validate every entry of a registry, preserving its iteration order.

    Raises:
        RegistryEntryError: If an entry is malformed, or an attribute key equals the
            enable-checkbox key generated for another attribute
    """
    infos = {key: validate_attribute_info(key, raw) for key, raw in registry.items()}
    for key in infos:
        if enable_key(key) in infos:
            raise RegistryEntryError(
                enable_key(key), "<root>", f"key collides with the enable checkbox of attribute '{key}'"
            )
    return infos


TARGET_OPTIONS: Dict[str, str] = {
    "": "None (i.e. same window)",
    "_blank": "New window (_blank)",
    "_top": "Top window (_top)",
    "_self": "Same window (_self)",
    "_parent": "Parent window (_parent)",
}


def _textfield(description: str, *, max_length: Optional[int] = None) -> Dict[str, Any]:
    form: Dict[str, Any] = {"description": description, "widget": "textfield", "default": ""}
    if max_length is not None:
        form["max_length"] = max_length
    return form


def get_menu_attribute_info() -> Dict[str, Dict[str, Any]]:
    """Return the built-in menu attribute registry.

    A fresh mapping is built on every call so callers may mutate the result.
    """
    return {
        "title": {
            "label": "Title",
            "enabled": True,
            "form": _textfield("The description displayed when hovering over the link."),
        },
        "id": {
            "label": "ID",
            "enabled": False,
            "form": _textfield("Specifies a unique ID for the link."),
        },
        "name": {
            "label": "Name",
            "enabled": False,
            "form": _textfield("Specifies the name of an anchor for the link."),
        },
        "rel": {
            "label": "Relationship",
            "enabled": True,
            "form": _textfield(
                "Specifies the relationship between the current page and the link. "
                "Enter 'nofollow' here to nofollow this link."
            ),
        },
        "class": {
            "label": "Classes",
            "enabled": True,
            "form": _textfield("Enter additional classes to be added to the link."),
        },
        "style": {
            "label": "Style",
            "enabled": False,
            "form": _textfield("Enter additional styles to be applied to the link."),
        },
        "target": {
            "label": "Target",
            "enabled": True,
            "form": {
                "description": "Specifies where to open the link. Using this attribute breaks XHTML validation.",
                "widget": "select",
                "default": "",
                "options": dict(TARGET_OPTIONS),
            },
        },
        "accesskey": {
            "label": "Access Key",
            "enabled": False,
            "form": _textfield("Specifies a keyboard shortcut to access this link.", max_length=1),
        },
    }
