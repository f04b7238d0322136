"""Typed form-schema tree produced by the settings form.

The tree has a fixed shape: a title item, one vertical-tabs container and a
list of ``Details`` groups attached to that container. Each group owns its
fields. Every node is a frozen dataclass tagged with a ``type`` string so the
hosting layer can dispatch on it, and ``FormSchema.to_dict`` flattens the tree
into a render-array style mapping for serialization.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class VisibilityRule:
    """Declarative client-side dependency: hide a field while another is unchecked."""

    field: str
    checked: bool = False
    state: str = "invisible"

    @property
    def selector(self) -> str:
        return f'input[name="{self.field}"]'

    def is_visible(self, values: Mapping[str, Any]) -> bool:
        """Evaluate the rule against current form values."""
        return bool(values.get(self.field, False)) != self.checked

    def to_dict(self) -> dict[str, Any]:
        return {self.state: {self.selector: {"checked": self.checked}}}


@dataclass(frozen=True)
class Item:
    type: ClassVar[str] = "item"

    key: str
    title: str

    def to_dict(self) -> dict[str, Any]:
        return {"#type": self.type, "#title": self.title}


@dataclass(frozen=True)
class VerticalTabs:
    type: ClassVar[str] = "vertical_tabs"

    key: str
    libraries: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"#type": self.type}
        if self.libraries:
            data["#attached"] = {"library": list(self.libraries)}
        return data


@dataclass(frozen=True)
class Checkbox:
    type: ClassVar[str] = "checkbox"

    key: str
    title: str
    default: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"#type": self.type, "#title": self.title, "#default_value": self.default}


@dataclass(frozen=True)
class TextField:
    type: ClassVar[str] = "textfield"

    key: str
    title: str
    default: Any = ""
    description: str = ""
    max_length: int | None = None
    visibility: VisibilityRule | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "#type": self.type,
            "#title": self.title,
            "#description": self.description,
            "#default_value": self.default,
        }
        if self.max_length is not None:
            data["#maxlength"] = self.max_length
        if self.visibility is not None:
            data["#states"] = self.visibility.to_dict()
        return data


@dataclass(frozen=True)
class Select:
    type: ClassVar[str] = "select"

    key: str
    title: str
    options: dict[str, str]
    default: Any = ""
    description: str = ""
    visibility: VisibilityRule | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "#type": self.type,
            "#title": self.title,
            "#description": self.description,
            "#options": dict(self.options),
            "#default_value": self.default,
        }
        if self.visibility is not None:
            data["#states"] = self.visibility.to_dict()
        return data


Field = Union[Checkbox, TextField, Select]


@dataclass(frozen=True)
class Details:
    """Collapsible group attached to a vertical-tabs container."""

    type: ClassVar[str] = "details"

    key: str
    title: str
    group: str
    description: str = ""
    fields: tuple[Field, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "#type": self.type,
            "#title": self.title,
            "#group": self.group,
            "#description": self.description,
        }
        for child in self.fields:
            data[child.key] = child.to_dict()
        return data


@dataclass
class FormSchema:
    """Ordered form tree for one render."""

    title: Item
    tabs: VerticalTabs
    groups: list[Details] = field(default_factory=list)

    def __iter__(self) -> Iterator[Details]:
        return iter(self.groups)

    def group(self, key: str) -> Details:
        for details in self.groups:
            if details.key == key:
                return details
        raise KeyError(key)

    def fields_for(self, group_key: str) -> tuple[Field, ...]:
        return self.group(group_key).fields

    def iter_fields(self) -> Iterator[Field]:
        for details in self.groups:
            yield from details.fields

    def get_field(self, key: str) -> Field:
        for child in self.iter_fields():
            if child.key == key:
                return child
        raise KeyError(key)

    def field_keys(self) -> list[str]:
        return [child.key for child in self.iter_fields()]

    def defaults(self) -> dict[str, Any]:
        """Return the default value of every field keyed by field key."""
        return {child.key: child.default for child in self.iter_fields()}

    def to_dict(self) -> dict[str, Any]:
        return {
            self.title.key: self.title.to_dict(),
            self.tabs.key: self.tabs.to_dict(),
            "attributes": {details.key: details.to_dict() for details in self.groups},
        }
