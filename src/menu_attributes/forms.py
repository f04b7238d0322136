"""Routing of form submissions by form id."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from .errors import FormError
from .permissions import PermissionHolder
from .schema import FormSchema

LOGGER = logging.getLogger(__name__)


class ConfigForm(Protocol):
    """Callbacks a hosting environment invokes on a configuration form."""

    @property
    def form_id(self) -> str: ...

    @property
    def editable_config_names(self) -> list[str]: ...

    def render(self, current_user: PermissionHolder) -> FormSchema | None: ...

    def submit(self, schema: FormSchema | None, submitted_values: Mapping[str, Any]) -> None: ...


class FormRegistry:
    def __init__(self) -> None:
        self._forms: dict[str, ConfigForm] = {}

    def register(self, form: ConfigForm) -> ConfigForm:
        if form.form_id in self._forms:
            raise FormError(f"Form id '{form.form_id}' is already registered")
        self._forms[form.form_id] = form
        LOGGER.debug("Registered form %s", form.form_id)
        return form

    def get(self, form_id: str) -> ConfigForm:
        try:
            return self._forms[form_id]
        except KeyError:
            raise FormError(f"Unknown form id '{form_id}'") from None

    def __contains__(self, form_id: object) -> bool:
        return form_id in self._forms

    def submit(self, form_id: str, schema: FormSchema | None, submitted_values: Mapping[str, Any]) -> None:
        self.get(form_id).submit(schema, submitted_values)
