"""
NiceGUI application setup for the menu attributes settings page.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nicegui import app, ui

from ..config_store import YamlConfigStore
from ..forms import FormRegistry
from ..settings_form import FORM_ID, MenuAttributesSettingsForm
from .page import settings_page

if TYPE_CHECKING:
    from ..config import AppConfig
    from ..permissions import PermissionHolder

LOGGER = logging.getLogger(__name__)

SETTINGS_ROUTE = "/admin/config/menu-attributes"


def create_app(forms: FormRegistry, user: PermissionHolder) -> None:
    """Register the settings page and its API endpoints."""

    @ui.page("/")
    def index_page() -> None:
        ui.navigate.to(SETTINGS_ROUTE)

    @ui.page(SETTINGS_ROUTE)
    def settings_route() -> None:
        ui.dark_mode()
        settings_page(forms, FORM_ID, user)

    @app.get("/api/forms/{form_id}/schema")
    def api_schema(form_id: str) -> dict:
        schema = forms.get(form_id).render(user)
        return schema.to_dict() if schema is not None else {}


def run_gui(config: AppConfig, *, reload: bool = False) -> None:
    """Run the settings GUI with a YAML-backed configuration store.

    Args:
        config: Application configuration (storage directory, user, bind address)
        reload: Whether NiceGUI should auto-reload on source changes
    """
    forms = FormRegistry()
    forms.register(MenuAttributesSettingsForm(YamlConfigStore(config.config_dir)))
    create_app(forms, config.user)

    LOGGER.info("Starting settings GUI on http://%s:%d%s", config.gui.host, config.gui.port, SETTINGS_ROUTE)
    ui.run(
        host=config.gui.host,
        port=config.gui.port,
        title="Menu attributes",
        reload=reload,
        show=False,
    )
