"""Application configuration for the CLI and GUI host.

Example ``menu-attributes.yaml``::

    config_dir: ./config
    user:
      name: admin
      permissions:
        - administer menu attributes
    gui:
      host: 127.0.0.1
      port: 8080
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml
from jsonschema import Draft7Validator

from .errors import ConfigValidationError
from .permissions import User

CONFIG_DIR_ENV = "MENU_ATTRIBUTES_CONFIG_DIR"
DEFAULT_CONFIG_DIR = Path("config")

APP_CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "config_dir": {"type": "string", "minLength": 1},
        "user": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "permissions": {"type": "array", "items": {"type": "string"}},
            },
            "additionalProperties": False,
        },
        "gui": {
            "type": "object",
            "properties": {
                "host": {"type": "string"},
                "port": {"type": "integer", "minimum": 1, "maximum": 65535},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


@dataclass
class GuiSettings:
    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class AppConfig:
    config_dir: Path = DEFAULT_CONFIG_DIR
    user: User = field(default_factory=User)
    gui: GuiSettings = field(default_factory=GuiSettings)


def _format_path(path: Sequence[Any]) -> str:
    if not path:
        return "<root>"
    return ".".join(str(part) for part in path)


def validate_app_config(data: Any) -> list[tuple[str, str]]:
    """Return ``(path, message)`` pairs for every schema violation in ``data``."""
    validator = Draft7Validator(APP_CONFIG_SCHEMA)
    return [
        (_format_path(error.absolute_path), error.message)
        for error in sorted(validator.iter_errors(data), key=lambda exc: list(exc.absolute_path))
    ]


def build_app_config(data: Dict[str, Any], *, base_dir: Optional[Path] = None) -> AppConfig:
    issues = validate_app_config(data)
    if issues:
        raise ConfigValidationError(issues)

    config_dir = Path(data.get("config_dir") or DEFAULT_CONFIG_DIR)
    if base_dir is not None and not config_dir.is_absolute():
        config_dir = base_dir / config_dir

    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        config_dir = Path(env_dir)

    user_data = data.get("user") or {}
    gui_data = data.get("gui") or {}
    return AppConfig(
        config_dir=config_dir,
        user=User(
            name=user_data.get("name", "admin"),
            permissions=frozenset(user_data.get("permissions") or []),
        ),
        gui=GuiSettings(
            host=gui_data.get("host", GuiSettings.host),
            port=gui_data.get("port", GuiSettings.port),
        ),
    )


def load_app_config(path: Optional[Path]) -> AppConfig:
    """Load the application configuration from ``path``.

    A missing ``path`` (None) yields the defaults. Relative ``config_dir``
    values resolve against the directory holding the file.
    """
    if path is None:
        return build_app_config({})
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigValidationError([("<root>", "configuration must be a mapping")])
    return build_app_config(data, base_dir=Path(path).parent)
