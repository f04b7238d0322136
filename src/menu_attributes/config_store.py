"""Named configuration objects and their persistence backends.

A configuration object is a flat key/value mapping identified by a name such
as ``menu_attributes.settings``. Handles are loaded, mutated and saved as a
unit; the empty key addresses the whole mapping.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml

LOGGER = logging.getLogger(__name__)

ROOT_KEY = ""


class ConfigStore(Protocol):
    def load(self, name: str) -> ConfigHandle: ...


class ConfigHandle:
    """Transient read/write view of one configuration object."""

    def __init__(self, store: _BaseStore, name: str, data: dict[str, Any]) -> None:
        self._store = store
        self.name = name
        self._data = data

    @property
    def raw_data(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        if key == ROOT_KEY:
            return copy.deepcopy(self._data)
        return copy.deepcopy(self._data.get(key, default))

    def set(self, key: str, value: Any) -> ConfigHandle:
        """Set ``key`` to ``value``. Setting the root key replaces the whole mapping."""
        if key == ROOT_KEY:
            if not isinstance(value, Mapping):
                raise TypeError(f"Root value of '{self.name}' must be a mapping, got {type(value).__name__}")
            self._data = copy.deepcopy(dict(value))
        else:
            self._data[key] = copy.deepcopy(value)
        return self

    def save(self) -> None:
        self._store.write(self.name, self._data)


class _BaseStore:
    def load(self, name: str) -> ConfigHandle:
        return ConfigHandle(self, name, self.read(name))

    def read(self, name: str) -> dict[str, Any]:
        raise NotImplementedError

    def write(self, name: str, data: dict[str, Any]) -> None:
        raise NotImplementedError


class MemoryConfigStore(_BaseStore):
    """Dict-backed store. ``save_count`` records how many saves reached it."""

    def __init__(self, initial: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._objects: dict[str, dict[str, Any]] = {
            name: copy.deepcopy(dict(data)) for name, data in (initial or {}).items()
        }
        self.save_count = 0

    def read(self, name: str) -> dict[str, Any]:
        return copy.deepcopy(self._objects.get(name, {}))

    def write(self, name: str, data: dict[str, Any]) -> None:
        self._objects[name] = copy.deepcopy(data)
        self.save_count += 1


class YamlConfigStore(_BaseStore):
    """Stores each configuration object as ``<directory>/<name>.yml``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        return self.directory / f"{name}.yml"

    def read(self, name: str) -> dict[str, Any]:
        path = self.path_for(name)
        if not path.exists():
            return {}
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        return data

    def write(self, name: str, data: dict[str, Any]) -> None:
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
        LOGGER.debug("Wrote configuration %s to %s", name, path)
