"""Capability names and the user type consumed by the settings form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

ADMINISTER_MENU_ATTRIBUTES = "administer menu attributes"


class PermissionHolder(Protocol):
    def has_permission(self, capability: str) -> bool: ...


@dataclass(frozen=True)
class User:
    """A user identified by name with a fixed set of granted capabilities."""

    name: str = "anonymous"
    permissions: frozenset[str] = field(default_factory=frozenset)

    def has_permission(self, capability: str) -> bool:
        return capability in self.permissions


ANONYMOUS = User()
