from __future__ import annotations


class MenuAttributesError(Exception):
    """Base class for errors raised by the menu_attributes package."""


class RegistryEntryError(MenuAttributesError, ValueError):
    """Raised when the attribute registry supplies a malformed entry."""

    def __init__(self, attribute: str, path: str, message: str) -> None:
        self.attribute = attribute
        self.path = path
        super().__init__(f"Invalid menu attribute '{attribute}' at {path}: {message}")


class FormError(MenuAttributesError):
    """Raised when a form cannot be routed or submitted."""


class ConfigValidationError(MenuAttributesError):
    """Raised when the application configuration file fails validation."""

    def __init__(self, issues: list[tuple[str, str]]) -> None:
        self.issues = issues
        details = "; ".join(f"{path}: {message}" for path, message in issues)
        super().__init__(f"Invalid configuration: {details}")
