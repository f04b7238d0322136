"""
Menu attributes web GUI using NiceGUI.

Public API:
    - create_app: Register the settings page for a form registry and user
    - run_gui: Start the web server for an application configuration
"""

from __future__ import annotations

from .app import create_app, run_gui

__all__ = [
    "create_app",
    "run_gui",
]
