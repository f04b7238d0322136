"""
Reusable components for the menu attributes GUI.

- checkbox_field / text_field / select_field: schema field widgets
- render_field: dispatch on the field descriptor type
"""

from .fields import checkbox_field, render_field, select_field, text_field

__all__ = [
    "checkbox_field",
    "text_field",
    "select_field",
    "render_field",
]
