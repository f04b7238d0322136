"""String translation with placeholder substitution.

Placeholders follow the CMS convention:

- ``@name`` is replaced with the escaped value
- ``%name`` is replaced with the escaped value wrapped in ``<em>``
- ``!name`` is inserted verbatim

No catalog lookup happens here; callers that need real translations pass their
own ``Translator`` into the form.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Mapping

Translator = Callable[..., str]


def format_string(text: str, substitutions: Mapping[str, object] | None = None) -> str:
    if not substitutions:
        return text

    replacements: dict[str, str] = {}
    for key, value in substitutions.items():
        rendered = str(value)
        if key.startswith("@"):
            replacements[key] = html.escape(rendered)
        elif key.startswith("%"):
            replacements[key] = f"<em class=\"placeholder\">{html.escape(rendered)}</em>"
        elif key.startswith("!"):
            replacements[key] = rendered
        else:
            raise ValueError(f"Invalid placeholder '{key}': must start with @, % or !")

    # Longest first so "@attr" does not clobber "@attribute"
    for key in sorted(replacements, key=len, reverse=True):
        text = text.replace(key, replacements[key])
    return text


def t(text: str, substitutions: Mapping[str, object] | None = None) -> str:
    """Translate ``text`` and apply ``substitutions``."""
    return format_string(text, substitutions)
