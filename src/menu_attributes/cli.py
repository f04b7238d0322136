"""Command line interface for the menu attributes settings form."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml
from rich.console import Console

from .config import AppConfig, load_app_config
from .config_store import YamlConfigStore
from .errors import MenuAttributesError
from .logging_utils import configure_logging
from .schema import Checkbox, FormSchema
from .schema_table import SchemaTableRenderer
from .settings_form import CONFIG_NAME, MenuAttributesSettingsForm
from .version import __version__

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_ACCESS = 2

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="menu-attributes",
        description="Configure which menu link attributes are available and their defaults.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="Path to the application YAML configuration")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Show the settings form for the configured user")
    render.add_argument("--json", action="store_true", help="Print the form as JSON instead of a table")

    subparsers.add_parser("show", help="Show the stored menu attribute settings")

    submit = subparsers.add_parser("submit", help="Submit values through the settings form")
    submit.add_argument(
        "values",
        nargs="+",
        metavar="KEY=VALUE",
        help="Field values, e.g. enable_target=true target=_blank",
    )

    gui = subparsers.add_parser("gui", help="Start the web settings page")
    gui.add_argument("--host", help="Override the bind host")
    gui.add_argument("--port", type=int, help="Override the bind port")

    return parser


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean, got '{value}'")


def parse_assignments(schema: FormSchema, pairs: Sequence[str]) -> dict[str, Any]:
    """Parse ``KEY=VALUE`` pairs against the fields declared by ``schema``.

    Checkbox values are parsed as booleans; everything else is kept verbatim.

    Raises:
        ValueError: On malformed pairs, unknown field keys or invalid booleans
    """
    values: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got '{pair}'")
        try:
            spec = schema.get_field(key)
        except KeyError:
            raise ValueError(f"Unknown field '{key}'") from None
        values[key] = parse_bool(raw) if isinstance(spec, Checkbox) else raw
    return values


def _render(form: MenuAttributesSettingsForm, config: AppConfig, console: Console, as_json: bool) -> int:
    schema = form.render(config.user)
    if schema is None:
        console.print(f"[yellow]User '{config.user.name}' may not administer menu attributes.[/yellow]")
        return EXIT_NO_ACCESS
    if as_json:
        console.print_json(json.dumps(schema.to_dict()))
    else:
        SchemaTableRenderer(console).render_schema(schema)
    return EXIT_OK


def _submit(form: MenuAttributesSettingsForm, config: AppConfig, console: Console, pairs: Sequence[str]) -> int:
    schema: Optional[FormSchema] = form.render(config.user)
    if schema is None:
        console.print(f"[yellow]User '{config.user.name}' may not administer menu attributes.[/yellow]")
        return EXIT_NO_ACCESS

    assignments = parse_assignments(schema, pairs)
    values = schema.defaults()
    values.update(assignments)
    form.submit(schema, {schema.tabs.key: values})
    console.print("[green]The configuration options have been saved.[/green]")
    return EXIT_OK


def run(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()
    configure_logging(args.verbose, console=console)

    try:
        config = load_app_config(args.config)
        form = MenuAttributesSettingsForm(YamlConfigStore(config.config_dir))

        if args.command == "render":
            return _render(form, config, console, args.json)
        if args.command == "show":
            SchemaTableRenderer(console).render_values(CONFIG_NAME, form.config().get(""))
            return EXIT_OK
        if args.command == "submit":
            return _submit(form, config, console, args.values)
        if args.command == "gui":
            from .gui import run_gui

            if args.host:
                config.gui.host = args.host
            if args.port:
                config.gui.port = args.port
            run_gui(config)
            return EXIT_OK
    except (MenuAttributesError, ValueError, OSError, yaml.YAMLError) as exc:
        LOGGER.error("%s", exc)
        return EXIT_ERROR

    parser.error(f"Unknown command {args.command}")
    return EXIT_ERROR


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
