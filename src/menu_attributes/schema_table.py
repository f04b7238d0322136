from __future__ import annotations

from typing import Any, Mapping, Optional

from rich.console import Console
from rich.table import Table

from .schema import FormSchema, Select

ENABLED_SYMBOL = "✓"
DISABLED_SYMBOL = "✗"


def _format_default(value: Any) -> str:
    if value in ("", None):
        return "[dim](empty)[/dim]"
    return str(value)


class SchemaTableRenderer:
    """Renders a settings form schema and stored values as Rich tables."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def build_schema_table(self, schema: FormSchema) -> Table:
        table = Table(title=schema.title.title, show_lines=False)
        table.add_column("Attribute", style="bold")
        table.add_column("Enabled", justify="center")
        table.add_column("Widget")
        table.add_column("Default")
        table.add_column("Description", style="dim", overflow="fold")

        for details in schema:
            enable, default_field = details.fields
            symbol = (
                f"[green]{ENABLED_SYMBOL}[/green]" if enable.default else f"[red]{DISABLED_SYMBOL}[/red]"
            )
            default = default_field.default
            if isinstance(default_field, Select):
                default = default_field.options.get(default, default)
            table.add_row(
                f"{details.title} ({details.key})",
                symbol,
                default_field.type,
                _format_default(default),
                details.description,
            )
        return table

    def build_values_table(self, name: str, values: Mapping[str, Any]) -> Table:
        table = Table(title=name)
        table.add_column("Key", style="bold")
        table.add_column("Value")
        for key, value in values.items():
            table.add_row(key, _format_default(value))
        return table

    def render_schema(self, schema: FormSchema) -> None:
        if not schema.groups:
            self.console.print("[dim]No menu attributes to configure.[/dim]")
            return
        self.console.print(self.build_schema_table(schema))

    def render_values(self, name: str, values: Mapping[str, Any]) -> None:
        if not values:
            self.console.print(f"[dim]{name} has no stored values.[/dim]")
            return
        self.console.print(self.build_values_table(name, values))
