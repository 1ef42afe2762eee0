"""Rich UI components for item tables and panels."""

from typing import Sequence

from rich.panel import Panel
from rich.table import Table

from trove.core.errors import TroveError
from trove.models import Item
from trove.search import PageResult
from trove.vocabulary import Vocabularies

from .console import console


def render_error_panel(title: str, message: str, details: list[str] | None = None) -> None:
    """Render error panel."""
    lines = [message]

    if details:
        lines.append("")
        for detail in details:
            lines.append(f"  • {detail}")

    panel = Panel("\n".join(lines), title=title, border_style="red")
    console.print(panel)


def render_trove_error(error: TroveError) -> None:
    """Render a TroveError, listing its context entries as details."""
    details: list[str] = []
    for key, value in error.context.to_dict().items():
        if isinstance(value, list):
            details.extend(str(v) for v in value)
        else:
            details.append(f"{key}: {value}")
    render_error_panel(error.__class__.__name__, error.message, details)


def _equips(item: Item) -> str:
    return ", ".join(item.equips_to)


def render_items_table(result: PageResult, title: str = "Items") -> None:
    """Render one page of items."""
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Sub-type")
    table.add_column("ML", justify="right")
    table.add_column("Equips To")
    table.add_column("Owner", style="green")
    table.add_column("Location", style="dim")

    for item in result.items:
        location = item.container
        if item.tab_name:
            location = f"{location} / {item.tab_name}" if location else item.tab_name
        table.add_row(
            item.name,
            item.item_type,
            item.item_sub_type,
            str(item.minimum_level),
            _equips(item),
            item.character_name,
            location,
        )

    console.print(table)
    console.print(
        f"\n[dim]Page {result.page} of {result.total_pages} "
        f"({result.total_count} matching item(s))[/dim]"
    )


def _vocabulary_column(values: Sequence[str]) -> str:
    return "\n".join(values) if values else "[dim](none)[/dim]"


def render_vocabularies(vocabularies: Vocabularies) -> None:
    """Render the four filter vocabularies side by side."""
    table = Table(title="Filter Options")
    table.add_column("Item Types")
    table.add_column("Sub-types")
    table.add_column("Owners", style="green")
    table.add_column("Equips To")
    table.add_row(
        _vocabulary_column(vocabularies.item_types),
        _vocabulary_column(vocabularies.item_sub_types),
        _vocabulary_column(vocabularies.character_names),
        _vocabulary_column(vocabularies.equips_to),
    )
    console.print(table)
