"""Query commands for browsing items and filter options."""

import json
from typing import Optional

import typer
from typing_extensions import Annotated

from trove.core.settings import get_settings
from trove.search import DEFAULT_MAX_LEVEL, DEFAULT_MIN_LEVEL, FILTER_ALL, FilterParams

from ..console import console
from ..params import DirsArgument, load_catalog
from ..ui import render_items_table, render_vocabularies


def query_items(
    dirs: DirsArgument = None,
    item_type: Annotated[
        str, typer.Option("--type", "-t", help="Item type, or All")
    ] = FILTER_ALL,
    item_sub_type: Annotated[
        str, typer.Option("--sub-type", help="Item sub-type, or All")
    ] = FILTER_ALL,
    owner: Annotated[
        str, typer.Option("--owner", "-o", help="Owning character or account bank, or All")
    ] = FILTER_ALL,
    search: Annotated[
        str, typer.Option("--search", "-s", help="Text to find in names, descriptions and effects")
    ] = "",
    equips_to: Annotated[
        str, typer.Option("--equips-to", "-e", help="Equip slot, or All")
    ] = FILTER_ALL,
    min_level: Annotated[
        int, typer.Option("--min-level", min=0, help="Lowest minimum level")
    ] = DEFAULT_MIN_LEVEL,
    max_level: Annotated[
        int, typer.Option("--max-level", min=0, help="Highest minimum level")
    ] = DEFAULT_MAX_LEVEL,
    page: Annotated[int, typer.Option("--page", "-p", min=1, help="Result page")] = 1,
    page_size: Annotated[
        Optional[int], typer.Option("--page-size", min=1, help="Items per page")
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the page as JSON instead of a table")
    ] = False,
) -> None:
    """Filter and search items across all snapshot files."""
    catalog = load_catalog(dirs)
    params = FilterParams(
        item_type=item_type,
        item_sub_type=item_sub_type,
        character_name=owner,
        name_search=search,
        equips_to=equips_to,
        min_level=min_level,
        max_level=max_level,
        page=page,
    )
    result = catalog.query(params, page_size=page_size or get_settings().page_size)

    if as_json:
        payload = {
            "page": result.page,
            "total_pages": result.total_pages,
            "total_count": result.total_count,
            "items": [item.model_dump(mode="json", by_alias=True) for item in result.items],
        }
        typer.echo(json.dumps(payload, ensure_ascii=False))
        return

    if not result.items:
        console.print("[yellow]No items match the given filters[/yellow]")
        return

    render_items_table(result)


def list_vocabularies(
    dirs: DirsArgument = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the option lists as JSON")
    ] = False,
) -> None:
    """Show the item types, sub-types, owners and equip slots available for filtering."""
    catalog = load_catalog(dirs)
    vocabularies = catalog.current_snapshot().vocabularies

    if as_json:
        typer.echo(json.dumps(vocabularies.to_dict(), ensure_ascii=False))
        return

    render_vocabularies(vocabularies)
