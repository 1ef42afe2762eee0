"""Shared CLI parameter helpers."""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from trove.catalog import Catalog
from trove.core.errors import TroveError
from trove.core.settings import get_settings

from .ui import render_trove_error

DirsArgument = Annotated[
    Optional[list[Path]],
    typer.Argument(
        help="Directories with Trove JSON files (defaults to TROVE_DIRS)",
        show_default=False,
    ),
]


def resolve_dirs(dirs: list[Path] | None) -> list[Path]:
    """Use the command-line directories, falling back to settings."""
    if dirs:
        return list(dirs)
    return get_settings().require_dirs()


def load_catalog(dirs: list[Path] | None) -> Catalog:
    """
    Build and load a catalog, exiting with an error panel on failure.
    """
    try:
        catalog = Catalog(resolve_dirs(dirs))
        catalog.load()
    except TroveError as e:
        render_trove_error(e)
        raise typer.Exit(1) from None
    return catalog
