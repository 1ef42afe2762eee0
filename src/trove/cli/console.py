"""Shared rich console for all trove commands."""

import os
import sys

from rich.console import Console

# Item names and descriptions carry non-ASCII text; cp1252 consoles choke on it
if sys.platform == "win32":
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")

console = Console(force_terminal=False, legacy_windows=False)
