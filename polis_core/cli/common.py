from typing import List, Optional

import typer
from rich import print

from ..implementation import Implementation
from ..registry import SupportedImplementations

ImplementationOption = typer.Option(
    None,
    "--implementation",
    "-i",
    help="Supported implementation as <format>/<api level>/<version> (can be repeated).",
)


def registry_from(implementations: Optional[List[str]]) -> Optional[SupportedImplementations]:
    """Return registry of the given implementations (or None for the framework default)."""
    if not implementations:
        return None
    try:
        return SupportedImplementations(map(Implementation.from_str, implementations))
    except ValueError as e:
        print(f"[red]Invalid implementation: {e}[/red]")
        raise typer.Exit(code=2)
