import logging
import platform
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from .. import __version__
from ..directory import ObservingFacilityDirectory, PolisDirectory
from ..errors import PolisError
from ..paths import PredefinedPaths
from ..registry import resolve_registry
from ..util.logging import MessageCollector
from .common import ImplementationOption, registry_from


class DocumentKind(str, Enum):
    provider_directory = "provider_directory"
    observing_facilities = "observing_facilities"


_KIND_MODELS = {
    DocumentKind.provider_directory: PolisDirectory,
    DocumentKind.observing_facilities: ObservingFacilityDirectory,
}


def _guess_kind(path: Path) -> Optional[DocumentKind]:
    if path.stem == PredefinedPaths.service_provider_directory_file_name:
        return DocumentKind.provider_directory
    if path.stem == PredefinedPaths.observing_facilities_directory_file_name:
        return DocumentKind.observing_facilities
    return None


def info(implementations: Optional[List[str]] = ImplementationOption):
    """Show information about the system and the supported POLIS implementations."""
    un = platform.uname()
    print(f"[b]System:[/b] {un.system} {un.release}")
    print(
        f"[b]Python:[/b] {platform.python_version()} ({platform.python_implementation()})"
    )
    print("[b]polis-core:[/b]", __version__)
    print("[b]Supported implementations:[/b]")
    for impl in resolve_registry(registry_from(implementations)):
        print(f"  {impl}")


def check(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    kind: Optional[DocumentKind] = typer.Option(
        None, help="Kind of document (guessed from the file name if not given)."
    ),
    implementations: Optional[List[str]] = ImplementationOption,
):
    """Decode a POLIS directory file and report whether it is valid."""
    kind = kind or _guess_kind(file)
    if kind is None:
        print(f"[red]Cannot guess kind of '{file.name}', please pass --kind.[/red]")
        raise typer.Exit(code=2)

    collector = MessageCollector(level=logging.WARNING)
    logger = logging.getLogger("polis_core")
    logger.addHandler(collector)
    try:
        _KIND_MODELS[kind].from_file(file, registry=registry_from(implementations))
    except (ValidationError, PolisError) as e:
        print(f"[b][red]Invalid {kind.value} file:[/red][/b] {file}")
        print(escape(str(e)))
        raise typer.Exit(code=1)
    finally:
        logger.removeHandler(collector)

    for msg in collector.warning_messages:
        print(f"[yellow]{escape(msg)}[/yellow]")
    print(f"[b][green]Valid {kind.value} file:[/green][/b] {file}")
