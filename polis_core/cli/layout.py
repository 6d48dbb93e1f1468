from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ..config import PolisSettings
from ..errors import PolisError
from ..finder import FileResourceFinder, RemoteResourceFinder
from .common import ImplementationOption, registry_from

console = Console()

_EXAMPLE_ID = "<id>"


def _print_layout(title: str, rows):
    console.print(f"[b]{title}[/b]")
    for name, location in rows:
        # no wrapping, so paths can be copied
        console.print(f"  {name}: {location}", soft_wrap=True, highlight=False)


def _finder(make, implementations):
    settings = PolisSettings()
    registry = registry_from(implementations)
    try:
        return make(settings, registry)
    except PolisError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


def paths(
    root: Optional[Path] = typer.Argument(None, help="Provider root folder (default: POLIS_ROOT)."),
    implementations: Optional[List[str]] = ImplementationOption,
):
    """Print the local folder layout of a POLIS provider."""

    def make(settings, registry):
        if root is not None:
            settings = settings.model_copy(update={"root": root})
        return settings.make_file_finder(registry=registry)

    f: FileResourceFinder = _finder(make, implementations)
    _print_layout(
        f"{f.root_folder()} ({f.implementation})",
        [
            ("base folder", f.base_folder()),
            ("configuration", f.configuration_file()),
            ("provider directory", f.provider_directory_file()),
            ("observing facilities", f.observing_facilities_directory_file()),
            ("observing facility", f.observing_facility_file(_EXAMPLE_ID)),
            ("resources", f.resources_directory_file()),
            ("resource folder", f.resource_folder("<unique name>")),
            ("owners", f.owners_directory_file()),
            ("owner", f.owner_file(_EXAMPLE_ID)),
            ("manufacturers", f.manufacturers_directory_file()),
            ("manufacturer", f.manufacturer_file(_EXAMPLE_ID)),
        ],
    )


def urls(
    domain: Optional[str] = typer.Argument(None, help="Provider domain (default: POLIS_DOMAIN)."),
    implementations: Optional[List[str]] = ImplementationOption,
):
    """Print the URLs of the resources of a POLIS provider."""

    def make(settings, registry):
        if domain is not None:
            settings = settings.model_copy(update={"domain": domain})
        return settings.make_remote_finder(registry=registry)

    f: RemoteResourceFinder = _finder(make, implementations)
    _print_layout(
        f"{f.polis_domain()} ({f.implementation})",
        [
            ("base URL", f.base_url()),
            ("configuration", f.configuration_url()),
            ("provider directory", f.provider_directory_url()),
            ("observing facilities", f.observing_facilities_directory_url()),
            ("observing facility", f.observing_facility_url(_EXAMPLE_ID)),
            ("resources", f.resources_directory_url()),
            ("resource", f.resource_url("<unique name>")),
            ("owners", f.owners_directory_url()),
            ("owner", f.owner_url(_EXAMPLE_ID)),
            ("manufacturers", f.manufacturers_directory_url()),
            ("manufacturer", f.manufacturer_url(_EXAMPLE_ID)),
        ],
    )
