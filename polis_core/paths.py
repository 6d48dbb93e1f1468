"""Templates of the well-known POLIS resource paths.

All paths start with the base directory `polis/`. Everything describing data
lives below the version of the standard, `polis/<version>/`. The only
exceptions are the provider configuration file (`polis/polis.json`) and the
provider directory (`polis/polis_directory.json`), which describe which
versions exist at all.

Layout (for version `V` and extension `E`)::

    polis/polis.E
    polis/polis_directory.E
    polis/V/polis_observing_facilities.E
    polis/V/polis_observing_facilities/<id>/<id>.E
    polis/V/polis_observing_facilities/<id>/<data id>.E
    polis/V/polis_resources.E
    polis/V/polis_resources/<unique name>/
    polis/V/polis_owners.E
    polis/V/polis_owners/<id>.E
    polis/V/polis_manufacturers.E
    polis/V/polis_manufacturers/<id>.E

Index files (compact lists of all entities of a kind) are siblings
of the folder of their kind.

Everything here is a pure function of its arguments.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from typing_extensions import Final

from .implementation import Implementation

SEPARATOR: Final[str] = "/"


class PredefinedPaths:
    """Names of the well-known folders and files (without extension)."""

    base_service_directory = "polis"
    service_provider_configuration_file_name = "polis"
    service_provider_directory_file_name = "polis_directory"
    observing_facilities_directory = "polis_observing_facilities"
    observing_facilities_directory_file_name = "polis_observing_facilities"
    resources_directory = "polis_resources"
    resources_directory_file_name = "polis_resources"
    owners_directory = "polis_owners"
    owners_directory_file_name = "polis_owners"
    manufacturers_directory = "polis_manufacturers"
    manufacturers_directory_file_name = "polis_manufacturers"


def normalised_path(path: str) -> str:
    """Return path with exactly one trailing separator (idempotent)."""
    return path if path.endswith(SEPARATOR) else f"{path}{SEPARATOR}"


def entity_id(value) -> str:
    """Return string form of an entity id (UUIDs in canonical form)."""
    return str(value) if isinstance(value, UUID) else value


@dataclass(frozen=True)
class RelativePaths:
    """Paths relative to a provider root, for one version and data format."""

    version_string: str
    file_extension: str
    """Extension without the dot, e.g. `json`."""

    base_path: ClassVar[str] = f"{PredefinedPaths.base_service_directory}{SEPARATOR}"

    @classmethod
    def for_implementation(cls, implementation: Implementation) -> RelativePaths:
        return cls(
            version_string=str(implementation.version),
            file_extension=implementation.data_format.value,
        )

    def file_name(self, name: str) -> str:
        """Return file name with the extension of the bound data format."""
        return f"{name}.{self.file_extension}"

    def _versioned(self, name: str) -> str:
        return f"{self.base_path}{self.version_string}{SEPARATOR}{name}"

    # folder paths (without trailing separator)

    def observing_facilities_path(self) -> str:
        return self._versioned(PredefinedPaths.observing_facilities_directory)

    def resources_path(self) -> str:
        return self._versioned(PredefinedPaths.resources_directory)

    def owners_path(self) -> str:
        return self._versioned(PredefinedPaths.owners_directory)

    def manufacturers_path(self) -> str:
        return self._versioned(PredefinedPaths.manufacturers_directory)

    # file paths

    def configuration_file(self) -> str:
        name = PredefinedPaths.service_provider_configuration_file_name
        return f"{self.base_path}{self.file_name(name)}"

    def provider_directory_file(self) -> str:
        name = PredefinedPaths.service_provider_directory_file_name
        return f"{self.base_path}{self.file_name(name)}"

    def observing_facilities_directory_file(self) -> str:
        name = PredefinedPaths.observing_facilities_directory_file_name
        return self._versioned(self.file_name(name))

    def resources_directory_file(self) -> str:
        return self._versioned(self.file_name(PredefinedPaths.resources_directory_file_name))

    def owners_directory_file(self) -> str:
        return self._versioned(self.file_name(PredefinedPaths.owners_directory_file_name))

    def manufacturers_directory_file(self) -> str:
        name = PredefinedPaths.manufacturers_directory_file_name
        return self._versioned(self.file_name(name))


@dataclass(frozen=True)
class ResourceLocation:
    """Relative paths anchored at a root (local folder or remote domain).

    The root must already be normalised (see `normalised_path`).
    Folders are returned with one trailing separator.
    """

    root: str
    paths: RelativePaths

    def relative(self, location: str) -> str:
        """Strip the root from a location produced by this tree."""
        if not location.startswith(self.root):
            raise ValueError(f"'{location}' is not located below '{self.root}'")
        return location[len(self.root) :]

    def _folder(self, rel: str) -> str:
        return normalised_path(f"{self.root}{rel}")

    def _file(self, rel: str) -> str:
        return f"{self.root}{rel}"

    # top-level

    def base(self) -> str:
        return self._folder(self.paths.base_path)

    def configuration_file(self) -> str:
        return self._file(self.paths.configuration_file())

    def provider_directory_file(self) -> str:
        return self._file(self.paths.provider_directory_file())

    # kind folders and their index files

    def observing_facilities(self) -> str:
        return self._folder(self.paths.observing_facilities_path())

    def observing_facilities_directory_file(self) -> str:
        return self._file(self.paths.observing_facilities_directory_file())

    def resources(self) -> str:
        return self._folder(self.paths.resources_path())

    def resources_directory_file(self) -> str:
        return self._file(self.paths.resources_directory_file())

    def owners(self) -> str:
        return self._folder(self.paths.owners_path())

    def owners_directory_file(self) -> str:
        return self._file(self.paths.owners_directory_file())

    def manufacturers(self) -> str:
        return self._folder(self.paths.manufacturers_path())

    def manufacturers_directory_file(self) -> str:
        return self._file(self.paths.manufacturers_directory_file())

    # entities

    def observing_facility_folder(self, facility_id) -> str:
        return normalised_path(f"{self.observing_facilities()}{entity_id(facility_id)}")

    def observing_facility_file(self, facility_id) -> str:
        fid = entity_id(facility_id)
        return f"{self.observing_facility_folder(fid)}{self.paths.file_name(fid)}"

    def observing_data_file(self, data_id, facility_id) -> str:
        """Data record owned by an observing facility, stored in the facility folder."""
        folder = self.observing_facility_folder(facility_id)
        return f"{folder}{self.paths.file_name(entity_id(data_id))}"

    def resource_folder(self, unique_name: str) -> str:
        return normalised_path(f"{self.resources()}{unique_name}")

    def owner_file(self, owner_id) -> str:
        return f"{self.owners()}{self.paths.file_name(entity_id(owner_id))}"

    def manufacturer_file(self, manufacturer_id) -> str:
        return f"{self.manufacturers()}{self.paths.file_name(entity_id(manufacturer_id))}"
