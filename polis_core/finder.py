"""Resource finders: bind the POLIS path templates to a root.

`FileResourceFinder` anchors the layout in a local directory,
`RemoteResourceFinder` in the domain of a service provider. Both are bound to
one supported `Implementation`, which determines version folder and file
extension. After construction all accessors are pure string computations.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from .errors import BasePathNotAccessible, UnsupportedImplementation
from .implementation import Implementation
from .paths import SEPARATOR, RelativePaths, ResourceLocation, normalised_path
from .registry import SupportedImplementations, resolve_registry

logger = logging.getLogger(__name__)


def _check_supported(
    implementation: Implementation, registry: Optional[SupportedImplementations]
) -> None:
    if not resolve_registry(registry).is_supported(implementation):
        raise UnsupportedImplementation(implementation)


def _local_path(root: Union[str, Path]) -> Path:
    """Return local path for a plain path or a `file://` URL."""
    if isinstance(root, str) and root.startswith("file:"):
        url = urlparse(root)
        if url.netloc not in ("", "localhost"):
            raise BasePathNotAccessible(root)
        return Path(url2pathname(url.path))
    return Path(root)


def _is_accessible_dir(path: Path) -> bool:
    try:
        return path.is_dir() and os.access(path, os.R_OK | os.X_OK)
    except OSError:
        return False


class FileResourceFinder:
    """Locate POLIS resources in a local directory tree.

    Raises:
        UnsupportedImplementation: if the implementation is not in the registry
            (checked before touching the filesystem).
        BasePathNotAccessible: if the root does not exist, is not a directory
            or cannot be read.
    """

    def __init__(
        self,
        root: Union[str, Path],
        implementation: Implementation,
        *,
        registry: Optional[SupportedImplementations] = None,
    ):
        _check_supported(implementation, registry)

        path = _local_path(root)
        if not _is_accessible_dir(path):
            raise BasePathNotAccessible(root)

        self.implementation = implementation
        self.data_format_string = implementation.data_format.value
        self.version_string = str(implementation.version)
        self._location = ResourceLocation(
            root=normalised_path(path.absolute().as_posix()),
            paths=RelativePaths.for_implementation(implementation),
        )
        logger.debug("File resource finder for %s at %s", implementation, self.root_folder())

    def __repr__(self):
        return f"{type(self).__name__}('{self.root_folder()}', '{self.implementation}')"

    def relative(self, path: str) -> str:
        """Return the part of a path below the root folder."""
        return self._location.relative(path)

    def root_folder(self) -> str:
        return self._location.root

    def base_folder(self) -> str:
        return self._location.base()

    def observing_facilities_folder(self) -> str:
        return self._location.observing_facilities()

    def resources_folder(self) -> str:
        return self._location.resources()

    def owners_folder(self) -> str:
        return self._location.owners()

    def manufacturers_folder(self) -> str:
        return self._location.manufacturers()

    def configuration_file(self) -> str:
        return self._location.configuration_file()

    def provider_directory_file(self) -> str:
        return self._location.provider_directory_file()

    def observing_facilities_directory_file(self) -> str:
        return self._location.observing_facilities_directory_file()

    def resources_directory_file(self) -> str:
        return self._location.resources_directory_file()

    def owners_directory_file(self) -> str:
        return self._location.owners_directory_file()

    def manufacturers_directory_file(self) -> str:
        return self._location.manufacturers_directory_file()

    def observing_facility_folder(self, facility_id) -> str:
        return self._location.observing_facility_folder(facility_id)

    def observing_facility_file(self, facility_id) -> str:
        return self._location.observing_facility_file(facility_id)

    def observing_data_file(self, data_id, facility_id) -> str:
        return self._location.observing_data_file(data_id, facility_id)

    def resource_folder(self, unique_name: str) -> str:
        return self._location.resource_folder(unique_name)

    def owner_file(self, owner_id) -> str:
        return self._location.owner_file(owner_id)

    def manufacturer_file(self, manufacturer_id) -> str:
        return self._location.manufacturer_file(manufacturer_id)


class RemoteResourceFinder:
    """Locate POLIS resources of a service provider domain.

    The domain is not contacted, so only the implementation check can fail.
    """

    def __init__(
        self,
        domain: str,
        implementation: Implementation,
        *,
        registry: Optional[SupportedImplementations] = None,
    ):
        _check_supported(implementation, registry)

        self.implementation = implementation
        self.data_format_string = implementation.data_format.value
        self.version_string = str(implementation.version)
        self._location = ResourceLocation(
            root=normalised_path(str(domain).rstrip(SEPARATOR)),
            paths=RelativePaths.for_implementation(implementation),
        )
        logger.debug("Remote resource finder for %s at %s", implementation, self.polis_domain())

    def __repr__(self):
        return f"{type(self).__name__}('{self.polis_domain()}', '{self.implementation}')"

    def relative(self, url: str) -> str:
        """Return the part of a URL below the provider domain."""
        return self._location.relative(url)

    def polis_domain(self) -> str:
        return self._location.root

    def base_url(self) -> str:
        return self._location.base()

    def observing_facilities_url(self) -> str:
        return self._location.observing_facilities()

    def resources_url(self) -> str:
        return self._location.resources()

    def owners_url(self) -> str:
        return self._location.owners()

    def manufacturers_url(self) -> str:
        return self._location.manufacturers()

    def configuration_url(self) -> str:
        return self._location.configuration_file()

    def provider_directory_url(self) -> str:
        return self._location.provider_directory_file()

    def observing_facilities_directory_url(self) -> str:
        return self._location.observing_facilities_directory_file()

    def resources_directory_url(self) -> str:
        return self._location.resources_directory_file()

    def owners_directory_url(self) -> str:
        return self._location.owners_directory_file()

    def manufacturers_directory_url(self) -> str:
        return self._location.manufacturers_directory_file()

    def observing_facility_folder_url(self, facility_id) -> str:
        return self._location.observing_facility_folder(facility_id)

    def observing_facility_url(self, facility_id) -> str:
        return self._location.observing_facility_file(facility_id)

    def observing_data_url(self, data_id, facility_id) -> str:
        return self._location.observing_data_file(data_id, facility_id)

    def resource_url(self, unique_name: str) -> str:
        return self._location.resource_folder(unique_name)

    def owner_url(self, owner_id) -> str:
        return self._location.owner_file(owner_id)

    def manufacturer_url(self, manufacturer_id) -> str:
        return self._location.manufacturer_file(manufacturer_id)
