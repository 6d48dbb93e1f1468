"""Exceptions raised when POLIS objects cannot be constructed.

All of them are raised synchronously at construction time. None of them is a
`ValueError`, so pydantic passes them through validators unchanged instead of
folding them into a `ValidationError`.
"""


class PolisError(Exception):
    """Base class for all POLIS construction failures."""


# ---- resource finders


class ResourceFinderError(PolisError):
    """A resource finder could not be created."""


class BasePathNotAccessible(ResourceFinderError):
    """The root of a file resource finder is missing, unreachable or not a directory."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Base path not accessible: '{path}'")


class UnsupportedImplementation(ResourceFinderError):
    """The requested implementation is not known to the supported-implementation registry."""

    def __init__(self, implementation):
        self.implementation = implementation
        super().__init__(f"Unsupported implementation: {implementation}")


# ---- directory entries


class DirectoryEntryError(PolisError):
    """A provider directory entry could not be created."""


class EmptyListOfSupportedImplementations(DirectoryEntryError):
    def __init__(self):
        super().__init__("A directory entry needs at least one supported implementation!")


class NoSupportedImplementation(DirectoryEntryError):
    """None of the candidate implementations is supported by the registry."""

    def __init__(self, candidates=()):
        self.candidates = list(candidates)
        names = ", ".join(map(str, self.candidates))
        super().__init__(f"None of the requested implementations is supported: {names}")


class MirrorIdNotAssigned(DirectoryEntryError):
    def __init__(self):
        super().__init__("Mirror providers must name the provider they mirror (mirror_id)!")


# ---- directories


class DirectoryError(PolisError):
    """A provider directory could not be created."""


class EmptyDirectory(DirectoryError):
    def __init__(self):
        super().__init__("A provider directory must contain at least its own entry!")
