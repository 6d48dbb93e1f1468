"""polis_core package."""
import importlib_metadata
from typing_extensions import Final

from .errors import (  # noqa: F401
    BasePathNotAccessible,
    EmptyListOfSupportedImplementations,
    MirrorIdNotAssigned,
    NoSupportedImplementation,
    PolisError,
    UnsupportedImplementation,
)
from .finder import FileResourceFinder, RemoteResourceFinder  # noqa: F401
from .implementation import APILevel, DataFormat, Implementation  # noqa: F401
from .registry import (  # noqa: F401
    FRAMEWORK_SUPPORTED_IMPLEMENTATIONS,
    SupportedImplementations,
)

# Set version, will use version from pyproject.toml if defined
__version__: Final[str] = importlib_metadata.version(__package__ or __name__)
