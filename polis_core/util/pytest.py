"""Helpers for tests of code using polis_core."""
from typing import Iterable, Union

from ..implementation import Implementation
from ..registry import SupportedImplementations


def registry_of(*implementations: Union[str, Implementation]) -> SupportedImplementations:
    """Return registry of implementations given as objects or `<format>/<api>/<version>`."""
    items: Iterable[Implementation] = (
        Implementation.from_str(i) if isinstance(i, str) else i for i in implementations
    )
    return SupportedImplementations(items)
