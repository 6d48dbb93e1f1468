"""Registry of the implementations understood by this framework."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .implementation import APILevel, DataFormat, Implementation
from .schema.types import SemanticVersion

logger = logging.getLogger(__name__)


class SupportedImplementations:
    """Immutable, non-empty, ordered set of supported implementations.

    Instances are passed explicitly to everything that needs to check or
    negotiate implementations, so alternative registries can be used
    (e.g. in tests) without touching process-wide state.
    """

    __slots__ = ("_items", "_lookup")

    _items: Tuple[Implementation, ...]

    def __init__(self, implementations: Iterable[Implementation]):
        items = tuple(dict.fromkeys(implementations))  # dedup, keep order
        if not items:
            raise ValueError("A registry needs at least one supported implementation!")
        for impl in items:
            if not isinstance(impl, Implementation):
                raise TypeError(f"Expected Implementation, got {type(impl).__name__}")
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_lookup", frozenset(items))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable!")

    def __contains__(self, implementation) -> bool:
        return implementation in self._lookup

    def __iter__(self) -> Iterator[Implementation]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other):
        if not isinstance(other, SupportedImplementations):
            return NotImplemented
        return self._lookup == other._lookup

    def __hash__(self):
        return hash(self._lookup)

    def __repr__(self):
        return f"{type(self).__name__}([{', '.join(map(str, self._items))}])"

    def is_supported(self, implementation: Implementation) -> bool:
        """Return whether the implementation equals one of the registered ones."""
        return implementation in self._lookup

    def negotiate(self, candidates: Iterable[Implementation]) -> List[Implementation]:
        """Return the candidates that are also supported here.

        Duplicates collapse, the order of first occurrence in the candidates is kept.
        An empty list means there is no common dialect.
        """
        unique = list(dict.fromkeys(candidates))
        common = [impl for impl in unique if impl in self._lookup]
        if dropped := [impl for impl in unique if impl not in self._lookup]:
            logger.debug("Unsupported implementations ignored: %s", ", ".join(map(str, dropped)))
        return common

    def oldest(self) -> Implementation:
        """Return the oldest supported implementation.

        Used to provide default data whenever no specific implementation is requested.
        """
        return min(self._items, key=Implementation.sort_key)

    def latest(self) -> Implementation:
        return max(self._items, key=Implementation.sort_key)


FRAMEWORK_SUPPORTED_IMPLEMENTATIONS = SupportedImplementations(
    [
        Implementation(
            data_format=DataFormat.json,
            api_support=APILevel.static_data,
            version=SemanticVersion.parse("0.2.0-alpha.1"),
        ),
    ]
)
"""Implementations supported by this framework.

Until the standard is stable there is only one supported version. After
version 1.0 of the standard is released, past versions should stay supported.
"""


def resolve_registry(
    registry: Optional[SupportedImplementations] = None,
) -> SupportedImplementations:
    """Return the given registry, or the framework default if none is given."""
    return FRAMEWORK_SUPPORTED_IMPLEMENTATIONS if registry is None else registry
