"""Implementation descriptors: which dialect of the POLIS standard is spoken.

An `Implementation` combines data format, API support level and version of
the standard. Service providers advertise the implementations they serve,
clients look for providers supporting the combination they understand.
"""
from __future__ import annotations

from enum import Enum

from pydantic import ConfigDict

from .schema.base import PolisBaseModel
from .schema.types import SemanticVersion


class DataFormat(str, Enum):
    """Wire formats of the POLIS standard."""

    json = "json"
    xml = "xml"  # declared by the standard, not implemented by any revision yet


class APILevel(str, Enum):
    """The three levels of API support, ordered from simplest to most complete."""

    static_data = "static_data"
    """The service provider hosts only static data."""

    dynamic_status = "dynamic_status"
    """The provider propagates status information of observing facilities."""

    dynamic_scheduling = "dynamic_scheduling"
    """The provider can schedule observations."""

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    # str comparison would order lexicographically, so override all of them

    def __lt__(self, other):
        if not isinstance(other, APILevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, APILevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, APILevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, APILevel):
            return NotImplemented
        return self.rank >= other.rank


class Implementation(PolisBaseModel):
    """Data format, API level and version identifying one dialect of the standard.

    Instances are immutable, equality and hashing are structural
    (the version is compared with semantic version equality).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    data_format: DataFormat
    api_support: APILevel
    version: SemanticVersion

    @property
    def file_extension(self) -> str:
        """File extension of resources in this implementation, e.g. `.json`."""
        return f".{self.data_format.value}"

    def sort_key(self):
        """Key ordering by version, then API level, preferring JSON over XML."""
        return (self.version, self.api_support.rank, self.data_format is not DataFormat.json)

    @classmethod
    def from_str(cls, value: str) -> Implementation:
        """Parse the compact form `<format>/<api level>/<version>`."""
        parts = value.split("/")
        if len(parts) != 3:
            msg = f"Expected '<format>/<api level>/<version>', got '{value}'"
            raise ValueError(msg)
        fmt, api, ver = parts
        return cls(data_format=fmt, api_support=api, version=ver)

    def __str__(self) -> str:
        return f"{self.data_format.value}/{self.api_support.value}/{self.version}"
