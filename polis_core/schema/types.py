"""Useful types and validators for use in pydantic models."""
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Tuple, Union

import isodate
from pydantic import StringConstraints
from typing_extensions import Annotated, TypeAlias

from .encoder import json_encoder
from .parser import BaseParser, ParserMixin

# we use constrained strings instead of pydantic anystr config settings
# so that we can react to whitespace

NonEmptyStr: TypeAlias = Annotated[str, StringConstraints(pattern=r"\S")]
"""Non-empty string (contains non-whitespace characters)."""

CountryCodeStr: TypeAlias = Annotated[
    str, StringConstraints(pattern=r"^[A-Za-z]{2}$", to_upper=True)
]
"""Two-letter (ISO 3166-1 alpha-2) country code."""


class StringParser(BaseParser):
    """Parser from string into some target class."""

    @classmethod
    def parse(cls, tcls, v):
        if isinstance(v, tcls):
            return v

        if not isinstance(v, str):
            msg = f"Expected str or {tcls.__name__}, got {type(v).__name__}."
            raise ValueError(msg)

        ret = tcls(v)
        return ret


# ----
# Semantic versions

_SEMVER_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_SEMVER_REGEX = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    rf"(?:-({_SEMVER_IDENT}(?:\.{_SEMVER_IDENT})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

SemVerTuple: TypeAlias = Tuple[int, int, int]
"""Type to be used for SemVer triples."""


def _prerelease_key(ident: str):
    # numeric identifiers have lower precedence than alphanumeric ones
    return (0, int(ident), "") if ident.isdigit() else (1, 0, ident)


@json_encoder(str)
@total_ordering
class SemanticVersion(ParserMixin):
    """Semantic version as defined on https://semver.org.

    Equality, hashing and ordering follow semver precedence,
    i.e. build metadata is ignored.
    """

    __slots__ = ("major", "minor", "patch", "prerelease", "build")

    major: int
    minor: int
    patch: int
    prerelease: Tuple[str, ...]
    build: Tuple[str, ...]

    def __init__(
        self,
        major: Union[int, str],
        minor: int = 0,
        patch: int = 0,
        prerelease: Tuple[str, ...] = (),
        build: Tuple[str, ...] = (),
    ):
        if isinstance(major, str):
            parsed = self.parse(major)
            major, minor, patch = parsed.major, parsed.minor, parsed.patch
            prerelease, build = parsed.prerelease, parsed.build
        if min(major, minor, patch) < 0:
            raise ValueError("Version numbers must be non-negative!")
        self.major, self.minor, self.patch = major, minor, patch
        self.prerelease = tuple(prerelease)
        self.build = tuple(build)

    @classmethod
    def parse(cls, ver: str) -> SemanticVersion:
        """Parse a version string like `0.2.0-alpha.1+build.5`."""
        m = _SEMVER_REGEX.fullmatch(ver.strip())
        if m is None:
            raise ValueError(f"Invalid semantic version: '{ver}'")
        major, minor, patch, pre, build = m.groups()
        return cls(
            int(major),
            int(minor),
            int(patch),
            tuple(pre.split(".")) if pre else (),
            tuple(build.split(".")) if build else (),
        )

    @property
    def triple(self) -> SemVerTuple:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def _precedence(self):
        pre = tuple(map(_prerelease_key, self.prerelease))
        # a release has higher precedence than any of its pre-releases
        return (self.triple, not self.prerelease, pre)

    def __eq__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() == other._precedence()

    def __lt__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __hash__(self):
        return hash(self._precedence())

    def __str__(self):
        ret = ".".join(map(str, self.triple))
        if self.prerelease:
            ret += "-" + ".".join(self.prerelease)
        if self.build:
            ret += "+" + ".".join(self.build)
        return ret

    def __repr__(self):
        return f"{type(self).__name__}('{self}')"

    class Parser(StringParser):
        schema_info = dict(
            title="semantic version string",
            type="string",
            examples=["0.2.0-alpha.1", "1.0.0"],
        )


# ----
# Dates


_ISO_SECONDS = f"{isodate.DATE_EXT_COMPLETE}T{isodate.TIME_EXT_COMPLETE}"


def isoformat(dt: datetime) -> str:
    """Return ISO 8601 string, with fractional seconds only if there are any.

    UTC is always written as `Z`, other offsets as `+HH:MM`.
    """
    fmt = f"{_ISO_SECONDS}.%f" if dt.microsecond else _ISO_SECONDS
    offset = dt.utcoffset()
    if offset is None:
        return isodate.strftime(dt, fmt)
    if offset == timedelta(0):
        return isodate.strftime(dt, fmt) + "Z"
    return isodate.strftime(dt, fmt + isodate.TZ_EXT)


@json_encoder(isoformat)
class IsoDatetime(ParserMixin, datetime):
    """Date and time that is only accepted in ISO 8601 format."""

    @classmethod
    def from_datetime(cls, dt: datetime) -> IsoDatetime:
        if isinstance(dt, cls):
            return dt
        return cls(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond,
            dt.tzinfo,
            fold=dt.fold,
        )

    class Parser(BaseParser):
        schema_info = dict(
            title="string in ISO 8601 date-time format",
            type="string",
            format="date-time",
            examples=["2024-10-09T12:00:00Z"],
        )

        @classmethod
        def parse(cls, tcls, v):
            if isinstance(v, datetime):
                return tcls.from_datetime(v)
            if not isinstance(v, str):
                raise ValueError(f"Expected ISO 8601 string, got {type(v).__name__}.")
            try:
                dt = isodate.parse_datetime(v)
            except (ValueError, isodate.ISO8601Error) as e:
                msg = f"Date values must be ISO 8601 formatted, got '{v}'"
                raise ValueError(msg) from e
            return tcls.from_datetime(dt)


def utc_now() -> IsoDatetime:
    """Return the current UTC time, truncated to seconds (ISO 8601 precision in POLIS)."""
    now = datetime.now(timezone.utc).replace(microsecond=0)
    return IsoDatetime.from_datetime(now)

