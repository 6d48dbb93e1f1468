"""Directories of POLIS service providers and observing facilities.

Every provider publishes the list of providers it knows about (including its
own entry). Entries only keep the implementations that both the provider and
this framework understand, see `DirectoryEntry`.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Optional, Type, TypeVar, Union
from uuid import UUID, uuid4

from pydantic import ConfigDict, Field, ValidationInfo, field_validator, model_validator

from .errors import (
    EmptyDirectory,
    EmptyListOfSupportedImplementations,
    MirrorIdNotAssigned,
    NoSupportedImplementation,
)
from .implementation import Implementation
from .registry import SupportedImplementations, resolve_registry
from .schema.base import PolisBaseModel, validation_context
from .schema.common import AdminContact, Identity
from .schema.types import IsoDatetime, NonEmptyStr, utc_now

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="DirectoryEntry")


class ProviderType(str, Enum):
    """Kinds of POLIS service providers.

    Clients should in general only use `public` providers and their mirrors.
    """

    public = "public"
    """Production providers, with enough resources to serve many clients."""

    private = "private"
    """Local cache of an organisation (e.g. a club), possibly requiring authentication."""

    local = "local"
    """Disposable (often offline) cache of a desktop or mobile client."""

    experimental = "experimental"
    """Sandbox for new developments, not required to comply with the standard."""

    mirror = "mirror"
    """Used only while the mirrored public provider (see `mirror_id`) is unreachable."""


class ServiceReachability(str, Enum):
    """Reachability of a provider, as observed by the provider publishing the entry.

    Should not be changed more than about once a day, and only after
    checking that other providers observe the same.
    """

    reachable_and_responsive = "reachable_and_responsive"
    reachable_but_slow = "reachable_but_slow"
    currently_unreachable = "currently_unreachable"
    permanently_unreachable = "permanently_unreachable"
    """Down for a long time. The entry can be removed after about 18 months."""

    local_use_only = "local_use_only"


def _registry_from(info: ValidationInfo) -> SupportedImplementations:
    return resolve_registry((info.context or {}).get("registry"))


class DirectoryEntry(PolisBaseModel):
    """Everything needed to identify and contact a POLIS service provider.

    Construction checks, in this order:

    * the list of supported implementations must not be empty
      (`EmptyListOfSupportedImplementations`),
    * mirrors must name the provider they mirror (`MirrorIdNotAssigned`),
    * at least one implementation must also be supported by this framework
      (`NoSupportedImplementation`). Only the common ones are kept.

    The registry used for the last check can be passed to `create` or
    `from_json`, otherwise the framework default is used.

    Entries are immutable, use `updated` to get a changed copy.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    """Should never be changed."""

    mirror_id: Optional[UUID] = None
    """Id of the mirrored provider (only for mirrors)."""

    reachability_status: ServiceReachability = ServiceReachability.currently_unreachable

    name: NonEmptyStr
    short_description: Optional[NonEmptyStr] = None

    last_update: IsoDatetime = Field(default_factory=utc_now)
    """Change this only if the data of the provider really changed."""

    url: NonEmptyStr
    """Fully qualified URL of the provider, e.g. https://polis.observer"""

    supported_implementations: List[Implementation]
    provider_type: ProviderType

    admin_contact: AdminContact
    """Should expose as little personal information as possible."""

    @model_validator(mode="before")
    @classmethod
    def check_candidates_and_mirror(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        candidates = data.get("supported_implementations")
        if isinstance(candidates, (list, tuple, set)) and not candidates:
            raise EmptyListOfSupportedImplementations()
        if data.get("provider_type") == ProviderType.mirror and data.get("mirror_id") is None:
            raise MirrorIdNotAssigned()
        return data

    @field_validator("supported_implementations")
    @classmethod
    def negotiate_implementations(cls, v: List[Implementation], info: ValidationInfo):
        common = _registry_from(info).negotiate(v)
        if not common:
            raise NoSupportedImplementation(v)
        if len(common) < len(set(v)):
            dropped = [str(impl) for impl in dict.fromkeys(v) if impl not in common]
            logger.warning("Dropping unsupported implementations: %s", ", ".join(dropped))
        return common

    @classmethod
    def create(
        cls: Type[E],
        *,
        registry: Optional[SupportedImplementations] = None,
        **fields,
    ) -> E:
        """Create an entry, negotiating implementations against the given registry."""
        return cls.model_validate(fields, context=validation_context(registry))

    def updated(
        self: E,
        *,
        registry: Optional[SupportedImplementations] = None,
        **changes,
    ) -> E:
        """Return a new entry with the given changes, validated like a new one.

        Unless given explicitly, `last_update` is set to the current time.
        """
        data = dict(self)
        data["last_update"] = utc_now()
        data.update(changes)
        return type(self).create(registry=registry, **data)

    def is_mirror(self) -> bool:
        return self.provider_type is ProviderType.mirror


class PolisDirectory(PolisBaseModel):
    """List of all known providers.

    Must contain at least the entry of the provider serving it.
    """

    last_update: IsoDatetime = Field(default_factory=utc_now, alias="last_updated")
    provider_directory_entries: List[DirectoryEntry]

    @field_validator("provider_directory_entries")
    @classmethod
    def check_not_empty(cls, v):
        if not v:
            raise EmptyDirectory()
        return v

    def entry_for(self, provider_id: Union[UUID, str]) -> Optional[DirectoryEntry]:
        """Return the entry of the provider with given id, if present."""
        pid = UUID(str(provider_id))
        return next((e for e in self.provider_directory_entries if e.id == pid), None)

    def mirrors_of(self, provider_id: Union[UUID, str]) -> List[DirectoryEntry]:
        pid = UUID(str(provider_id))
        return [e for e in self.provider_directory_entries if e.mirror_id == pid]


class ObservingFacilityReference(PolisBaseModel):
    """Compact reference to an observing facility (its identity only)."""

    identity: Identity

    @property
    def id(self) -> UUID:
        return self.identity.id


class ObservingFacilityDirectory(PolisBaseModel):
    """Compact list of all observing facilities known to a provider.

    The full facility records can be large, so clients should cache this list
    and only fetch facilities whose `last_update` changed.
    """

    last_update: IsoDatetime = Field(default_factory=utc_now, alias="last_updated")
    observing_facility_references: List[ObservingFacilityReference] = []

    def reference_for(self, facility_id: Union[UUID, str]) -> Optional[ObservingFacilityReference]:
        fid = UUID(str(facility_id))
        refs = self.observing_facility_references
        return next((r for r in refs if r.id == fid), None)

    def with_facility(self, reference: ObservingFacilityReference) -> ObservingFacilityDirectory:
        """Return a copy with the reference added (replacing one with the same id)."""
        refs = [r for r in self.observing_facility_references if r.id != reference.id]
        refs.append(reference)
        return type(self)(last_update=utc_now(), observing_facility_references=refs)
