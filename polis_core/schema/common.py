"""Common POLIS records shared by providers, facilities and manufacturers.

Most fields are optional. Optional fields that are not set are left out
of serialized documents.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional, Union
from uuid import UUID, uuid4

from pint import Quantity, UndefinedUnitError
from pydantic import AnyUrl, EmailStr, Field, field_validator, model_validator
from typing_extensions import Annotated, TypeAlias

from ..references import must_start_with_at_sign
from .base import PolisBaseModel
from .types import CountryCodeStr, IsoDatetime, NonEmptyStr, utc_now

Latitude: TypeAlias = Annotated[float, Field(ge=-90, le=90)]
Longitude: TypeAlias = Annotated[float, Field(ge=-180, le=180)]
Degrees: TypeAlias = Annotated[float, Field(ge=0, le=360)]

# ----
# Identity


class LifecycleStatus(str, Enum):
    """Readiness of a POLIS item, determines how it is synchronized between providers."""

    inactive = "inactive"
    """New, being edited or upgraded. Not synced, but monitored."""

    active = "active"
    """In production and publicly accessible. Synced and monitored."""

    historic = "historic"
    """No longer operating, kept for the record."""

    deleted = "deleted"
    """Marked as deleted. Only the identity is synced, which locks the id."""

    delete = "delete"
    """To be removed (about a year after being marked as `deleted`)."""

    suspended = "suspended"
    """Violates the standard or community rules. Identity is synced, but the item is not used."""

    unknown = "unknown"


class Identity(PolisBaseModel):
    """Unique identity and status of (almost) every POLIS item."""

    id: UUID = Field(default_factory=uuid4)
    """Globally unique identifier (UUID version 4)."""

    external_references: Optional[List[NonEmptyStr]] = None
    """Pointers to externally defined items, preferably URIs."""

    lifecycle_status: LifecycleStatus = LifecycleStatus.unknown

    last_update: IsoDatetime = Field(default_factory=utc_now)
    """Latest update time (UTC), used for syncing."""

    name: NonEmptyStr
    """Human readable name, should be unique to avoid confusion."""

    local_name: Optional[NonEmptyStr] = None
    """Name in the local language, if different."""

    abbreviation: Optional[NonEmptyStr] = None

    automation_label: Optional[NonEmptyStr] = None
    """Unique target for scripts and control software (e.g. ASCOM or INDI bridges)."""

    short_description: Optional[NonEmptyStr] = None

    start_date: Optional[IsoDatetime] = None
    end_date: Optional[IsoDatetime] = None
    polis_registration_date: Optional[IsoDatetime] = None


# ----
# Communication


class CommunicationChannel(PolisBaseModel):
    """Additional communication channels, besides email and phone.

    Twitter, Mastodon and Instagram handles are normalized to start with `@`.
    """

    twitter_ids: Optional[List[NonEmptyStr]] = None
    mastodon_ids: Optional[List[NonEmptyStr]] = None
    whatsapp_phone_numbers: Optional[List[NonEmptyStr]] = None
    """Phone numbers including the country code (starting with `+`)."""

    facebook_ids: Optional[List[NonEmptyStr]] = None
    """The part of the URL after `www.facebook.com/`."""

    instagram_ids: Optional[List[NonEmptyStr]] = None
    skype_ids: Optional[List[NonEmptyStr]] = None

    @field_validator("twitter_ids", "mastodon_ids", "instagram_ids")
    @classmethod
    def add_at_sign(cls, v):
        if v is None:
            return v
        return [must_start_with_at_sign(handle) for handle in v]


class AdminContact(PolisBaseModel):
    """Contact of a provider admin, an observing facility owner or a manufacturer.

    All POLIS data is public, so prefer contacts of institutions
    (e.g. `office@mountain-observatory.org`) over private ones.
    """

    id: UUID = Field(default_factory=uuid4)

    name: Optional[NonEmptyStr] = None
    """Preferably a role, e.g. "The managing director of Mountain Observatory"."""

    email_address: EmailStr
    phone_number: Optional[NonEmptyStr] = None
    additional_communication: Optional[CommunicationChannel] = None
    note: Optional[NonEmptyStr] = None


class Address(PolisBaseModel):
    """Postal address (and optionally the position) of a party."""

    attention_off: Optional[NonEmptyStr] = None
    house_name: Optional[NonEmptyStr] = None
    street: Optional[NonEmptyStr] = None
    house_number: Optional[int] = None
    house_number_suffix: Optional[NonEmptyStr] = None
    floor: Optional[int] = None
    apartment: Optional[NonEmptyStr] = None
    district: Optional[NonEmptyStr] = None
    place: Optional[NonEmptyStr] = None
    block: Optional[NonEmptyStr] = None
    zip_code: Optional[NonEmptyStr] = None
    province: Optional[NonEmptyStr] = None
    region: Optional[NonEmptyStr] = None
    state: Optional[NonEmptyStr] = None
    country_id: Optional[CountryCodeStr] = None
    """ISO 3166-1 alpha-2 country code."""

    po_box: Optional[NonEmptyStr] = None
    po_box_zip: Optional[NonEmptyStr] = None
    poste_restante: Optional[NonEmptyStr] = None
    latitude: Optional[Latitude] = None
    longitude: Optional[Longitude] = None

    # free-form lines for addresses that do not fit the fields above
    street_line_1: Optional[NonEmptyStr] = None
    street_line_2: Optional[NonEmptyStr] = None
    street_line_3: Optional[NonEmptyStr] = None
    street_line_4: Optional[NonEmptyStr] = None
    street_line_5: Optional[NonEmptyStr] = None
    street_line_6: Optional[NonEmptyStr] = None

    note: Optional[NonEmptyStr] = None


# ----
# Property values


class ValueKind(str, Enum):
    string = "string"
    int = "int"
    float = "float"
    double = "double"


class PropertyValue(PolisBaseModel):
    """A value stored as string together with its kind and (optional) unit.

    The typed accessors return `None` if the kind does not match
    or the string cannot be converted.
    """

    value_kind: ValueKind
    value: str
    unit: Optional[NonEmptyStr] = None

    @classmethod
    def of(cls, value: Union[str, int, float], unit: Optional[str] = None) -> PropertyValue:
        """Wrap a Python value, inferring the kind (floats become `double`)."""
        if isinstance(value, bool):
            raise ValueError("Boolean values are not supported!")
        if isinstance(value, int):
            kind = ValueKind.int
        elif isinstance(value, float):
            kind = ValueKind.double
        else:
            kind = ValueKind.string
        return cls(value_kind=kind, value=str(value), unit=unit)

    def string_value(self) -> Optional[str]:
        return self.value if self.value_kind is ValueKind.string else None

    def int_value(self) -> Optional[int]:
        if self.value_kind is not ValueKind.int:
            return None
        try:
            return int(self.value)
        except ValueError:
            return None

    def _real_value(self, kind: ValueKind) -> Optional[float]:
        if self.value_kind is not kind:
            return None
        try:
            return float(self.value)
        except ValueError:
            return None

    def float_value(self) -> Optional[float]:
        return self._real_value(ValueKind.float)

    def double_value(self) -> Optional[float]:
        return self._real_value(ValueKind.double)

    def numeric_value(self) -> Optional[Union[int, float]]:
        """Return the value as number, whatever the numeric kind is."""
        if self.value_kind is ValueKind.int:
            return self.int_value()
        return self._real_value(self.value_kind)

    def as_quantity(self) -> Quantity:
        """Return the value as pint quantity (dimensionless if there is no unit)."""
        num = self.numeric_value()
        if num is None:
            msg = f"Cannot convert {self.value_kind.value} value '{self.value}' to a quantity!"
            raise ValueError(msg)
        try:
            return Quantity(num, self.unit or "")
        except UndefinedUnitError as e:
            raise ValueError(str(e)) from e


# ----
# Directions


class RoughDirection(str, Enum):
    """The 16 points of the compass rose."""

    north = "N"
    north_north_east = "NNE"
    north_east = "NE"
    east_north_east = "ENE"
    east = "E"
    east_south_east = "ESE"
    south_east = "SE"
    south_south_east = "SSE"
    south = "S"
    south_south_west = "SSW"
    south_west = "SW"
    west_south_west = "WSW"
    west = "W"
    west_north_west = "WNW"
    north_west = "NW"
    north_north_west = "NNW"

    def degrees(self) -> float:
        """Clockwise angle from north."""
        return list(type(self)).index(self) * 22.5

    @classmethod
    def nearest(cls, degrees: float) -> RoughDirection:
        """Return the compass point closest to the given clockwise angle.

        Angles on a sector boundary go to the next point clockwise.
        """
        points = list(cls)
        return points[math.floor((degrees % 360) / 22.5 + 0.5) % len(points)]


class Direction(PolisBaseModel):
    """Either a rough (16-point) or an exact direction, e.g. of prevailing winds.

    Exactly one of the two must be given, the other one is derived.
    """

    rough_direction: Optional[RoughDirection] = None
    exact_direction: Optional[Degrees] = None
    """Clockwise angle from north in degrees."""

    @model_validator(mode="after")
    def check_exactly_one(self):
        given = (self.rough_direction is not None, self.exact_direction is not None)
        if given == (False, False):
            raise ValueError("Either rough_direction or exact_direction is required!")
        if given == (True, True):
            raise ValueError("Only one of rough_direction and exact_direction can be given!")
        return self

    def degrees(self) -> float:
        if self.exact_direction is not None:
            return self.exact_direction
        return self.rough_direction.degrees()

    def rough(self) -> RoughDirection:
        if self.rough_direction is not None:
            return self.rough_direction
        return RoughDirection.nearest(self.exact_direction)


# ----


class VisitingHours(PolisBaseModel):
    """Free-text description of visiting possibilities."""

    note: Optional[NonEmptyStr] = None


class Manufacturer(PolisBaseModel):
    identity: Identity
    url: Optional[AnyUrl] = None
    admin_contact: Optional[AdminContact] = None
    addresses: Optional[List[Address]] = None
    communication: Optional[CommunicationChannel] = None

    @property
    def id(self) -> UUID:
        return self.identity.id
