"""Helpers to work with POLIS references (`ref://<uuid>`)."""
from __future__ import annotations

import re
from typing import Optional, Union
from uuid import UUID

from pydantic import AfterValidator
from typing_extensions import Annotated, TypeAlias

from .constants import POLIS_REFERENCE_PREFIX

_UUID_REGEX = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
"""Hyphenated 8-4-4-4-12 form only (no braces, `urn:uuid:` or bare hex)."""


def uuid_from_polis_reference(reference: str) -> Optional[str]:
    """Extract the UUID string from a POLIS reference, or return None if there is none."""
    candidate = reference.split("//")[-1]
    return candidate if _UUID_REGEX.fullmatch(candidate) else None


def is_polis_reference(candidate: str) -> bool:
    """Check whether the string is a valid POLIS reference."""
    return candidate.startswith(POLIS_REFERENCE_PREFIX) and (
        uuid_from_polis_reference(candidate) is not None
    )


def polis_reference_from(uuid: Union[UUID, str]) -> str:
    """Create a POLIS reference from a UUID."""
    return f"{POLIS_REFERENCE_PREFIX}{UUID(str(uuid))}"


def must_start_with_at_sign(handle: str) -> str:
    """Add `@` prefix (e.g. social media ids) if it is missing."""
    return handle if handle.startswith("@") else f"@{handle}"


def _check_reference(value: str) -> str:
    if not is_polis_reference(value):
        raise ValueError(f"Not a valid POLIS reference: '{value}'")
    return value


PolisReference: TypeAlias = Annotated[str, AfterValidator(_check_reference)]
"""String field type that only accepts valid POLIS references."""
