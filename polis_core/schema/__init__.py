"""Pydantic models and field types of POLIS documents."""
from .base import PolisBaseModel  # noqa: F401
from .types import IsoDatetime, SemanticVersion  # noqa: F401
