"""Registry of JSON encoders for custom field types.

Usage:

Decorate any class with `@json_encoder(ENCODER_FUNCTION)`.

To add an encoder for some existing class you cannot decorate,
use `add_json_encoder(ClassName, func)`.

The registered function is used as JSON serializer whenever the class is used
as a field type through the `ParserMixin` (see `parser.py`). Pydantic models
serialize themselves and cannot be registered.

Lookup follows the MRO, so subclasses share the encoder of their parent
unless they register their own one.

To prevent bugs, you cannot override encoders for a class that already has a
registered encoder.
"""

from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel

_reg_json_encoders: Dict[Type, Callable[[Any], Any]] = {}
"""Global registry of declared JSON encoders."""


def json_encoder(func):
    """Decorate a class to register a new JSON encoder for it."""

    def reg_encoder(cls):
        if isinstance(cls, type) and issubclass(cls, BaseModel):
            raise TypeError("This decorator does not work for pydantic models!")
        if hasattr(cls, "__dataclass_fields__"):
            raise TypeError("This decorator does not work for dataclasses!")

        if cls in _reg_json_encoders:
            raise ValueError(f"A JSON encoder function for {cls} already exists!")

        _reg_json_encoders[cls] = func
        return cls

    return reg_encoder


def add_json_encoder(cls, func):
    """Register a JSON encoder function for a class."""
    return json_encoder(func)(cls)


def get_json_encoder(cls: Type) -> Optional[Callable[[Any], Any]]:
    """Return the encoder registered for the class or its closest base class."""
    for base in cls.__mro__:
        if enc := _reg_json_encoders.get(base):
            return enc
    return None
