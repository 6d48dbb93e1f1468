"""Simplify creation of custom field types for pydantic models."""
from typing import Any, ClassVar, Dict, Type, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .encoder import get_json_encoder

T = TypeVar("T")


class BaseParser:
    """Parsers that work with the ParserMixin must inherit from this class."""

    schema_info: Dict[str, Any] = {}
    strict: bool = True

    @classmethod
    def parse(cls, target: Type[T], v: Any) -> T:
        """Override and implement this method for custom parsing.

        The default implementation will simply pass through
        any instances of `target` unchanged and fail on anything else.

        Make sure that the parser can also handle any object that itself
        produces as an input.

        By default, parsers are expected to normalize the input,
        i.e. produce an instance of `target`, any other returned type
        will lead to an exception.

        If you know what you are doing, set `strict=False` to
        disable this behavior.

        Invalid input must be reported with a `ValueError`, which pydantic
        turns into a `ValidationError`.

        Args:
            target: class the value should be parsed into
            v: value to be parsed
        """
        if target is not None and not isinstance(v, target):
            raise ValueError(f"Expected {target.__name__}, but got {type(v).__name__}!")
        return v


def run_parser(cls: Type[BaseParser], target: Type[T], value: Any):
    """Parse and validate passed value."""
    ret = cls.parse(target, value)
    if cls.strict and not isinstance(ret, target):
        msg = f"Parser returned: {type(ret).__name__}, "
        msg += f"expected: {target.__name__} (strict=True)"
        raise RuntimeError(msg)
    return ret


def get_parser(cls):
    """Return inner Parser class, or None.

    If the inner Parser class is not a subclass of `BaseParser`,
    will raise an exception, as this is most likely an error.
    """
    if parser := cls.__dict__.get("Parser"):
        if not isinstance(parser, type) or not issubclass(parser, BaseParser):
            msg = f"{cls}: {cls.Parser.__name__} must be a subclass of {BaseParser.__name__}!"
            raise TypeError(msg)
        return parser


class ParserMixin:
    """Mixin class to simplify creation of custom pydantic field types.

    The inner `Parser` class is not inherited: every subclass that should
    parse its input in a custom way must declare its own one.

    If a JSON encoder is registered for the class (see `encoder.py`),
    it is used when serializing to JSON.
    """

    Parser: ClassVar[Type[BaseParser]]

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        parser = get_parser(cls)
        if parser is None:
            raise TypeError(f"{cls.__name__} has no Parser and cannot be used as field type!")

        def validate(value):
            return run_parser(parser, cls, value)

        serialization = None
        if encoder := get_json_encoder(cls):
            serialization = core_schema.plain_serializer_function_ser_schema(
                encoder, when_used="json"
            )
        return core_schema.no_info_plain_validator_function(
            validate, serialization=serialization
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        ret: Dict[str, Any] = {}
        if parser := get_parser(cls):
            ret.update(parser.schema_info)
        return ret


__all__ = ["BaseParser", "ParserMixin"]
