import json
from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from polis_core.schema.encoder import add_json_encoder, get_json_encoder, json_encoder
from polis_core.schema.parser import BaseParser, ParserMixin

# ----
# Test custom parser


class Wrapped:
    def __init__(self, x):
        self.x = x

    def __eq__(self, other):
        return isinstance(other, Wrapped) and self.x == other.x


class TrivialParsed(ParserMixin, Wrapped):
    """Parser does nothing, only accepts an instance."""

    Parser = BaseParser


class StringParsed(ParserMixin, Wrapped):
    """Parser packs a string into the object."""

    class Parser(BaseParser):
        schema_info = dict(title="Foobar")

        @classmethod
        def parse(cls, target, v):
            if not isinstance(v, str):
                raise ValueError("Expected string!")
            return target(v)


class SubParsed(StringParsed):
    """Subclass of class with custom parser, should not inherit it."""


class InvalidParsed(ParserMixin, Wrapped):
    """Incorrect parser implementation (violates strict flag)."""

    class Parser(BaseParser):
        strict = True

        @classmethod
        def parse(cls, target, v):
            return v  # <- invalid, not returning target instance


class OuterModel(BaseModel):
    y: StringParsed
    z: Optional[TrivialParsed] = None
    i: Optional[InvalidParsed] = None


def test_parser_applied():
    m = OuterModel(y="hello")
    assert m.y == StringParsed("hello")
    assert isinstance(m.y, StringParsed)


def test_parser_rejects():
    with pytest.raises(ValidationError):
        OuterModel(y=123)


def test_trivial_parser():
    obj = TrivialParsed(1)
    assert OuterModel(y="a", z=obj).z is obj
    with pytest.raises(ValidationError):
        OuterModel(y="a", z=1)


def test_strict_parser_violation():
    with pytest.raises(RuntimeError):
        OuterModel(y="a", i=1)


def test_parser_not_inherited():
    with pytest.raises(TypeError):

        class Broken(BaseModel):
            s: SubParsed


def test_schema_info():
    schema = OuterModel.model_json_schema()
    assert "Foobar" in json.dumps(schema)


# ----
# Test encoders


@json_encoder(lambda obj: f"<{obj.x}>")
class Encoded(ParserMixin, Wrapped):
    class Parser(BaseParser):
        @classmethod
        def parse(cls, target, v):
            return v if isinstance(v, target) else target(v)


class SubEncoded(Encoded):
    class Parser(Encoded.Parser):
        pass


class EncModel(BaseModel):
    a: Encoded
    b: Optional[SubEncoded] = None


def test_encoder_used_for_json():
    m = EncModel(a="x", b="y")
    assert m.model_dump_json() == '{"a":"<x>","b":"<y>"}'
    # python mode keeps the objects
    assert m.model_dump()["a"] == Encoded("x")


def test_encoder_lookup_follows_mro():
    assert get_json_encoder(SubEncoded) is get_json_encoder(Encoded)
    assert get_json_encoder(Wrapped) is None


def test_encoder_no_override():
    with pytest.raises(ValueError):
        add_json_encoder(Encoded, str)


def test_encoder_rejects_models():
    class SomeModel(BaseModel):
        x: int

    with pytest.raises(TypeError):
        add_json_encoder(SomeModel, str)
