from typing import List, Optional

import pytest
from pydantic import Field, ValidationError

from polis_core.schema.base import PolisBaseModel, validation_context
from polis_core.schema.types import IsoDatetime


class Item(PolisBaseModel):
    name: str
    note: Optional[str] = None


class Container(PolisBaseModel):
    last_update: IsoDatetime = Field(alias="last_updated")
    multi_word_items: List[Item] = []


DOC = {
    "last_updated": "2024-10-09T12:00:00Z",
    "multi_word_items": [{"name": "a"}, {"name": "b", "note": "second"}],
}


def test_snake_case_aliases_and_none_dropped():
    c = Container.model_validate(DOC)
    assert c.json_dict() == DOC


def test_populate_by_name():
    c = Container(last_update="2024-10-09T12:00:00Z")
    assert c.json_dict()["last_updated"] == "2024-10-09T12:00:00Z"


def test_to_json_indented():
    c = Container.model_validate(DOC)
    text = c.to_json()
    assert text.startswith("{\n  ")
    assert '"multi_word_items"' in text
    assert "null" not in text
    assert str(c) == text
    assert bytes(c) == (text + "\n").encode("utf-8")


def test_from_json_roundtrip():
    c = Container.model_validate(DOC)
    assert Container.from_json(c.to_json()) == c
    assert Container.from_json(bytes(c)) == c


def test_from_file(tmp_path):
    c = Container.model_validate(DOC)
    path = tmp_path / "doc.json"
    path.write_bytes(bytes(c))
    assert Container.from_file(path) == c
    assert Container.from_file(str(path)) == c


def test_yaml_roundtrip():
    c = Container.model_validate(DOC)
    assert Container.from_yaml(c.to_yaml()) == c


def test_invalid_dates_rejected():
    with pytest.raises(ValidationError):
        Container.from_json('{"last_updated": "09.10.2024"}')


def test_strip_whitespace_and_validate_assignment():
    item = Item(name="  a  ")
    assert item.name == "a"
    with pytest.raises(ValidationError):
        item.name = 1


def test_extra_fields_kept():
    item = Item.from_json('{"name": "a", "color": "red"}')
    assert item.json_dict() == {"name": "a", "color": "red"}


def test_validation_context():
    assert validation_context() is None
    assert validation_context(registry="reg") == {"registry": "reg"}
