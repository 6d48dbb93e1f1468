import pytest
from pydantic import ValidationError

from polis_core.implementation import APILevel, DataFormat, Implementation
from polis_core.schema.types import SemanticVersion


def test_structural_equality_and_hash():
    a = Implementation(data_format="json", api_support="static_data", version="0.2.0-alpha.1")
    b = Implementation(
        data_format=DataFormat.json,
        api_support=APILevel.static_data,
        version=SemanticVersion.parse("0.2.0-alpha.1"),
    )
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_version_compared_semantically():
    # build metadata does not change precedence
    a = Implementation.from_str("json/static_data/1.0.0")
    b = Implementation.from_str("json/static_data/1.0.0+build.7")
    assert a == b


@pytest.mark.parametrize(
    "other",
    [
        "xml/static_data/0.2.0-alpha.1",
        "json/dynamic_status/0.2.0-alpha.1",
        "json/static_data/0.2.0-alpha.2",
        "json/static_data/0.2.0",
    ],
)
def test_inequality(other):
    assert Implementation.from_str("json/static_data/0.2.0-alpha.1") != Implementation.from_str(
        other
    )


def test_immutable():
    impl = Implementation.from_str("json/static_data/0.2.0-alpha.1")
    with pytest.raises(ValidationError):
        impl.data_format = DataFormat.xml


def test_str_and_extension():
    impl = Implementation.from_str("json/static_data/0.2.0-alpha.1")
    assert str(impl) == "json/static_data/0.2.0-alpha.1"
    assert impl.file_extension == ".json"
    assert Implementation.from_str("xml/static_data/1.0.0").file_extension == ".xml"


@pytest.mark.parametrize(
    "value",
    [
        "json/static_data",
        "json/static_data/0.2.0/extra",
        "yaml/static_data/0.2.0",
        "json/everything/0.2.0",
        "json/static_data/0.2",
    ],
)
def test_from_str_invalid(value):
    with pytest.raises(ValueError):
        Implementation.from_str(value)


def test_json_snake_case_keys():
    impl = Implementation.from_str("json/dynamic_status/0.2.0-alpha.1")
    assert impl.json_dict() == {
        "data_format": "json",
        "api_support": "dynamic_status",
        "version": "0.2.0-alpha.1",
    }
    assert Implementation.from_json(impl.to_json()) == impl


def test_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        Implementation(
            data_format="json", api_support="static_data", version="1.0.0", flavor="x"
        )


def test_api_level_order():
    assert APILevel.static_data < APILevel.dynamic_status < APILevel.dynamic_scheduling
    assert max(APILevel) is APILevel.dynamic_scheduling
    assert sorted(["dynamic_scheduling", "static_data"], key=APILevel) == [
        "static_data",
        "dynamic_scheduling",
    ]
