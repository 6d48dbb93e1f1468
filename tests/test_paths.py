import pytest
from hypothesis import given
from hypothesis import strategies as st

from polis_core.implementation import Implementation
from polis_core.paths import RelativePaths, ResourceLocation, normalised_path

REL = RelativePaths(version_string="0.2.0-alpha.1", file_extension="json")


@given(st.text(alphabet=st.characters(blacklist_characters="\x00"), max_size=20))
def test_normalised_path_idempotent(p):
    once = normalised_path(p)
    assert once.endswith("/")
    assert normalised_path(once) == once
    assert once in (p, p + "/")


@pytest.mark.parametrize("p,expected", [("/tmp", "/tmp/"), ("/tmp/", "/tmp/"), ("", "/")])
def test_normalised_path(p, expected):
    assert normalised_path(p) == expected


@pytest.mark.parametrize(
    "method,expected",
    [
        ("configuration_file", "polis/polis.json"),
        ("provider_directory_file", "polis/polis_directory.json"),
        ("observing_facilities_path", "polis/0.2.0-alpha.1/polis_observing_facilities"),
        (
            "observing_facilities_directory_file",
            "polis/0.2.0-alpha.1/polis_observing_facilities.json",
        ),
        ("resources_path", "polis/0.2.0-alpha.1/polis_resources"),
        ("resources_directory_file", "polis/0.2.0-alpha.1/polis_resources.json"),
        ("owners_path", "polis/0.2.0-alpha.1/polis_owners"),
        ("owners_directory_file", "polis/0.2.0-alpha.1/polis_owners.json"),
        ("manufacturers_path", "polis/0.2.0-alpha.1/polis_manufacturers"),
        ("manufacturers_directory_file", "polis/0.2.0-alpha.1/polis_manufacturers.json"),
    ],
)
def test_relative_paths(method, expected):
    assert getattr(REL, method)() == expected


def test_base_path():
    assert REL.base_path == "polis/"


def test_index_files_are_siblings_of_kind_folders():
    for kind in ["observing_facilities", "resources", "owners", "manufacturers"]:
        folder = getattr(REL, f"{kind}_path")()
        assert getattr(REL, f"{kind}_directory_file")() == f"{folder}.json"


def test_top_level_files_version_independent():
    other = RelativePaths(version_string="1.0.0", file_extension="json")
    assert other.configuration_file() == REL.configuration_file()
    assert other.provider_directory_file() == REL.provider_directory_file()
    assert other.owners_path() != REL.owners_path()


def test_for_implementation():
    impl = Implementation.from_str("xml/static_data/1.0.0-rc.1")
    rel = RelativePaths.for_implementation(impl)
    assert rel == RelativePaths(version_string="1.0.0-rc.1", file_extension="xml")
    assert rel.configuration_file() == "polis/polis.xml"


LOC = ResourceLocation(root="/srv/", paths=REL)
FAC = "polis/0.2.0-alpha.1/polis_observing_facilities/"


@pytest.mark.parametrize(
    "value,expected",
    [
        (LOC.base(), "/srv/polis/"),
        (LOC.observing_facilities(), f"/srv/{FAC}"),
        (LOC.observing_facility_folder("abc"), f"/srv/{FAC}abc/"),
        (LOC.observing_facility_file("abc"), f"/srv/{FAC}abc/abc.json"),
        (LOC.observing_data_file("d1", "abc"), f"/srv/{FAC}abc/d1.json"),
        (LOC.resource_folder("acme"), "/srv/polis/0.2.0-alpha.1/polis_resources/acme/"),
        (LOC.owner_file("o1"), "/srv/polis/0.2.0-alpha.1/polis_owners/o1.json"),
        (
            LOC.manufacturer_file("m1"),
            "/srv/polis/0.2.0-alpha.1/polis_manufacturers/m1.json",
        ),
    ],
)
def test_resource_location(value, expected):
    assert value == expected


def test_resource_location_uuid_ids():
    from uuid import UUID

    uid = UUID("5c1d4d7b-3a7e-4c4b-9d2e-1f0a5b6c7d8e")
    assert LOC.owner_file(uid) == LOC.owner_file(str(uid))


def test_relative():
    assert LOC.relative(LOC.base()) == "polis/"
    with pytest.raises(ValueError):
        LOC.relative("/elsewhere/polis/")


def test_file_name_uses_bound_extension():
    assert REL.file_name("polis_owners") == "polis_owners.json"
    xml = RelativePaths(version_string="0.2.0-alpha.1", file_extension="xml")
    assert xml.file_name("polis") == "polis.xml"
