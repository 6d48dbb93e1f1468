from uuid import UUID

import pytest

from polis_core.implementation import Implementation
from polis_core.schema.common import AdminContact
from polis_core.util.pytest import registry_of

OLD_IMPL = "json/static_data/0.1.0-alpha.1"
CURRENT_IMPL = "json/static_data/0.2.0-alpha.1"


@pytest.fixture
def old_impl():
    """Implementation that is not part of the framework default registry."""
    return Implementation.from_str(OLD_IMPL)


@pytest.fixture
def current_impl():
    return Implementation.from_str(CURRENT_IMPL)


@pytest.fixture
def xml_impl():
    return Implementation.from_str("xml/static_data/0.2.0-alpha.1")


@pytest.fixture
def test_registry():
    """Registry knowing both the old and the current implementation."""
    return registry_of(OLD_IMPL, CURRENT_IMPL)


@pytest.fixture
def admin_contact():
    return AdminContact(
        id=UUID("6a4ec8a0-4b0c-4a3f-8d8b-0a0b8a2f7f11"),
        name="Head of the observatory",
        email_address="office@mountain-observatory.org",
    )


@pytest.fixture
def entry_fields(admin_contact, current_impl):
    """Return factory for keyword arguments of a valid directory entry."""

    def make(**changes):
        fields = dict(
            id=UUID("0f1c8d1e-96c4-4bb2-9a2c-7f7e8a1f2b33"),
            name="Mountain Observatory POLIS",
            url="https://polis.mountain-observatory.org",
            supported_implementations=[current_impl],
            provider_type="public",
            admin_contact=admin_contact,
        )
        fields.update(changes)
        return fields

    return make


@pytest.fixture
def provider_root(tmp_path):
    """Existing, empty provider root folder."""
    root = tmp_path / "provider"
    root.mkdir()
    return root
