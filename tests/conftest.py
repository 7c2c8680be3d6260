"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from formtree import Builder, Fieldset, Filter, Options


class AddressFieldset(Fieldset):
    def init(self) -> None:
        self.set_field("street")
        self.set_field("city")
        self.set_field("country", "select").set_options({"FR": "France", "DE": "Germany"})


class PhoneFieldset(Fieldset):
    def init(self) -> None:
        self.set_field("kind", "select").set_options(["home", "work"])
        self.set_field("number", "tel")


class ContactFieldset(Fieldset):
    def init(self) -> None:
        self.set_field("name").set_attribs({"size": 20})
        self.set_field("email", "email")
        self.set_fieldset("address")
        self.set_collection("phones", "phone")


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def schemas_dir(project_root: Path) -> Path:
    """Return the schemas directory."""
    return project_root / "schemas"


@pytest.fixture
def fieldset_schema_path(schemas_dir: Path) -> Path:
    """Return the fieldset spec schema path."""
    return schemas_dir / "fieldset_spec.schema.json"


@pytest.fixture
def options() -> Options:
    """Options shared by every fieldset the builder creates."""
    return Options(countries=["FR", "DE"])


@pytest.fixture
def builder(options: Options) -> Builder:
    """A builder knowing the address, phone and contact fieldset types."""
    builder = Builder()
    builder.set_fieldset_factory("address", lambda: AddressFieldset(builder, Filter(), options))
    builder.set_fieldset_factory("phone", lambda: PhoneFieldset(builder, Filter(), options))
    builder.set_fieldset_factory("contact", lambda: ContactFieldset(builder, Filter(), options))
    return builder


@pytest.fixture
def contact(builder: Builder) -> Fieldset:
    """A top-level contact fieldset named 'contact'."""
    return builder.new_fieldset("contact", "contact")
