"""Tests for Collection."""

import pytest

from formtree import Builder, Collection, Fieldset, FieldsetTypeNotFoundError, Input


@pytest.fixture
def phones(contact: Fieldset) -> Collection:
    """The phones collection of the contact fieldset."""
    return contact.get_input("phones")


class TestCollectionLoad:
    """Tests for loading collections."""

    def test_starts_empty(self, phones: Collection) -> None:
        assert len(phones) == 0
        assert phones.export() == []

    def test_load_appends_elements(self, phones: Collection) -> None:
        result = phones.load(
            [
                {"kind": "home", "number": "555-0100"},
                {"kind": "work", "number": "555-0199"},
            ]
        )

        assert result is True
        assert len(phones) == 2
        assert phones[0].get_value("number") == "555-0100"
        assert phones[1].get_value("kind") == "work"
        assert [fs.get_name() for fs in phones] == ["contact[phones][0]", "contact[phones][1]"]

    def test_reload_reuses_elements(self, phones: Collection) -> None:
        """Test that reloading keeps existing elements and their untouched values."""
        phones.load([{"kind": "home", "number": "555-0100"}])
        first = phones[0]

        phones.load([{"number": "555-0101"}, {"number": "555-0102"}])

        assert phones[0] is first
        assert phones[0].get_value("kind") == "home"
        assert phones[0].get_value("number") == "555-0101"
        assert len(phones) == 2

    def test_shorter_reload_keeps_trailing_elements(self, phones: Collection) -> None:
        phones.load([{"number": "1"}, {"number": "2"}])
        phones.load([{"number": "3"}])

        assert len(phones) == 2
        assert phones[1].get_value("number") == "2"

    def test_load_mapping_by_index(self, phones: Collection) -> None:
        phones.load({"1": {"number": "second"}})

        assert len(phones) == 2
        assert phones[0].get_value("number") is None
        assert phones[1].get_value("number") == "second"

    def test_load_none(self, phones: Collection) -> None:
        assert phones.load(None) is True
        assert len(phones) == 0

    def test_load_through_parent(self, contact: Fieldset) -> None:
        contact.load({"phones": [{"number": "555-0100"}]})
        phones = contact.get_value("phones")

        assert phones.read() is phones
        assert phones[0].get_value("number") == "555-0100"

    def test_elements_are_independent(self, phones: Collection) -> None:
        phones.load([{"number": "1"}, {"number": "2"}])
        assert phones[0] is not phones[1]
        assert phones[0].get_inputs()["number"] is not phones[1].get_inputs()["number"]


class TestCollectionExport:
    """Tests for exporting collections."""

    def test_export_returns_element_exports(self, contact: Fieldset) -> None:
        contact.load({"phones": [{"number": "1"}, {"number": "2"}]})
        exported = contact.get("phones")

        assert len(exported) == 2
        assert set(exported[0]) == {"kind", "number"}
        assert exported[1]["number"].read() == "2"

    def test_export_stamps_names(self, contact: Fieldset) -> None:
        contact.load({"phones": [{"number": "1"}]})
        phones = contact.get_input("phones")
        exported = phones.export()

        assert phones.get_full_name() == "contact[phones]"
        assert phones[0].get_array_name() is None
        assert phones[0].get_full_name() == "contact[phones][0]"
        assert exported[0]["number"].get_array_name() == "contact[phones][0]"
        assert exported[0]["number"].get_full_name() == "contact[phones][0][number]"

    def test_element_names_follow_collection_name(self, contact: Fieldset) -> None:
        """Test that elements loaded before the collection was stamped are renamed on export."""
        phones = contact.get_inputs()["phones"]
        phones.load([{"number": "1"}])
        assert phones[0].get_name() == "phones[0]"

        exported = contact.get("phones")

        assert phones[0].get_name() == "contact[phones][0]"
        assert exported[0]["number"].get_full_name() == "contact[phones][0][number]"

    def test_nested_fieldset_names_unchanged(self, contact: Fieldset) -> None:
        city = contact.get("address")["city"]
        assert city.get_full_name() == "address[city]"


class TestCollectionMisc:
    """Tests for the container protocol and on-demand elements."""

    def test_new_fieldset(self, phones: Collection) -> None:
        blank = phones.new_fieldset()

        assert isinstance(blank, Fieldset)
        assert blank.get_name() == "contact[phones][0]"
        assert blank.get_array_name() is None
        assert phones.get_fieldsets() == [blank]

    def test_satisfies_input_protocol(self, phones: Collection) -> None:
        assert isinstance(phones, Input)

    def test_unknown_type_fails_on_request(self, builder: Builder) -> None:
        with pytest.raises(FieldsetTypeNotFoundError):
            builder.new_collection("unknown", "items")

    def test_negative_index_rejected(self, phones: Collection) -> None:
        phones.load([{"number": "1"}, {"number": "2"}])
        with pytest.raises(IndexError):
            phones[-1]
        assert phones[1].get_value("number") == "2"


class TestCollectionLoadNeverFails:
    """Tests for data that names no element."""

    def test_non_index_keys_are_ignored(self, contact: Fieldset) -> None:
        assert contact.load({"phones": {"home": {"number": "555-0100"}}}) is True
        assert len(contact.get_value("phones")) == 0

    def test_negative_keys_are_ignored(self, phones: Collection) -> None:
        assert phones.load({"-1": {"number": "x"}, -2: {"number": "y"}}) is True
        assert len(phones) == 0

    def test_negative_key_does_not_touch_last_element(self, phones: Collection) -> None:
        phones.load([{"number": "1"}, {"number": "2"}])
        phones.load({-1: {"number": "x"}})
        assert phones[1].get_value("number") == "2"

    def test_valid_keys_load_alongside_ignored_ones(self, phones: Collection) -> None:
        phones.load({"0": {"number": "a"}, "home": {"number": "b"}, 1: {"number": "c"}})
        assert [fs.get_value("number") for fs in phones] == ["a", "c"]

    def test_boolean_keys_are_ignored(self, phones: Collection) -> None:
        phones.load({True: {"number": "x"}})
        assert len(phones) == 0

    def test_string_data_is_ignored(self, phones: Collection) -> None:
        assert phones.load("abc") is True
        assert len(phones) == 0

    def test_scalar_data_is_ignored(self, phones: Collection) -> None:
        assert phones.load(42) is True
        assert len(phones) == 0
