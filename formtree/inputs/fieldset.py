"""Fieldset: a named set of inputs.

The inputs of a fieldset may themselves be scalar fields, other fieldsets,
or collections of fieldsets. Children are never constructed directly; the
fieldset asks its builder for them, so a single Fieldset class can compose
any child types the injected builder knows about.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from formtree.config import DEFAULT_FIELD_TYPE
from formtree.inputs.base import AbstractInput, Input

if TYPE_CHECKING:
    from formtree.builder import BuilderInterface
    from formtree.filter import FilterInterface
    from formtree.inputs.collection import Collection
    from formtree.inputs.field import Field
    from formtree.options import Options

logger = logging.getLogger(__name__)


class InputNotFoundError(KeyError):
    """Raised when a fieldset has no input registered under a name."""

    def __init__(self, name: str, fieldset_name: str | None = None) -> None:
        self.name = name
        self.fieldset_name = fieldset_name
        super().__init__(f"No input named {name!r} in fieldset {fieldset_name!r}")

    def __str__(self) -> str:
        return self.args[0]


def to_mapping(data: Any) -> Mapping[Any, Any]:
    """Coerce raw load data to a mapping.

    ``None`` becomes an empty mapping, pydantic models are dumped, lists and
    tuples are keyed by index and plain objects contribute their attributes.
    Anything else is treated as a single value at key ``0``.
    """
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return data
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, (list, tuple)):
        return dict(enumerate(data))
    if hasattr(data, "__dict__"):
        return vars(data)
    return {0: data}


class Fieldset(AbstractInput):
    """A fieldset of inputs.

    Subclasses override ``init()`` to declare their children::

        class AddressFieldset(Fieldset):
            def init(self) -> None:
                self.set_field("street")
                self.set_field("city")
                self.set_field("country", "select").set_options(["FR", "DE"])
    """

    def __init__(
        self,
        builder: BuilderInterface,
        filter: FilterInterface,
        options: Options,
    ) -> None:
        """Initialize the fieldset and run the ``init()`` hook.

        Args:
            builder: Factory used to create child inputs.
            filter: Filter applied by ``filter()`` to this fieldset's values.
            options: Options shared by the inputs of the form.
        """
        super().__init__()
        self._builder = builder
        self._filter = filter
        self._options = options
        self.inputs: dict[str, Input] = {}
        self.init()

    def init(self) -> None:
        """Register the inputs of this fieldset. No-op by default."""

    # Collaborators

    def get_builder(self) -> BuilderInterface:
        return self._builder

    def get_filter(self) -> FilterInterface:
        return self._filter

    def get_options(self) -> Options:
        return self._options

    # Factories

    def set_field(self, name: str, type: str | None = None) -> Field:
        """Create and register a scalar field.

        Args:
            name: The field name.
            type: The field type; defaults to ``"text"``.

        Returns:
            The new field, for further configuration.
        """
        if not type:
            type = DEFAULT_FIELD_TYPE
        self.inputs[name] = self._builder.new_field(type, name, self.name)
        return self.inputs[name]

    def set_fieldset(self, name: str, type: str | None = None) -> Fieldset:
        """Create and register a nested fieldset.

        Args:
            name: The fieldset name.
            type: The fieldset type; defaults to ``name``.

        Returns:
            The new fieldset.
        """
        if not type:
            type = name
        fieldset = self._builder.new_fieldset(type, name, self.name)
        self.inputs[name] = fieldset
        return fieldset

    def set_collection(self, name: str, type: str | None = None) -> Collection:
        """Create and register a collection of fieldsets.

        Args:
            name: The collection name.
            type: The fieldset type of each element; defaults to ``name``.

        Returns:
            The new collection.
        """
        if not type:
            type = name
        collection = self._builder.new_collection(type, name, self.name)
        self.inputs[name] = collection
        return collection

    # Access

    def _lookup(self, name: str) -> Input:
        try:
            return self.inputs[name]
        except KeyError:
            raise InputNotFoundError(name, self.name) from None

    def get_value(self, name: str) -> Any:
        """Read the value of a child input.

        Raises:
            InputNotFoundError: If no input is registered under ``name``.
        """
        return self._lookup(name).read()

    def set_value(self, name: str, value: Any) -> None:
        """Load a value into a child input.

        Raises:
            InputNotFoundError: If no input is registered under ``name``.
        """
        self._lookup(name).load(value)

    def get_inputs(self) -> dict[str, Input]:
        return self.inputs

    def get_input(self, name: str) -> Input:
        """Return a child input with its array name set to this fieldset's name."""
        input = self._lookup(name)
        input.set_array_name(self.name)
        return input

    def get_input_names(self) -> list[str]:
        return list(self.inputs)

    def get(self, name: str) -> Any:
        """Return a child input in a format suitable for a view."""
        return self.get_input(name).export()

    # Lifecycle

    def load(self, data: Any) -> bool:
        """Load this fieldset with input values.

        Keys naming a registered input are forwarded to that input; other
        keys are ignored and inputs missing from ``data`` keep their value.

        Args:
            data: The values for this fieldset.

        Returns:
            Always True; loading assigns values and never validates.
        """
        data = to_mapping(data)
        for name, input in self.inputs.items():
            if name in data:
                input.load(data[name])

        ignored = [key for key in data if key not in self.inputs]
        if ignored:
            logger.debug("Fieldset %r ignored unknown keys: %s", self.name, ignored)
        return True

    def read(self) -> Fieldset:
        """Return the fieldset itself, so nested values can be read in turn."""
        return self

    def export(self) -> dict[str, Input]:
        """Export this fieldset for a view.

        Only one level is exported: the values are the child input objects,
        each with its array name set to this fieldset's name. Call
        ``export()`` on a child to descend into it.
        """
        for input in self.inputs.values():
            input.set_array_name(self.name)
        return self.inputs

    def filter(self) -> bool:
        """Filter the inputs of this fieldset.

        Returns:
            True if all the filter rules pass, False if not.
        """
        return self._filter.values(self)

    def get_messages(self, name: str | None = None) -> dict[str, list[str]] | list[str]:
        """Get the filter messages.

        Args:
            name: The input to get messages for; if omitted, gets the
                messages for all inputs.
        """
        return self._filter.get_messages(name)
