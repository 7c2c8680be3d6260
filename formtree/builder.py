"""Builder for input objects.

Fieldsets ask a builder for their children by symbolic type, so the
container never depends on concrete input classes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from formtree.inputs.collection import Collection
from formtree.inputs.field import Field

if TYPE_CHECKING:
    from formtree.inputs.fieldset import Fieldset

logger = logging.getLogger(__name__)

FieldsetLoader = Callable[[str], "Callable[[], Fieldset] | None"]

FIELD_TYPES = (
    "button",
    "checkbox",
    "color",
    "date",
    "datetime",
    "datetime-local",
    "email",
    "file",
    "hidden",
    "image",
    "month",
    "number",
    "password",
    "radio",
    "range",
    "reset",
    "search",
    "select",
    "submit",
    "tel",
    "text",
    "textarea",
    "time",
    "url",
    "week",
)


class BuilderError(Exception):
    """Base class for builder errors."""

    pass


class FieldTypeNotFoundError(BuilderError):
    """Raised when no field class is registered for a type."""

    def __init__(self, type: str) -> None:
        self.type = type
        super().__init__(f"No field class registered for type: {type}")


class FieldsetTypeNotFoundError(BuilderError):
    """Raised when no fieldset factory is registered for a type."""

    def __init__(self, type: str) -> None:
        self.type = type
        super().__init__(f"No fieldset factory registered for type: {type}")


@runtime_checkable
class BuilderInterface(Protocol):
    """Protocol for input builders."""

    def new_field(self, type: str, name: str, array_name: str | None = None) -> Field:
        """Create a scalar field of ``type`` named ``name``."""
        ...

    def new_fieldset(self, type: str, name: str, array_name: str | None = None) -> Fieldset:
        """Create a fieldset of ``type`` named ``name``."""
        ...

    def new_collection(self, type: str, name: str, array_name: str | None = None) -> Collection:
        """Create a collection of ``type`` fieldsets named ``name``."""
        ...


class Builder:
    """Creates fields, fieldsets and collections by type name.

    Field types map to Field classes; every standard HTML input type maps
    to ``Field`` by default. Fieldset types map to zero-argument factories,
    each returning a fresh, fully constructed fieldset::

        builder = Builder()
        builder.set_fieldset_factory(
            "address",
            lambda: AddressFieldset(builder, Filter(), options),
        )
    """

    def __init__(
        self,
        fieldset_factories: dict[str, Callable[[], Fieldset]] | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            fieldset_factories: Optional initial map of fieldset type to factory.
        """
        self._field_classes: dict[str, type[Field]] = {t: Field for t in FIELD_TYPES}
        self._fieldset_factories: dict[str, Callable[[], Fieldset]] = dict(
            fieldset_factories or {}
        )
        self._fieldset_loader: FieldsetLoader | None = None

    def set_field_class(self, type: str, cls: type[Field]) -> None:
        """Register or override the field class for a type."""
        self._field_classes[type] = cls

    def set_fieldset_factory(self, type: str, factory: Callable[[], Fieldset]) -> None:
        """Register or override the factory for a fieldset type."""
        logger.debug("Registered fieldset type %r", type)
        self._fieldset_factories[type] = factory

    def set_fieldset_loader(self, loader: FieldsetLoader | None) -> None:
        """Set a fallback that resolves unregistered fieldset types.

        The loader is called with a type name the first time that type is
        requested. It returns a factory, which is then registered, or None
        when it does not know the type either.
        """
        self._fieldset_loader = loader

    def has_fieldset_type(self, type: str) -> bool:
        return type in self._fieldset_factories

    @property
    def fieldset_types(self) -> list[str]:
        """List all registered fieldset types."""
        return list(self._fieldset_factories.keys())

    def new_field(self, type: str, name: str, array_name: str | None = None) -> Field:
        """Create a field.

        Raises:
            FieldTypeNotFoundError: If no class is registered for ``type``.
        """
        if type not in self._field_classes:
            raise FieldTypeNotFoundError(type)
        field = self._field_classes[type](type)
        field.set_name(name)
        field.set_array_name(array_name)
        return field

    def new_fieldset(self, type: str, name: str, array_name: str | None = None) -> Fieldset:
        """Create a fieldset.

        Raises:
            FieldsetTypeNotFoundError: If ``type`` is neither registered nor
                resolved by the fieldset loader.
        """
        fieldset = self._get_factory(type)()
        fieldset.set_name(name)
        fieldset.set_array_name(array_name)
        return fieldset

    def new_collection(self, type: str, name: str, array_name: str | None = None) -> Collection:
        """Create a collection whose elements are fieldsets of ``type``.

        Raises:
            FieldsetTypeNotFoundError: If ``type`` is neither registered nor
                resolved by the fieldset loader.
        """
        factory = self._get_factory(type)

        def new_element(element_name: str) -> Fieldset:
            fieldset = factory()
            fieldset.set_name(element_name)
            return fieldset

        collection = Collection(new_element)
        collection.set_name(name)
        collection.set_array_name(array_name)
        return collection

    def _get_factory(self, type: str) -> Callable[[], Fieldset]:
        if type in self._fieldset_factories:
            return self._fieldset_factories[type]
        factory = self._fieldset_loader(type) if self._fieldset_loader else None
        if factory is None:
            raise FieldsetTypeNotFoundError(type)
        self.set_fieldset_factory(type, factory)
        return factory
