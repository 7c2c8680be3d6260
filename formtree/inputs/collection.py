"""Collection: an ordered, repeatable sequence of fieldsets."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from formtree.inputs.base import AbstractInput

if TYPE_CHECKING:
    from formtree.inputs.fieldset import Fieldset

logger = logging.getLogger(__name__)

FieldsetFactory = Callable[[str], "Fieldset"]


def _to_index(key: Any) -> int | None:
    """Return ``key`` as a non-negative index, or None if it is not one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isdecimal():
        return int(key)
    return None


class Collection(AbstractInput):
    """A collection of fieldsets of a single type.

    Elements are created on demand through a factory supplied by the
    builder. The factory takes the element's qualified name, e.g.
    ``contact[phones][0]``, and returns a new fieldset. Elements carry no
    array name of their own, so their children are qualified as
    ``contact[phones][0][number]``.
    """

    def __init__(self, factory: FieldsetFactory) -> None:
        super().__init__()
        self._factory = factory
        self.fieldsets: list[Fieldset] = []

    def __len__(self) -> int:
        return len(self.fieldsets)

    def __iter__(self) -> Iterator[Fieldset]:
        return iter(self.fieldsets)

    def __getitem__(self, index: int) -> Fieldset:
        """Return the element at ``index``.

        Negative indices are rejected rather than counted from the end.

        Raises:
            IndexError: If ``index`` is negative or past the last element.
        """
        if index < 0:
            raise IndexError(f"Collection index must be non-negative: {index}")
        return self.fieldsets[index]

    def get_fieldsets(self) -> list[Fieldset]:
        return self.fieldsets

    def _element_name(self, index: int) -> str:
        return f"{self.get_full_name()}[{index}]"

    def new_fieldset(self) -> Fieldset:
        """Append a new, empty element and return it."""
        fieldset = self._factory(self._element_name(len(self.fieldsets)))
        fieldset.set_array_name(None)
        self.fieldsets.append(fieldset)
        return fieldset

    def load(self, data: Any) -> bool:
        """Load the collection from a sequence of records.

        Record ``i`` is loaded into element ``i``; missing elements are
        appended as needed. ``data`` may also be a mapping keyed by index.
        Keys that are not non-negative integers are ignored, as is data
        that is neither a sequence nor a mapping. Elements without a record
        are left untouched.

        Args:
            data: Sequence of records, mapping of index to record, or None.

        Returns:
            Always True.
        """
        if data is None:
            return True
        if isinstance(data, Mapping):
            records = list(data.items())
        elif isinstance(data, (list, tuple)):
            records = list(enumerate(data))
        else:
            logger.debug("Collection %r ignored non-sequence data: %r", self.name, data)
            return True

        ignored = []
        for key, record in records:
            index = _to_index(key)
            if index is None:
                ignored.append(key)
                continue
            while len(self.fieldsets) <= index:
                self.new_fieldset()
            self.fieldsets[index].load(record)

        if ignored:
            logger.debug("Collection %r ignored non-index keys: %s", self.name, ignored)
        return True

    def read(self) -> Collection:
        return self

    def export(self) -> list[dict[str, Any]]:
        """Export each element, in order.

        Each element is renamed to its qualified form first, so element 0
        of ``contact[phones]`` is ``contact[phones][0]`` under the
        collection's current name.
        """
        exported = []
        for index, fieldset in enumerate(self.fieldsets):
            fieldset.set_name(self._element_name(index))
            fieldset.set_array_name(None)
            exported.append(fieldset.export())
        return exported
