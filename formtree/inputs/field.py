"""Scalar field input."""

from typing import Any

from formtree.inputs.base import AbstractInput


class Field(AbstractInput):
    """A leaf input holding a single value.

    Besides the value, a field carries display metadata: its symbolic type
    (``text``, ``select``, ...), HTML-ish attributes, and a list or mapping
    of options for choice-like types. The setters return the field so that
    a fieldset's ``init()`` can configure children fluently::

        self.set_field("color", "select").set_options(["red", "blue"])
    """

    def __init__(self, type: str) -> None:
        super().__init__()
        self.type = type
        self.attribs: dict[str, Any] = {}
        self.options: list[Any] | dict[Any, Any] = []
        self.value: Any = None

    def get_type(self) -> str:
        return self.type

    def set_attribs(self, attribs: dict[str, Any]) -> "Field":
        self.attribs = dict(attribs)
        return self

    def get_attribs(self) -> dict[str, Any]:
        return self.attribs

    def set_options(self, options: list[Any] | dict[Any, Any]) -> "Field":
        self.options = options
        return self

    def get_options(self) -> list[Any] | dict[Any, Any]:
        return self.options

    def set_value(self, value: Any) -> "Field":
        self.value = value
        return self

    def get_value(self) -> Any:
        return self.value

    def load(self, value: Any) -> None:
        self.value = value

    def read(self) -> Any:
        return self.value

    def export(self) -> dict[str, Any]:
        """Export the field for a view.

        Returns:
            Dict with ``type``, ``name`` (the qualified name), ``attribs``,
            ``options`` and ``value``.
        """
        return {
            "type": self.type,
            "name": self.get_full_name(),
            "attribs": self.attribs,
            "options": self.options,
            "value": self.value,
        }
