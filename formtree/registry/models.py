"""Pydantic models for declarative fieldset specifications."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class InputSpec(BaseModel):
    """Declaration of one input within a fieldset spec."""

    name: str
    kind: Literal["field", "fieldset", "collection"] = "field"
    type: str | None = None  # field type, or fieldset type for fieldset/collection
    attribs: dict[str, Any] = Field(default_factory=dict)
    options: list[Any] | dict[str, Any] = Field(default_factory=list)
    value: Any = None


class FieldsetSpec(BaseModel):
    """Complete fieldset specification."""

    type: Literal["fieldset_spec"]
    fieldset_id: str
    version: str
    description: str | None = None
    inputs: list[InputSpec]

    def get_input(self, name: str) -> InputSpec | None:
        """Get an input declaration by name."""
        for input in self.inputs:
            if input.name == name:
                return input
        return None
