"""Input tree: fields, fieldsets and collections of fieldsets."""

from formtree.inputs.base import AbstractInput, Input
from formtree.inputs.collection import Collection
from formtree.inputs.field import Field
from formtree.inputs.fieldset import Fieldset, InputNotFoundError

__all__ = [
    "AbstractInput",
    "Collection",
    "Field",
    "Fieldset",
    "Input",
    "InputNotFoundError",
]
