"""Registry modules for loading declarative fieldset specifications."""

from formtree.registry.fieldsets import (
    FieldsetNotFoundError,
    FieldsetRegistry,
    FieldsetValidationError,
)
from formtree.registry.models import FieldsetSpec, InputSpec
from formtree.registry.spec_fieldset import SpecFieldset, register_spec, spec_factory

__all__ = [
    "FieldsetRegistry",
    "FieldsetNotFoundError",
    "FieldsetValidationError",
    "FieldsetSpec",
    "InputSpec",
    "SpecFieldset",
    "register_spec",
    "spec_factory",
]
