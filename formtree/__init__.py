"""formtree: composable form inputs with load, filter and export."""

__version__ = "0.1.0"

from formtree.builder import (
    Builder,
    BuilderError,
    BuilderInterface,
    FieldsetTypeNotFoundError,
    FieldTypeNotFoundError,
)
from formtree.filter import Filter, FilterInterface
from formtree.inputs import (
    AbstractInput,
    Collection,
    Field,
    Fieldset,
    Input,
    InputNotFoundError,
)
from formtree.options import Options

__all__ = [
    "__version__",
    # Inputs
    "AbstractInput",
    "Collection",
    "Field",
    "Fieldset",
    "Input",
    "InputNotFoundError",
    # Collaborators
    "Builder",
    "BuilderError",
    "BuilderInterface",
    "FieldTypeNotFoundError",
    "FieldsetTypeNotFoundError",
    "Filter",
    "FilterInterface",
    "Options",
]
