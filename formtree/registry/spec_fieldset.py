"""Fieldsets built from declarative specs."""

from __future__ import annotations

from collections.abc import Callable

from formtree.builder import Builder, BuilderInterface
from formtree.filter import Filter, FilterInterface
from formtree.inputs.fieldset import Fieldset
from formtree.options import Options
from formtree.registry.models import FieldsetSpec


class SpecFieldset(Fieldset):
    """A fieldset whose inputs come from a FieldsetSpec."""

    def __init__(
        self,
        builder: BuilderInterface,
        filter: FilterInterface,
        options: Options,
        spec: FieldsetSpec,
    ) -> None:
        # init() runs inside Fieldset.__init__ and needs the spec
        self.spec = spec
        super().__init__(builder, filter, options)

    def init(self) -> None:
        for input_spec in self.spec.inputs:
            if input_spec.kind == "fieldset":
                self.set_fieldset(input_spec.name, input_spec.type)
            elif input_spec.kind == "collection":
                self.set_collection(input_spec.name, input_spec.type)
            else:
                field = self.set_field(input_spec.name, input_spec.type)
                field.set_attribs(input_spec.attribs)
                field.set_options(input_spec.options)
                field.load(input_spec.value)


def spec_factory(
    builder: BuilderInterface,
    spec: FieldsetSpec,
    filter_factory: Callable[[], FilterInterface] = Filter,
    options: Options | None = None,
) -> Callable[[], SpecFieldset]:
    """Return a zero-argument factory building fieldsets from ``spec``."""
    shared_options = options if options is not None else Options()

    def factory() -> SpecFieldset:
        return SpecFieldset(builder, filter_factory(), shared_options, spec)

    return factory


def register_spec(
    builder: Builder,
    spec: FieldsetSpec,
    filter_factory: Callable[[], FilterInterface] = Filter,
    options: Options | None = None,
) -> None:
    """Register a fieldset type on a builder from a spec.

    Each fieldset built for ``spec.fieldset_id`` gets its own filter from
    ``filter_factory`` and shares ``options``.

    Args:
        builder: The builder to register the type on.
        spec: The fieldset specification.
        filter_factory: Callable returning a new filter per fieldset.
        options: Options shared by the built fieldsets; a new empty
            Options when omitted.
    """
    builder.set_fieldset_factory(
        spec.fieldset_id, spec_factory(builder, spec, filter_factory, options)
    )
