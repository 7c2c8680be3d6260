"""Fieldset registry: fieldset types declared as JSON specs on disk.

Specs live one directory per fieldset type, one file per version::

    <registry_path>/address/1.0.0.json
    <registry_path>/address/1.2.0.json
    <registry_path>/customer/1.0.0.json

A registry installed on a Builder resolves fieldset types lazily: the first
time a fieldset asks for ``set_fieldset("billing", "address")`` the builder
falls back to the registry, which loads the pinned (or latest) ``address``
spec and hands back a factory for it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import jsonschema

from formtree.builder import Builder
from formtree.config import get_fieldset_registry_path, get_fieldset_schema_path
from formtree.filter import Filter, FilterInterface
from formtree.options import Options
from formtree.registry.models import FieldsetSpec
from formtree.registry.spec_fieldset import SpecFieldset, spec_factory

logger = logging.getLogger(__name__)


class FieldsetNotFoundError(Exception):
    """Raised when no spec exists for a fieldset type or version."""

    def __init__(self, fieldset_id: str, version: str | None = None) -> None:
        self.fieldset_id = fieldset_id
        self.version = version
        if version is None:
            message = f"No versions found for fieldset: {fieldset_id}"
        else:
            message = f"Fieldset spec not found: {fieldset_id}@{version}"
        super().__init__(message)


class FieldsetValidationError(Exception):
    """Raised when a fieldset spec is malformed.

    ``errors`` lists every problem found, each prefixed with the JSON path
    of the offending value.
    """

    def __init__(self, fieldset_id: str, version: str, errors: list[str]) -> None:
        self.fieldset_id = fieldset_id
        self.version = version
        self.errors = errors
        super().__init__(
            f"Invalid fieldset spec {fieldset_id}@{version}: " + "; ".join(errors)
        )


def _version_key(version: str) -> tuple:
    """Sort key comparing dotted versions numerically where possible."""
    return tuple(
        (0, int(part), "") if part.isdigit() else (1, 0, part) for part in version.split(".")
    )


def _error_path(error: jsonschema.ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


class FieldsetRegistry:
    """Loads fieldset specs from disk and resolves fieldset types for a Builder."""

    def __init__(
        self,
        registry_path: Path | str | None = None,
        schema_path: Path | str | None = None,
        pins: dict[str, str] | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            registry_path: Registry directory; defaults to
                ``FORMTREE_FIELDSET_REGISTRY`` or ``fieldset-registry``.
            schema_path: JSON Schema for specs; defaults to
                ``FORMTREE_FIELDSET_SCHEMA``. Without one, specs are only
                checked by the pydantic models.
            pins: Optional map of fieldset type to the version to resolve;
                unpinned types resolve to their latest version.
        """
        if registry_path is None:
            registry_path = get_fieldset_registry_path()
        if schema_path is None:
            schema_path = get_fieldset_schema_path()

        self.registry_path = Path(registry_path)
        self._pins: dict[str, str] = dict(pins or {})
        self._specs: dict[tuple[str, str], FieldsetSpec] = {}
        self._validator: jsonschema.protocols.Validator | None = None

        if schema_path:
            schema = json.loads(Path(schema_path).read_text())
            validator_cls = jsonschema.validators.validator_for(schema)
            validator_cls.check_schema(schema)
            self._validator = validator_cls(schema)

    def pin(self, fieldset_id: str, version: str) -> None:
        """Resolve ``fieldset_id`` to ``version`` instead of the latest."""
        self._pins[fieldset_id] = version

    def fieldset_ids(self) -> list[str]:
        """List the fieldset types with at least one spec."""
        if not self.registry_path.is_dir():
            return []
        return sorted(d.name for d in self.registry_path.iterdir() if self.versions(d.name))

    def versions(self, fieldset_id: str) -> list[str]:
        """List the versions of a fieldset type, oldest first."""
        type_dir = self.registry_path / fieldset_id
        if not type_dir.is_dir():
            return []
        return sorted((f.stem for f in type_dir.glob("*.json")), key=_version_key)

    def has(self, fieldset_id: str) -> bool:
        return bool(self.versions(fieldset_id))

    def spec(self, fieldset_id: str, version: str | None = None) -> FieldsetSpec:
        """Return the spec of a fieldset type.

        Args:
            fieldset_id: The fieldset type.
            version: Exact version; defaults to the pinned version, or the
                latest one when the type is not pinned.

        Raises:
            FieldsetNotFoundError: If the type or version has no spec file.
            FieldsetValidationError: If the spec is malformed, or declares
                a different ``fieldset_id`` or ``version`` than its path.
        """
        if version is None:
            version = self._pins.get(fieldset_id)
        if version is None:
            versions = self.versions(fieldset_id)
            if not versions:
                raise FieldsetNotFoundError(fieldset_id)
            version = versions[-1]

        key = (fieldset_id, version)
        if key not in self._specs:
            self._specs[key] = self._read(fieldset_id, version)
        return self._specs[key]

    def _read(self, fieldset_id: str, version: str) -> FieldsetSpec:
        path = self.registry_path / fieldset_id / f"{version}.json"
        if not path.is_file():
            raise FieldsetNotFoundError(fieldset_id, version)

        data = json.loads(path.read_text())
        if self._validator is not None:
            errors = sorted(self._validator.iter_errors(data), key=_error_path)
            if errors:
                raise FieldsetValidationError(
                    fieldset_id,
                    version,
                    [f"{_error_path(e)}: {e.message}" for e in errors],
                )

        spec = FieldsetSpec.model_validate(data)
        mismatches = [
            f"{attr}: declares {getattr(spec, attr)!r}, path says {expected!r}"
            for attr, expected in (("fieldset_id", fieldset_id), ("version", version))
            if getattr(spec, attr) != expected
        ]
        if mismatches:
            raise FieldsetValidationError(fieldset_id, version, mismatches)

        logger.debug("Loaded fieldset spec %s@%s from %s", fieldset_id, version, path)
        return spec

    def loader(
        self,
        builder: Builder,
        filter_factory: Callable[[], FilterInterface] = Filter,
        options: Options | None = None,
    ) -> Callable[[str], Callable[[], SpecFieldset] | None]:
        """Return a fieldset loader for ``builder``.

        The loader returns None for types with no spec, so the builder
        reports them as unknown; malformed specs raise.
        """
        shared_options = options if options is not None else Options()

        def load(fieldset_id: str) -> Callable[[], SpecFieldset] | None:
            if not self.has(fieldset_id) and fieldset_id not in self._pins:
                return None
            spec = self.spec(fieldset_id)
            logger.debug("Resolved fieldset type %r to version %s", fieldset_id, spec.version)
            return spec_factory(builder, spec, filter_factory, shared_options)

        return load

    def install(
        self,
        builder: Builder,
        filter_factory: Callable[[], FilterInterface] = Filter,
        options: Options | None = None,
    ) -> Builder:
        """Make ``builder`` resolve unregistered fieldset types from this registry.

        Types registered on the builder directly keep precedence.

        Returns:
            The builder, for chaining.
        """
        builder.set_fieldset_loader(self.loader(builder, filter_factory, options))
        return builder
