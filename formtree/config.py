"""Configuration defaults and environment lookups."""

import os
from pathlib import Path

# Field type used by Fieldset.set_field() when none is given
DEFAULT_FIELD_TYPE = "text"

FIELDSET_REGISTRY_ENV = "FORMTREE_FIELDSET_REGISTRY"
FIELDSET_SCHEMA_ENV = "FORMTREE_FIELDSET_SCHEMA"


def get_fieldset_registry_path() -> Path:
    """Return the fieldset registry path.

    Uses ``FORMTREE_FIELDSET_REGISTRY`` if set, otherwise
    ``fieldset-registry`` relative to the working directory.
    """
    env_path = os.environ.get(FIELDSET_REGISTRY_ENV)
    if env_path:
        return Path(env_path)
    return Path("fieldset-registry")


def get_fieldset_schema_path() -> Path | None:
    """Return the fieldset spec JSON Schema path, or None to skip validation."""
    env_path = os.environ.get(FIELDSET_SCHEMA_ENV)
    if env_path:
        return Path(env_path)
    return None
