"""Input protocol and shared base class.

Defines the contract every node of an input tree satisfies, whether it is
a scalar field, a nested fieldset, or a collection of fieldsets.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Input(Protocol):
    """Protocol for anything a fieldset can hold.

    Implemented by Field, Fieldset and Collection.
    """

    def get_name(self) -> str | None:
        """Return the input name."""
        ...

    def set_array_name(self, array_name: str | None) -> None:
        """Record the name of the enclosing array-like context."""
        ...

    def get_array_name(self) -> str | None:
        """Return the name of the enclosing array-like context."""
        ...

    def get_full_name(self) -> str | None:
        """Return the qualified name, e.g. ``address[city]``."""
        ...

    def load(self, value: Any) -> Any:
        """Populate the input from a raw value."""
        ...

    def read(self) -> Any:
        """Return the current value in its raw form."""
        ...

    def export(self) -> Any:
        """Return a display-ready representation."""
        ...


class AbstractInput(ABC):
    """Base class holding the name bookkeeping shared by all inputs."""

    def __init__(self) -> None:
        self.name: str | None = None
        self.array_name: str | None = None

    def set_name(self, name: str | None) -> None:
        self.name = name

    def get_name(self) -> str | None:
        return self.name

    def set_array_name(self, array_name: str | None) -> None:
        self.array_name = array_name

    def get_array_name(self) -> str | None:
        return self.array_name

    def get_full_name(self) -> str | None:
        """Return the name qualified by the enclosing array name.

        Returns:
            ``name`` when there is no array name, otherwise
            ``array_name[name]``.
        """
        if self.array_name:
            return f"{self.array_name}[{self.name}]"
        return self.name

    @abstractmethod
    def load(self, value: Any) -> Any: ...

    @abstractmethod
    def read(self) -> Any: ...

    @abstractmethod
    def export(self) -> Any: ...
