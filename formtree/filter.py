"""Filter protocol and a closure-based filter.

A fieldset never interprets rules itself; it hands itself to its filter,
which reads values through the input contract and records messages keyed
by input name.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from formtree.inputs.fieldset import Fieldset

Rule = Callable[[Any, "Fieldset"], bool]


@runtime_checkable
class FilterInterface(Protocol):
    """Protocol for fieldset filters."""

    def values(self, fieldset: Fieldset) -> bool:
        """Apply all rules to the fieldset's current values.

        Args:
            fieldset: The fieldset to filter.

        Returns:
            True if every rule passed, False otherwise.
        """
        ...

    def get_messages(self, name: str | None = None) -> dict[str, list[str]] | list[str]:
        """Return recorded messages.

        Args:
            name: An input name; if omitted, messages for all inputs.

        Returns:
            Mapping of input name to messages, or the messages for one input.
        """
        ...


class Filter:
    """Filter made of per-input rule callables.

    Each rule receives the input's current value and the fieldset, and
    returns True when the value passes::

        filter = Filter()
        filter.set_rule("email", "Email is required.", lambda value, fs: bool(value))
    """

    def __init__(self) -> None:
        self._rules: list[tuple[str, str, Rule]] = []
        self._messages: dict[str, list[str]] = {}

    def set_rule(self, name: str, message: str, rule: Rule) -> None:
        """Add a rule for an input.

        Rules accumulate; several rules on the same input run in the order
        they were added.

        Args:
            name: The input name.
            message: Message recorded when the rule fails.
            rule: Callable ``(value, fieldset) -> bool``.
        """
        self._rules.append((name, message, rule))

    def values(self, fieldset: Fieldset) -> bool:
        self._messages = {}
        for name, message, rule in self._rules:
            if not rule(fieldset.get_value(name), fieldset):
                self.add_messages(name, message)
        return not self._messages

    def add_messages(self, name: str, messages: str | list[str]) -> None:
        """Record messages for an input outside of the rules."""
        if isinstance(messages, str):
            messages = [messages]
        self._messages.setdefault(name, []).extend(messages)

    def get_messages(self, name: str | None = None) -> dict[str, list[str]] | list[str]:
        if name is None:
            return {key: list(value) for key, value in self._messages.items()}
        return list(self._messages.get(name, []))
