"""Registry of named output targets."""

from __future__ import annotations

from collections.abc import Iterator

from rolodex.exceptions import ConfigurationError

from .base import Formatter


class FormatterRegistry:
    """Maps user-facing names to configured formatter instances.

    A registry is an ordinary object owned by the application: build one at
    startup (see :func:`~rolodex.formatters.presets.default_registry`) and
    pass it to whatever lets users pick a formatter by name.  Several
    entries may share a formatter class with different configs, e.g. a
    compact and a full plain-text preset.
    """

    __slots__ = ("_formatters",)

    def __init__(self) -> None:
        self._formatters: dict[str, Formatter] = {}

    def register(self, name: str, formatter: Formatter) -> None:
        """Register a formatter under *name*.

        Raises:
            ConfigurationError: If *name* is already taken, or *formatter*
                does not implement the :class:`Formatter` protocol.
        """
        if name in self._formatters:
            msg = f"Formatter already registered: '{name}'"
            raise ConfigurationError(msg)
        if not isinstance(formatter, Formatter):
            msg = (
                f"Cannot register {type(formatter).__name__!r} as '{name}': "
                "it does not implement the Formatter protocol"
            )
            raise ConfigurationError(msg)
        self._formatters[name] = formatter

    def unregister(self, name: str) -> None:
        self._formatters.pop(name, None)

    def get(self, name: str) -> Formatter | None:
        """Look up a formatter by name, or ``None`` if not found."""
        return self._formatters.get(name)

    def resolve(self, name: str) -> Formatter:
        """Look up a formatter by name.

        Raises:
            KeyError: If no formatter is registered under *name*.
        """
        formatter = self._formatters.get(name)
        if formatter is None:
            known = ", ".join(sorted(self._formatters)) or "none"
            msg = f"Unknown formatter: '{name}' (known: {known})"
            raise KeyError(msg)
        return formatter

    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._formatters)

    def __contains__(self, name: object) -> bool:
        return name in self._formatters

    def __iter__(self) -> Iterator[str]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(names={self.names()})"
