"""Dialect registry: the closed mapping from dialect name to renderer."""

from __future__ import annotations

from dbfschema.dialect.base import Dialect


class UnsupportedDialectError(Exception):
    """Raised when a requested dialect is not registered.

    Carries the rejected name and the registered names so callers can tell
    the user what to pick instead.
    """

    def __init__(self, name: str, available: list[str]) -> None:
        self.dialect_name = name
        self.available = available
        super().__init__(f"Unsupported dialect '{name}'. Available: {', '.join(available)}")


class DialectRegistry:
    """Registry of schema dialects, keyed by :attr:`Dialect.name`.

    Dialects hold no state, so one shared instance per name is kept.
    """

    _dialects: dict[str, Dialect] = {}

    @classmethod
    def register(cls, dialect_class: type[Dialect]) -> type[Dialect]:
        """Register a dialect class. Can be used as a decorator."""
        instance = dialect_class()
        existing = cls._dialects.get(instance.name)
        if existing is not None and type(existing) is not dialect_class:
            raise ValueError(
                f"Dialect name '{instance.name}' already registered by {type(existing).__name__}"
            )
        cls._dialects[instance.name] = instance
        return dialect_class

    @classmethod
    def get(cls, name: str) -> Dialect:
        """Return the dialect registered under *name*."""
        try:
            return cls._dialects[name]
        except KeyError:
            raise UnsupportedDialectError(name, available=cls.available()) from None

    @classmethod
    def available(cls) -> list[str]:
        """List registered dialect names."""
        return sorted(cls._dialects)
