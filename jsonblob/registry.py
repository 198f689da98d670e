"""Append-only registry that maps format tags to their handlers."""

from __future__ import annotations

from typing import Generic, TypeVar

from . import logs
from .errors import RegistryError, UnsupportedFormat

log = logs.get(__name__)

T = TypeVar('T')


class Registry(Generic[T]):
    """Keeps a registry of subclasses by tag, in registration order.

    Tags are permanent: once a tag is registered its meaning cannot be
    replaced, only new tags may be added.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._registry: dict[str, T] = {}

    def __getitem__(self, tag: str) -> T:
        try:
            return self._registry[tag]
        except KeyError:
            raise UnsupportedFormat(tag) from None

    def __setitem__(self, tag: str, obj: T) -> None:
        if tag in self._registry:
            raise RegistryError(f'{self.name}: tag already registered: {tag!r}')
        log.debug('registered %s: %r', self.name, tag)
        self._registry[tag] = obj

    def tags(self) -> tuple[str, ...]:
        """Return all registered tags in insertion order."""
        return tuple(self._registry.keys())

    def values(self) -> tuple[T, ...]:
        """Return all registered objects in insertion order."""
        return tuple(self._registry.values())
