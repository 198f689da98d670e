"""Transform base classes and the format tag registry."""

from __future__ import annotations

import abc
from typing import Any

from .. import errors, logs, utils
from ..registry import Registry

log = logs.get(__name__)


def create(tag: str, **kwargs: Any) -> Transform:
    """Return a transform instance by tag."""
    return REGISTRY[tag](**kwargs)


def candidates() -> list[Transform]:
    """Return the transforms new encodes may emit, in registry order."""
    return [cls() for cls in REGISTRY.values() if cls.EMIT]


class Transform(abc.ABC):
    """Base class for reversible byte transforms selected by a format tag."""

    TAG: str
    EMIT: bool = True

    def __init_subclass__(cls) -> None:
        if len(cls.TAG) != 1 or not cls.TAG.isprintable():
            raise errors.RegistryError(f'tag must be one printable character: {cls.TAG!r}')
        REGISTRY[cls.TAG] = cls

    @abc.abstractmethod
    def encode(self, data: bytes) -> bytes:
        """Transform canonical JSON bytes into raw payload bytes."""
        raise NotImplementedError('abstract')

    @abc.abstractmethod
    def decode(self, data: bytes) -> bytes:
        """Reverse `encode`, returning JSON bytes."""
        raise NotImplementedError('abstract')

    def _encode(self, data: bytes) -> bytes:
        """Wrapper that provides encoding error context. Used internally."""
        try:
            return self.encode(data)
        except Exception as exc:
            raise errors.EncodeTransformFailure(
                f'{self.TAG}: {exc}: data={utils.format.elide(repr(data))}'
            ) from exc

    def _decode(self, data: bytes) -> bytes:
        """Wrapper that provides decoding error context. Used internally."""
        try:
            return self.decode(data)
        except Exception as exc:
            raise errors.TransformFailure(
                f'{self.TAG}: {exc}: data={utils.format.elide(repr(data))}'
            ) from exc

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.TAG!r})'


REGISTRY: Registry[type[Transform]] = Registry(__name__)

# Registration order is emission order.
from . import zstd  # noqa: E402, F401
from . import identity  # noqa: E402, F401
