"""Pass-through transform for payloads that do not compress."""

from __future__ import annotations

from . import Transform


class IdentityTransform(Transform):
    """Leaves the JSON bytes unchanged."""

    TAG = '2'

    def encode(self, data: bytes) -> bytes:
        return data

    def decode(self, data: bytes) -> bytes:
        return data
