from __future__ import annotations


class JsonBlobError(Exception):
    """Base class for all jsonblob exceptions."""


class EncodeError(JsonBlobError):
    """Raised when a value cannot be turned into a transport string."""


class EncodeTransformFailure(EncodeError):
    """Raised when a candidate transform fails while encoding."""


class DecodeError(JsonBlobError):
    """Raised when a transport string cannot be turned back into a value."""


class EmptyInput(DecodeError):
    """Raised when decoding zero-length input."""

    def __init__(self) -> None:
        super().__init__('data is empty')


class InvalidEncoding(DecodeError):
    """Raised when the payload is not valid base64 after trimming."""


class UnsupportedFormat(DecodeError):
    """Raised for a tag that is not in the transform registry."""

    def __init__(self, tag: str) -> None:
        super().__init__(f'unsupported format tag: {tag!r}')
        self.tag = tag


class TransformFailure(DecodeError):
    """Raised when the inverse transform fails (corrupt stream, limits)."""


class MalformedJson(DecodeError):
    """Raised when the decoded bytes are not valid JSON text."""


class RegistryError(JsonBlobError):
    """Raised when attempting to register a duplicate tag."""
