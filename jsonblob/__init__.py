"""Compact, self-describing transport strings for JSON values.

    >>> import jsonblob
    >>> jsonblob.encode({'hello': 'world'})
    '2eyJoZWxsbyI6IndvcmxkIn0='
    >>> jsonblob.decode('1KLUv/QBoiQAAeyJoZWxsbyI6IndvcmxkIn0=&1312')
    {'hello': 'world'}
"""

from __future__ import annotations

from .codec import decode, encode
from .errors import (
    DecodeError,
    EmptyInput,
    EncodeError,
    EncodeTransformFailure,
    InvalidEncoding,
    JsonBlobError,
    MalformedJson,
    RegistryError,
    TransformFailure,
    UnsupportedFormat,
)

__version__ = '1.0.0'

__all__ = [
    'decode',
    'encode',
    'DecodeError',
    'EmptyInput',
    'EncodeError',
    'EncodeTransformFailure',
    'InvalidEncoding',
    'JsonBlobError',
    'MalformedJson',
    'RegistryError',
    'TransformFailure',
    'UnsupportedFormat',
]
