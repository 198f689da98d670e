"""Encode JSON values to tagged printable strings and back.

The first character of a transport string names the transform applied to
the JSON text, the rest is standard base64 of the transformed bytes::

    <tag><base64(transform(json))>

The layers are always `base64 -> <transform> -> JSON`.
"""

from __future__ import annotations

import base64
import binascii
import functools
from typing import Any

import msgspec

from . import errors, logs, transform, utils

log = logs.get(__name__)

# Bytes '+' through 'z' cover the base64 alphabet and padding, plus a few
# symbols that are not in it.
ALPHABET_RANGE = (ord('+'), ord('z'))

_json_encoder = msgspec.json.Encoder()
_json_decoder = msgspec.json.Decoder()


def encode(value: Any) -> str:
    """Return the shortest tagged transport string for `value`."""
    try:
        data = _json_encoder.encode(value)
    except (TypeError, ValueError, OverflowError, msgspec.EncodeError) as exc:
        raise errors.EncodeError(f'{exc}: value={utils.format.elide(repr(value))}') from exc

    options = [(t.TAG, t._encode(data)) for t in transform.candidates()]
    tag, payload = functools.reduce(_shortest, options)
    log.debug('encoded: tag=%s json=%d payload=%d', tag, len(data), len(payload))

    return tag + base64.b64encode(payload).decode('ascii')


def _shortest(a: tuple[str, bytes], b: tuple[str, bytes]) -> tuple[str, bytes]:
    """Keep the shorter candidate; on a tie keep the earlier one."""
    return b if len(b[1]) < len(a[1]) else a


def decode(src: bytes | str) -> Any:
    """Return the JSON value stored in the transport string `src`."""
    if isinstance(src, str):
        src = src.encode('utf8')
    if not src:
        raise errors.EmptyInput()

    tag, encoded = chr(src[0]), trim(src[1:])

    try:
        data = base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise errors.InvalidEncoding(f'{exc}: data={utils.format.elide(repr(encoded))}') from exc

    json_data = transform.create(tag)._decode(data)

    try:
        return _json_decoder.decode(json_data)
    except msgspec.DecodeError as exc:
        raise errors.MalformedJson(f'{exc}: data={utils.format.elide(repr(json_data))}') from exc


def trim(data: bytes) -> bytes:
    """Cut `data` at the first byte outside the base64 alphabet range.

    This is a quick cleanup of trailing garbage from copy/pasting (URL
    fragments, whitespace, delimiters). It does not sanitize the prefix.
    """
    low, high = ALPHABET_RANGE
    for i, byte in enumerate(data):
        if byte < low or byte > high:
            log.debug('trimmed %d trailing bytes', len(data) - i)
            return data[:i]
    return data
