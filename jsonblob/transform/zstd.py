"""Zstandard transform."""

from __future__ import annotations

import struct

import zstandard

from . import Transform

COMPRESSION_LEVEL = 19

# Skippable frames use magic numbers 0x184D2A50 through 0x184D2A5F.
SKIPPABLE_MAGIC = 0x184D2A50
SKIPPABLE_HEADER = struct.Struct('<II')


def _is_skippable(data: bytes) -> bool:
    return len(data) >= 4 and struct.unpack_from('<I', data)[0] & ~0xF == SKIPPABLE_MAGIC


class ZstdTransform(Transform):
    """Compresses JSON bytes into a single zstd frame.

    Frames are written without a content size or checksum, so the output
    matches what the original tag `0` writer produced byte for byte.

    Decoding reads every frame in the payload and skips skippable frames.
    Anything left over that is not a complete frame is an error.
    """

    TAG = '1'

    def encode(self, data: bytes) -> bytes:
        cctx = zstandard.ZstdCompressor(
            level=COMPRESSION_LEVEL, write_content_size=False, write_checksum=False
        )
        cobj = cctx.compressobj()
        return cobj.compress(data) + cobj.flush()

    def decode(self, data: bytes) -> bytes:
        dctx = zstandard.ZstdDecompressor()
        chunks = []
        while data:
            if _is_skippable(data):
                data = self._skip(data)
                continue
            dobj = dctx.decompressobj()
            chunks.append(dobj.decompress(data))
            if not dobj.eof:
                raise ValueError('truncated zstd frame')
            data = dobj.unused_data
        return b''.join(chunks)

    @staticmethod
    def _skip(data: bytes) -> bytes:
        if len(data) < SKIPPABLE_HEADER.size:
            raise ValueError('truncated skippable frame header')
        _, size = SKIPPABLE_HEADER.unpack_from(data)
        end = SKIPPABLE_HEADER.size + size
        if len(data) < end:
            raise ValueError('truncated skippable frame')
        return data[end:]


class LegacyZstdTransform(ZstdTransform):
    """Tag `0` from the single-transform format. Decode only."""

    TAG = '0'
    EMIT = False
