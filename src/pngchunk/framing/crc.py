"""CRC helper functions."""

from __future__ import annotations

import struct
import zlib

CRC32_INITIAL = 0
CRC32_FORMAT = ">I"


def crc32(data: bytes) -> int:
    """Compute the CRC32 checksum of *data*.

    This is the ISO-HDLC variant used by PNG chunks, identical to
    :func:`zlib.crc32`, returned as an unsigned 32-bit integer.
    """

    return zlib.crc32(data, CRC32_INITIAL) & 0xFFFFFFFF


def append_crc32(payload: bytes) -> bytes:
    """Return ``payload`` concatenated with a big-endian CRC32."""

    return bytes(payload) + struct.pack(CRC32_FORMAT, crc32(payload))


def verify_crc32(blob: bytes) -> tuple[bool, bytes]:
    """Verify the CRC32 appended to *blob*.

    Returns a tuple ``(ok, payload_without_crc)``.  When *blob* is shorter
    than four bytes the checksum is treated as missing and ``(False, blob)``
    is returned.
    """

    if len(blob) < 4:
        return False, blob

    payload, checksum_bytes = blob[:-4], blob[-4:]
    expected = struct.unpack(CRC32_FORMAT, checksum_bytes)[0]
    return crc32(payload) == expected, payload
