"""PNG-style chunk building and parsing."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Union

from ..exceptions import (
    ChecksumMismatchError,
    ChunkDataError,
    ChunkLengthError,
    ChunkTypeError,
    ValidationError,
)
from .chunk_type import TYPE_WIDTH, ChunkType, ChunkTypeLike
from .crc import CRC32_FORMAT, append_crc32, crc32, verify_crc32

logger = logging.getLogger(__name__)

# fixed width fields
LENGTH_WIDTH = 4
CRC_WIDTH = 4
REQ_FIELDS_WIDTH = LENGTH_WIDTH + TYPE_WIDTH + CRC_WIDTH
MAX_CHUNK_LENGTH = 0xFFFFFFFF

LENGTH_FORMAT = ">I"

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Chunk:
    """A chunk type paired with an opaque payload.

    The length and CRC are derived from the type and payload whenever they are
    requested, so a constructed chunk is always internally consistent.  Use
    :meth:`from_bytes` to parse a serialised chunk; it validates the length
    field and the checksum before returning.
    """

    type_code: ChunkType
    payload: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.type_code, ChunkType):
            raise ValidationError("chunk_type must be a ChunkType")
        if not isinstance(self.payload, (bytes, bytearray, memoryview)):
            raise ValidationError("chunk data must be bytes")
        object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def from_text(cls, chunk_type: ChunkTypeLike, text: str) -> "Chunk":
        """Build a chunk whose payload is *text* encoded as UTF-8."""

        if not isinstance(text, str):
            raise ValidationError("chunk text must be a str")
        return cls(ChunkType.coerce(chunk_type), text.encode("utf-8"))

    @classmethod
    def from_bytes(cls, value: BytesLike) -> "Chunk":
        """Parse a serialised chunk, validating its length and checksum."""

        return decode_chunk(value)

    def length(self) -> int:
        return len(self.payload)

    def chunk_type(self) -> ChunkType:
        return self.type_code

    def data(self) -> bytes:
        return self.payload

    def crc(self) -> int:
        """CRC32 over the type bytes followed by the payload."""

        return crc32(self.type_code.to_bytes() + self.payload)

    def data_as_string(self) -> str:
        try:
            return self.payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ChunkDataError("chunk data is not valid utf8") from exc

    def as_bytes(self) -> bytes:
        return encode_chunk(self)

    def __bytes__(self) -> bytes:
        return encode_chunk(self)

    def __str__(self) -> str:
        return f"Chunk {{Length: {self.length()}, Type: {self.type_code}, Crc: {self.crc()}}}"

    def __repr__(self) -> str:
        return f"Chunk(chunk_type={self.type_code!r}, length={self.length()})"


def encode_chunk(chunk: Chunk) -> bytes:
    """Serialise *chunk* as ``length | type | data | crc``."""

    length = chunk.length()
    if length > MAX_CHUNK_LENGTH:
        raise ChunkLengthError(f"chunk data too long ({length} bytes)")
    body = chunk.chunk_type().to_bytes() + chunk.data()
    return struct.pack(LENGTH_FORMAT, length) + append_crc32(body)


def decode_chunk(value: BytesLike) -> Chunk:
    """Parse a chunk produced by :func:`encode_chunk`.

    The buffer must hold exactly one chunk: the length field has to account
    for every byte between the type code and the trailing CRC.
    """

    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ValidationError("chunk blob must be bytes")
    blob = bytes(value)

    if len(blob) < REQ_FIELDS_WIDTH:
        logger.debug("rejecting %d byte blob: shorter than the fixed fields", len(blob))
        raise ChunkLengthError("invalid chunk data (incomplete)")

    (length,) = struct.unpack(LENGTH_FORMAT, blob[:LENGTH_WIDTH])
    if len(blob) != REQ_FIELDS_WIDTH + length:
        logger.debug("rejecting %d byte blob: length field says %d", len(blob), length)
        raise ChunkLengthError("invalid chunk data (invalid length)")

    data_begin = LENGTH_WIDTH + TYPE_WIDTH
    try:
        chunk_type = ChunkType.from_bytes(blob[LENGTH_WIDTH:data_begin])
    except ChunkTypeError as exc:
        logger.debug("rejecting blob: %s", exc)
        raise

    ok, body = verify_crc32(blob[LENGTH_WIDTH:])
    if not ok:
        (expected,) = struct.unpack(CRC32_FORMAT, blob[-CRC_WIDTH:])
        actual = crc32(body)
        logger.debug("checksum mismatch for %s chunk: %#010x != %#010x", chunk_type, actual, expected)
        raise ChecksumMismatchError(expected=expected, actual=actual)

    logger.debug("decoded %s chunk with %d data bytes", chunk_type, length)
    return Chunk(chunk_type, body[TYPE_WIDTH:])
