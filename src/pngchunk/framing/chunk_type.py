"""Four-byte chunk type codes and their property bits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from ..exceptions import ChunkTypeError

TYPE_WIDTH = 4
PROPERTY_BIT = 0x20

ChunkTypeLike = Union["ChunkType", str, bytes, bytearray, memoryview, Iterable[int]]


def _is_ascii_letter(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def _normalise_type_bytes(value: object) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    elif isinstance(value, int):
        raise ChunkTypeError("chunk type must be four bytes, not an int")
    elif isinstance(value, str):
        raise ChunkTypeError("chunk type bytes must not be a str; use ChunkType.from_str")
    else:
        try:
            raw = bytes(value)  # type: ignore[call-overload]
        except (TypeError, ValueError) as exc:
            raise ChunkTypeError("chunk type must be four bytes") from exc
    if len(raw) != TYPE_WIDTH:
        raise ChunkTypeError(f"chunk type must be exactly {TYPE_WIDTH} bytes long, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class ChunkType:
    """A validated PNG chunk type code.

    Each of the four bytes must be an ASCII letter.  Bit 5 of every byte is a
    property flag; the flags are read from the stored bytes on demand.
    Instances compare and hash by their raw bytes, so ``RuSt`` and ``rust``
    are different types.
    """

    raw: bytes

    def __post_init__(self) -> None:
        raw = _normalise_type_bytes(self.raw)
        for index, byte in enumerate(raw):
            if not _is_ascii_letter(byte):
                raise ChunkTypeError(f"byte {index} is out of range")
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_bytes(cls, value: Union[bytes, bytearray, memoryview, Iterable[int]]) -> "ChunkType":
        """Build a chunk type from exactly four raw bytes."""

        return cls(_normalise_type_bytes(value))

    @classmethod
    def from_str(cls, value: str) -> "ChunkType":
        """Build a chunk type from a four character string."""

        if not isinstance(value, str):
            raise ChunkTypeError("chunk type string must be a str")
        try:
            raw = value.encode("ascii")
        except UnicodeEncodeError as exc:
            raise ChunkTypeError("chunk type string must be ASCII letters") from exc
        if len(raw) != TYPE_WIDTH:
            raise ChunkTypeError(f"`value` must be exactly {TYPE_WIDTH} bytes long")
        return cls.from_bytes(raw)

    @classmethod
    def coerce(cls, value: ChunkTypeLike) -> "ChunkType":
        if isinstance(value, ChunkType):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        return cls.from_bytes(value)

    def to_bytes(self) -> bytes:
        return self.raw

    def __bytes__(self) -> bytes:
        return self.raw

    def is_valid(self) -> bool:
        """Only the reserved bit decides validity; letters are checked on construction."""

        return self.is_reserved_bit_valid()

    def is_critical(self) -> bool:
        """Ancillary bit (byte 0) is clear."""

        return self.raw[0] & PROPERTY_BIT == 0

    def is_public(self) -> bool:
        """Private bit (byte 1) is clear."""

        return self.raw[1] & PROPERTY_BIT == 0

    def is_reserved_bit_valid(self) -> bool:
        """Reserved bit (byte 2) is clear."""

        return self.raw[2] & PROPERTY_BIT == 0

    def is_safe_to_copy(self) -> bool:
        """Safe-to-copy bit (byte 3) is set."""

        return self.raw[3] & PROPERTY_BIT != 0

    def __str__(self) -> str:
        return self.raw.decode("ascii", errors="replace")

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"
