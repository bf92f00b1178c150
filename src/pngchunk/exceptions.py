"""Custom exception hierarchy for the chunk codec."""
from __future__ import annotations

from dataclasses import dataclass


class PngChunkError(Exception):
    """Base class for all pngchunk errors."""


class ValidationError(PngChunkError):
    """Raised when a chunk or chunk type fails validation."""


class ChunkTypeError(ValidationError):
    """Raised when a type code is not four ASCII letters."""


class ChunkLengthError(ValidationError):
    """Raised when a buffer is truncated or disagrees with its length field."""


@dataclass
class ChecksumMismatchError(ValidationError):
    expected: int
    actual: int

    def __str__(self) -> str:
        return f"checksum does not match data (expected {self.expected:#010x}, got {self.actual:#010x})"


class ChunkDataError(ValidationError):
    """Raised when chunk data cannot be interpreted as text."""


__all__ = [
    "ChecksumMismatchError",
    "ChunkDataError",
    "ChunkLengthError",
    "ChunkTypeError",
    "PngChunkError",
    "ValidationError",
]
