"""PNG-style chunk codec."""

from .exceptions import (
    ChecksumMismatchError,
    ChunkDataError,
    ChunkLengthError,
    ChunkTypeError,
    PngChunkError,
    ValidationError,
)
from .framing import Chunk, ChunkType, decode_chunk, encode_chunk

__all__ = [
    "ChecksumMismatchError",
    "Chunk",
    "ChunkDataError",
    "ChunkLengthError",
    "ChunkType",
    "ChunkTypeError",
    "PngChunkError",
    "ValidationError",
    "decode_chunk",
    "encode_chunk",
]
