"""Framing utilities for PNG-style chunks."""

from .chunk import (
    CRC_WIDTH,
    LENGTH_WIDTH,
    MAX_CHUNK_LENGTH,
    REQ_FIELDS_WIDTH,
    Chunk,
    decode_chunk,
    encode_chunk,
)
from .chunk_type import TYPE_WIDTH, ChunkType
from .crc import append_crc32, crc32, verify_crc32

__all__ = [
    "CRC_WIDTH",
    "LENGTH_WIDTH",
    "MAX_CHUNK_LENGTH",
    "REQ_FIELDS_WIDTH",
    "TYPE_WIDTH",
    "Chunk",
    "ChunkType",
    "decode_chunk",
    "encode_chunk",
    "crc32",
    "append_crc32",
    "verify_crc32",
]
