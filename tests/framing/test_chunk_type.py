import string

import pytest

from pngchunk.exceptions import ChunkTypeError, ValidationError
from pngchunk.framing.chunk_type import ChunkType

LETTERS = (string.ascii_uppercase + string.ascii_lowercase).encode("ascii")


def test_chunk_type_from_bytes():
    expected = bytes([82, 117, 83, 116])
    actual = ChunkType.from_bytes([82, 117, 83, 116])
    assert actual.to_bytes() == expected
    assert bytes(actual) == expected


def test_chunk_type_from_str():
    expected = ChunkType.from_bytes(bytes([82, 117, 83, 116]))
    actual = ChunkType.from_str("RuSt")
    assert expected == actual
    assert hash(expected) == hash(actual)


def test_chunk_type_equality_is_case_sensitive():
    assert ChunkType.from_str("RuSt") != ChunkType.from_str("rust")


@pytest.mark.parametrize(
    "code, critical, public, reserved_valid, safe_to_copy",
    [
        ("RuSt", True, False, True, True),
        ("ruSt", False, False, True, True),
        ("RUSt", True, True, True, True),
        ("Rust", True, False, False, True),
        ("RuST", True, False, True, False),
    ],
)
def test_chunk_type_flags(code, critical, public, reserved_valid, safe_to_copy):
    chunk_type = ChunkType.from_str(code)
    assert chunk_type.is_critical() is critical
    assert chunk_type.is_public() is public
    assert chunk_type.is_reserved_bit_valid() is reserved_valid
    assert chunk_type.is_safe_to_copy() is safe_to_copy
    assert chunk_type.is_valid() is reserved_valid


def test_reserved_bit_invalid_type_still_constructs():
    chunk_type = ChunkType.from_str("Rust")
    assert not chunk_type.is_valid()
    assert str(chunk_type) == "Rust"


def test_chunk_type_rejects_non_letters():
    with pytest.raises(ChunkTypeError, match="byte 2 is out of range"):
        ChunkType.from_str("Ru1t")
    with pytest.raises(ValidationError, match="byte 0"):
        ChunkType.from_bytes(b"@uSt")
    with pytest.raises(ValidationError, match="byte 3"):
        ChunkType.from_bytes(b"RuS[")


@pytest.mark.parametrize("value", ["", "RuS", "RuStx", "Rüs"])
def test_chunk_type_from_str_wrong_length(value):
    with pytest.raises(ValidationError):
        ChunkType.from_str(value)


@pytest.mark.parametrize("value", [b"RuS", b"RuStx", [82, 117, 83, 256], None, 4, True])
def test_chunk_type_from_bytes_wrong_shape(value):
    with pytest.raises(ValidationError):
        ChunkType.from_bytes(value)


def test_construction_succeeds_iff_all_letters():
    for byte in range(256):
        raw = bytes([82, 117, byte, 116])
        if byte in LETTERS:
            assert ChunkType.from_bytes(raw).to_bytes() == raw
        else:
            with pytest.raises(ChunkTypeError):
                ChunkType.from_bytes(raw)


@pytest.mark.parametrize(
    "position, flag",
    [
        (0, ChunkType.is_critical),
        (1, ChunkType.is_public),
        (2, ChunkType.is_reserved_bit_valid),
        (3, ChunkType.is_safe_to_copy),
    ],
)
def test_flag_depends_only_on_its_byte(position, flag):
    base = bytearray(b"RuSt")
    expected = flag(ChunkType.from_bytes(base))
    for other in range(4):
        if other == position:
            continue
        for letter in LETTERS:
            mutated = bytearray(base)
            mutated[other] = letter
            assert flag(ChunkType.from_bytes(mutated)) is expected


def test_is_valid_tracks_byte_two_case():
    for letter in LETTERS:
        chunk_type = ChunkType.from_bytes(bytes([ord("r"), ord("U"), letter, ord("s")]))
        assert chunk_type.is_valid() is (letter & 0x20 == 0)


def test_chunk_type_is_immutable():
    chunk_type = ChunkType.from_str("RuSt")
    with pytest.raises(AttributeError):
        chunk_type.raw = b"Rust"  # type: ignore[misc]


def test_chunk_type_string():
    chunk_type = ChunkType.from_str("RuSt")
    assert str(chunk_type) == "RuSt"
    assert f"{chunk_type}" == "RuSt"
    assert repr(chunk_type) == "ChunkType('RuSt')"


def test_coerce_accepts_strings_bytes_and_instances():
    chunk_type = ChunkType.from_str("RuSt")
    assert ChunkType.coerce(chunk_type) is chunk_type
    assert ChunkType.coerce("RuSt") == chunk_type
    assert ChunkType.coerce(b"RuSt") == chunk_type


def test_chunk_type_from_int_is_a_shape_error():
    with pytest.raises(ChunkTypeError, match="not an int"):
        ChunkType.from_bytes(4)  # type: ignore[arg-type]
