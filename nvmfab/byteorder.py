"""Byte swapping and fixed-width endian conversions.

The ``*_to_cpu`` functions decode a little- or big-endian byte string into an
integer; the ``cpu_to_*`` functions encode an integer, truncated to the
field width, into bytes of the requested byte order.
"""

__all__ = [
    "bswap_16",
    "bswap_32",
    "bswap_64",
    "le16_to_cpu",
    "le32_to_cpu",
    "le64_to_cpu",
    "be16_to_cpu",
    "be32_to_cpu",
    "be64_to_cpu",
    "cpu_to_le16",
    "cpu_to_le32",
    "cpu_to_le64",
    "cpu_to_be16",
    "cpu_to_be32",
    "cpu_to_be64",
]


def _bswap(val: int, width: int) -> int:
    mask = (1 << (8 * width)) - 1
    return int.from_bytes((val & mask).to_bytes(width, "little"), "big")


def bswap_16(val: int) -> int:
    """Reverse the bytes of a 16-bit value."""
    return _bswap(val, 2)


def bswap_32(val: int) -> int:
    """Reverse the bytes of a 32-bit value."""
    return _bswap(val, 4)


def bswap_64(val: int) -> int:
    """Reverse the bytes of a 64-bit value."""
    return _bswap(val, 8)


def _decode(data: bytes, width: int, order: str) -> int:
    raw = bytes(data)
    if len(raw) != width:
        raise ValueError(f"expected {width} bytes, got {len(raw)}")
    return int.from_bytes(raw, order)


def _encode(val: int, width: int, order: str) -> bytes:
    mask = (1 << (8 * width)) - 1
    return (val & mask).to_bytes(width, order)


def le16_to_cpu(data: bytes) -> int:
    """Decode a 2-byte little-endian value."""
    return _decode(data, 2, "little")


def le32_to_cpu(data: bytes) -> int:
    """Decode a 4-byte little-endian value."""
    return _decode(data, 4, "little")


def le64_to_cpu(data: bytes) -> int:
    """Decode an 8-byte little-endian value."""
    return _decode(data, 8, "little")


def be16_to_cpu(data: bytes) -> int:
    """Decode a 2-byte big-endian value."""
    return _decode(data, 2, "big")


def be32_to_cpu(data: bytes) -> int:
    """Decode a 4-byte big-endian value."""
    return _decode(data, 4, "big")


def be64_to_cpu(data: bytes) -> int:
    """Decode an 8-byte big-endian value."""
    return _decode(data, 8, "big")


def cpu_to_le16(val: int) -> bytes:
    """Encode a value as 2 little-endian bytes."""
    return _encode(val, 2, "little")


def cpu_to_le32(val: int) -> bytes:
    """Encode a value as 4 little-endian bytes."""
    return _encode(val, 4, "little")


def cpu_to_le64(val: int) -> bytes:
    """Encode a value as 8 little-endian bytes."""
    return _encode(val, 8, "little")


def cpu_to_be16(val: int) -> bytes:
    """Encode a value as 2 big-endian bytes."""
    return _encode(val, 2, "big")


def cpu_to_be32(val: int) -> bytes:
    """Encode a value as 4 big-endian bytes."""
    return _encode(val, 4, "big")


def cpu_to_be64(val: int) -> bytes:
    """Encode a value as 8 big-endian bytes."""
    return _encode(val, 8, "big")