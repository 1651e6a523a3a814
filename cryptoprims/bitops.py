"""Bit operations on 32-bit unsigned words."""

_MASK = 0xFFFFFFFF


def _check(value: int) -> int:
    if not 0 <= value <= _MASK:
        raise ValueError(f"{value} is not a 32-bit unsigned integer")
    return value


def rotr(value: int, by: int) -> int:
    """Rotate right by the given number of bits."""
    _check(value)
    by %= 32
    return ((value >> by) | (value << (32 - by))) & _MASK


def shr(value: int, by: int) -> int:
    """Shift right, filling with zeros; the shift must be below 32."""
    _check(value)
    if not 0 <= by < 32:
        raise ValueError(f"shift {by} out of range")
    return value >> by


def bitnot(value: int) -> int:
    return ~_check(value) & _MASK


def bitand(left: int, right: int) -> int:
    return _check(left) & _check(right)


def from_bytes_be(data: bytes) -> int:
    """Read a word from exactly four big-endian bytes."""
    if len(data) != 4:
        raise ValueError(f"expected 4 bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def to_bytes_be(value: int) -> bytes:
    return _check(value).to_bytes(4, "big")