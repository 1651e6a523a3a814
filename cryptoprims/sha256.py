"""SHA-256 built on 32-bit word operations, and hash schemes based on it."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .bitops import bitand, bitnot, from_bytes_be, rotr, shr, to_bytes_be
from .schemes import CRHScheme, TwoToOneCRHScheme

_BLOCK_SIZE = 64
_WORD_MASK = 0xFFFFFFFF
_LENGTH_MASK = 0xFFFFFFFFFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_H = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A, 0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _add(*words: int) -> int:
    return sum(words) & _WORD_MASK


def _xor3(a: int, b: int, c: int) -> int:
    return a ^ b ^ c


def _compress(state: list[int], block: bytes) -> list[int]:
    """Run the compression function over one 64-byte block."""
    w = [from_bytes_be(block[i:i + 4]) for i in range(0, _BLOCK_SIZE, 4)]
    for i in range(16, 64):
        s0 = _xor3(rotr(w[i - 15], 7), rotr(w[i - 15], 18), shr(w[i - 15], 3))
        s1 = _xor3(rotr(w[i - 2], 17), rotr(w[i - 2], 19), shr(w[i - 2], 10))
        w.append(_add(w[i - 16], s0, w[i - 7], s1))

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        ch = bitand(e, f) ^ bitand(bitnot(e), g)
        ma = _xor3(bitand(a, b), bitand(a, c), bitand(b, c))
        s0 = _xor3(rotr(a, 2), rotr(a, 13), rotr(a, 22))
        s1 = _xor3(rotr(e, 6), rotr(e, 11), rotr(e, 25))
        t0 = _add(h, s1, ch, k, wi)
        t1 = _add(s0, ma)
        h, g, f, e = g, f, e, _add(d, t0)
        d, c, b, a = c, b, a, _add(t0, t1)

    return [_add(s, x) for s, x in zip(state, (a, b, c, d, e, f, g, h))]


class Sha256:
    """Incremental SHA-256 hasher."""

    def __init__(self) -> None:
        self._state = list(_H)
        self._completed_blocks = 0
        self._pending = bytearray()

    def _copy(self) -> Sha256:
        other = Sha256()
        other._state = list(self._state)
        other._completed_blocks = self._completed_blocks
        other._pending = bytearray(self._pending)
        return other

    def update(self, data: bytes | bytearray | Iterable[int]) -> None:
        """Consume data and update the internal state."""
        data = bytes(data)
        offset = 0
        if self._pending and len(self._pending) + len(data) >= _BLOCK_SIZE:
            offset = _BLOCK_SIZE - len(self._pending)
            block = bytes(self._pending) + data[:offset]
            self._state = _compress(self._state, block)
            self._completed_blocks += 1
            self._pending.clear()

        for start in range(offset, len(data), _BLOCK_SIZE):
            chunk = data[start:start + _BLOCK_SIZE]
            if len(chunk) == _BLOCK_SIZE:
                self._state = _compress(self._state, chunk)
                self._completed_blocks += 1
            else:
                self._pending.extend(chunk)

    def finalize(self) -> bytes:
        """Return the digest of everything consumed so far, leaving the hasher usable."""
        num_pending = len(self._pending)
        bit_length = (self._completed_blocks * 512 + num_pending * 8) & _LENGTH_MASK
        offset = 56 - num_pending if num_pending < 56 else 120 - num_pending
        padding = (b"\x80" + bytes(offset - 1)) + bit_length.to_bytes(8, "big")

        finished = self._copy()
        finished.update(padding)
        return b"".join(to_bytes_be(word) for word in finished._state)

    @classmethod
    def digest(cls, data: bytes | bytearray | Iterable[int]) -> bytes:
        """Hash data in one call."""
        hasher = cls()
        hasher.update(data)
        return hasher.finalize()


class Sha256CRH(CRHScheme):
    """SHA-256 as a parameterless collision-resistant hash."""

    def setup(self, rng: random.Random) -> None:
        return None

    def evaluate(self, parameters: None, data: bytes) -> bytes:
        return Sha256.digest(data)


class Sha256TwoToOneCRH(TwoToOneCRHScheme):
    """SHA-256 of the left input followed by the right input."""

    def setup(self, rng: random.Random) -> None:
        return None

    def evaluate(self, parameters: None, left: bytes, right: bytes) -> bytes:
        hasher = Sha256()
        hasher.update(left)
        hasher.update(right)
        return hasher.finalize()

    def compress(self, parameters: None, left: bytes, right: bytes) -> bytes:
        return self.evaluate(parameters, bytes(left), bytes(right))