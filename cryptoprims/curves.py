"""Twisted Edwards curves over prime fields, with affine point arithmetic."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


def _sqrt_mod(n: int, p: int) -> int | None:
    """Return a square root of n modulo the odd prime p, or None if none exists."""
    n %= p
    if n == 0:
        return 0
    if pow(n, (p - 1) // 2, p) != 1:
        return None
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1
    m, c, t, r = s, pow(z, q, p), pow(n, q, p), pow(n, (q + 1) // 2, p)
    while t != 1:
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m, c = i, b * b % p
        t, r = t * c % p, r * b % p
    return r


@dataclass(frozen=True)
class TwistedEdwardsCurve:
    """The curve a*x^2 + y^2 = 1 + d*x^2*y^2 over the field of the given modulus."""

    name: str
    modulus: int
    a: int
    d: int
    order: int
    cofactor: int

    @property
    def field_bytes(self) -> int:
        return (self.modulus.bit_length() + 7) // 8

    def identity(self) -> EdwardsPoint:
        return EdwardsPoint(self, 0, 1)

    def is_on_curve(self, x: int, y: int) -> bool:
        p = self.modulus
        x2, y2 = x * x % p, y * y % p
        return (self.a * x2 + y2 - 1 - self.d * x2 * y2) % p == 0

    def point(self, x: int, y: int) -> EdwardsPoint:
        """Build a point, checking that it lies on the curve."""
        x %= self.modulus
        y %= self.modulus
        if not self.is_on_curve(x, y):
            raise ValueError(f"({x}, {y}) is not on curve {self.name}")
        return EdwardsPoint(self, x, y)

    def random_point(self, rng: random.Random) -> EdwardsPoint:
        """Sample a non-identity point of the prime-order subgroup."""
        p = self.modulus
        while True:
            y = rng.randrange(p)
            y2 = y * y % p
            denominator = (self.a - self.d * y2) % p
            if denominator == 0:
                continue
            x = _sqrt_mod((1 - y2) * pow(denominator, -1, p), p)
            if x is None:
                continue
            if rng.getrandbits(1):
                x = (-x) % p
            candidate = EdwardsPoint(self, x, y).mul(self.cofactor)
            if not candidate.is_identity():
                return candidate

    def random_scalar(self, rng: random.Random) -> int:
        return rng.randrange(self.order)

    def scalar_bit_size(self) -> int:
        return self.order.bit_length()


@dataclass(frozen=True)
class EdwardsPoint:
    """An affine point on a twisted Edwards curve."""

    curve: TwistedEdwardsCurve = field(repr=False)
    x: int
    y: int

    def __add__(self, other: EdwardsPoint) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        if other.curve != self.curve:
            raise ValueError("points lie on different curves")
        c = self.curve
        p = c.modulus
        x1y2 = self.x * other.y % p
        y1x2 = self.y * other.x % p
        x1x2 = self.x * other.x % p
        y1y2 = self.y * other.y % p
        dxy = c.d * x1x2 * y1y2 % p
        x3 = (x1y2 + y1x2) * pow((1 + dxy) % p, -1, p) % p
        y3 = (y1y2 - c.a * x1x2) * pow((1 - dxy) % p, -1, p) % p
        return EdwardsPoint(c, x3, y3)

    def __neg__(self) -> EdwardsPoint:
        return EdwardsPoint(self.curve, (-self.x) % self.curve.modulus, self.y)

    def __sub__(self, other: EdwardsPoint) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: int) -> EdwardsPoint:
        if not isinstance(scalar, int):
            return NotImplemented
        return self.mul(scalar)

    __rmul__ = __mul__

    def double(self) -> EdwardsPoint:
        return self + self

    def mul(self, scalar: int) -> EdwardsPoint:
        """Multiply by an integer scalar using double-and-add."""
        if scalar < 0:
            return (-self).mul(-scalar)
        result = self.curve.identity()
        addend = self
        while scalar:
            if scalar & 1:
                result = result + addend
            addend = addend.double()
            scalar >>= 1
        return result

    def is_identity(self) -> bool:
        return self.x == 0 and self.y == 1

    def to_uncompressed_bytes(self) -> bytes:
        """Serialise as x then y, each little-endian over the field width."""
        size = self.curve.field_bytes
        return self.x.to_bytes(size, "little") + self.y.to_bytes(size, "little")


_JUBJUB_Q = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
_JUBJUB = TwistedEdwardsCurve(
    name="jubjub",
    modulus=_JUBJUB_Q,
    a=_JUBJUB_Q - 1,
    d=(-10240 * pow(10241, -1, _JUBJUB_Q)) % _JUBJUB_Q,
    order=0x0E7DB4EA6533AFA906673B0101343B00A6682093CCC81082D0970E5ED6F72CB7,
    cofactor=8,
)


def jubjub() -> TwistedEdwardsCurve:
    """The Jubjub curve, defined over the BLS12-381 scalar field."""
    return _JUBJUB