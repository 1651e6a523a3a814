"""Injective maps from curve points to field elements, and Pedersen hashes using them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .curves import EdwardsPoint, TwistedEdwardsCurve
from .errors import NotPrimeOrder
from .pedersen import Parameters, PedersenCRH, PedersenTwoToOneCRH, Window
from .schemes import CRHScheme, TwoToOneCRHScheme


class TECompressor:
    """Maps a prime-order twisted Edwards point to its x coordinate."""

    def injective_map(self, point: EdwardsPoint) -> int:
        if not point.mul(point.curve.order).is_identity():
            raise NotPrimeOrder()
        return point.x


@dataclass(frozen=True)
class PedersenCRHCompressor(CRHScheme):
    """Pedersen hash followed by an injective map to a field element."""

    curve: TwistedEdwardsCurve
    window: Window
    compressor: TECompressor = field(default_factory=TECompressor)

    def setup(self, rng: random.Random) -> Parameters:
        return PedersenCRH(self.curve, self.window).setup(rng)

    def evaluate(self, parameters: Parameters, data: bytes) -> int:
        point = PedersenCRH(self.curve, self.window).evaluate(parameters, data)
        return self.compressor.injective_map(point)


@dataclass(frozen=True)
class PedersenTwoToOneCRHCompressor(TwoToOneCRHScheme):
    """Two-to-one Pedersen hash followed by an injective map to a field element."""

    curve: TwistedEdwardsCurve
    window: Window
    compressor: TECompressor = field(default_factory=TECompressor)

    @property
    def _crh(self) -> PedersenTwoToOneCRH:
        return PedersenTwoToOneCRH(self.curve, self.window)

    def setup(self, rng: random.Random) -> Parameters:
        return self._crh.setup(rng)

    def evaluate(self, parameters: Parameters, left: bytes, right: bytes) -> int:
        return self.compressor.injective_map(self._crh.evaluate(parameters, left, right))

    def compress(self, parameters: Parameters, left: int, right: int) -> int:
        width = self.curve.field_bytes
        return self.evaluate(
            parameters, left.to_bytes(width, "little"), right.to_bytes(width, "little")
        )