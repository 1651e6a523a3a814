"""Pedersen collision-resistant hash over a twisted Edwards curve."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .curves import EdwardsPoint, TwistedEdwardsCurve
from .errors import IncorrectInputLength
from .schemes import CRHScheme, TwoToOneCRHScheme


def bytes_to_bits(data: bytes) -> list[bool]:
    """Expand bytes into bits, least significant bit of each byte first."""
    return [bool((byte >> i) & 1) for byte in data for i in range(8)]


def _chunks(items: Sequence, size: int) -> Iterator[Sequence]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


@dataclass(frozen=True)
class Window:
    """Window shape: the input is hashed as num_windows windows of window_size bits."""

    window_size: int
    num_windows: int

    def __post_init__(self) -> None:
        if self.window_size <= 0 or self.num_windows <= 0:
            raise ValueError("window size and number of windows must be positive")

    @property
    def input_size_bits(self) -> int:
        return self.window_size * self.num_windows


@dataclass
class Parameters:
    """Public parameters: one list of generator powers per window."""

    generators: list[list[EdwardsPoint]]

    def __str__(self) -> str:
        lines = ["Pedersen Hash Parameters {"]
        lines += [f"\t  Generator {i}: {g!r}" for i, g in enumerate(self.generators)]
        lines.append("}")
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class PedersenCRH(CRHScheme):
    """Pedersen hash of byte strings up to the window capacity."""

    curve: TwistedEdwardsCurve
    window: Window

    @property
    def input_size_bits(self) -> int:
        return self.window.input_size_bits

    def create_generators(self, rng: random.Random) -> list[list[EdwardsPoint]]:
        return [
            self.generator_powers(self.window.window_size, rng)
            for _ in range(self.window.num_windows)
        ]

    def generator_powers(self, num_powers: int, rng: random.Random) -> list[EdwardsPoint]:
        """Return base, 2*base, 4*base, ... for a random base point."""
        powers = []
        base = self.curve.random_point(rng)
        for _ in range(num_powers):
            powers.append(base)
            base = base.double()
        return powers

    def setup(self, rng: random.Random) -> Parameters:
        return Parameters(self.create_generators(rng))

    def evaluate(self, parameters: Parameters, data: bytes) -> EdwardsPoint:
        data = bytes(data)
        limit = self.input_size_bits
        if len(data) * 8 > limit:
            raise IncorrectInputLength(len(data))
        if len(data) * 8 < limit:
            data = data.ljust(limit // 8, b"\0")
        if len(parameters.generators) != self.window.num_windows:
            raise ValueError(
                f"incorrect parameters with {len(parameters.generators)} windows "
                f"for window params {self.window.window_size}x{self.window.num_windows}"
            )
        result = self.curve.identity()
        for segment, powers in zip(_chunks(bytes_to_bits(data), self.window.window_size),
                                   parameters.generators):
            for bit, base in zip(segment, powers):
                if bit:
                    result = result + base
        return result


@dataclass(frozen=True)
class PedersenTwoToOneCRH(TwoToOneCRHScheme):
    """Pedersen hash of two equal-length halves laid side by side."""

    curve: TwistedEdwardsCurve
    window: Window

    @property
    def _crh(self) -> PedersenCRH:
        return PedersenCRH(self.curve, self.window)

    @property
    def half_input_size_bits(self) -> int:
        return self.window.input_size_bits // 2

    def setup(self, rng: random.Random) -> Parameters:
        return self._crh.setup(rng)

    def evaluate(self, parameters: Parameters, left: bytes, right: bytes) -> EdwardsPoint:
        left, right = bytes(left), bytes(right)
        if len(left) != len(right):
            raise ValueError("left and right input should be of equal length")
        if len(left) * 8 > self.half_input_size_bits:
            raise IncorrectInputLength(len(left))
        size = (2 * self.half_input_size_bits) // 8
        buffer = (left + right)[:size].ljust(size, b"\0")
        return self._crh.evaluate(parameters, buffer)

    def compress(self, parameters: Parameters, left: EdwardsPoint,
                 right: EdwardsPoint) -> EdwardsPoint:
        return self.evaluate(
            parameters, left.to_uncompressed_bytes(), right.to_uncompressed_bytes()
        )