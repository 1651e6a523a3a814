"""Bowe-Hopwood variant of the Pedersen hash over twisted Edwards curves.

Input bits are grouped into 3-bit signed digits, each encoding one of
{±1, ±2, ±3, ±4} times a generator, which packs more input into each window.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from .curves import EdwardsPoint, TwistedEdwardsCurve
from .errors import IncorrectInputLength
from .pedersen import Parameters, Window, _chunks, bytes_to_bits
from .schemes import CRHScheme, TwoToOneCRHScheme

CHUNK_SIZE = 3


def _encode_chunk(chunk_bits, generator: EdwardsPoint) -> EdwardsPoint:
    encoded = generator
    if chunk_bits[0]:
        encoded = encoded + generator
    if chunk_bits[1]:
        encoded = encoded + generator.double()
    if chunk_bits[2]:
        encoded = -encoded
    return encoded


@dataclass(frozen=True)
class BoweHopwoodCRH(CRHScheme):
    """Bowe-Hopwood-Pedersen hash returning the x coordinate of the sum."""

    curve: TwistedEdwardsCurve
    window: Window

    @property
    def input_size_bits(self) -> int:
        return self.window.input_size_bits * CHUNK_SIZE

    def create_generators(self, rng: random.Random) -> list[list[EdwardsPoint]]:
        """One random base per window, followed by successive multiples by 16."""
        generators = []
        for _ in range(self.window.num_windows):
            segment = []
            base = self.curve.random_point(rng)
            for _ in range(self.window.window_size):
                segment.append(base)
                for _ in range(4):
                    base = base.double()
            generators.append(segment)
        return generators

    def max_window_size(self) -> int:
        """Largest number of chunks per window keeping scalars below (r-1)/2."""
        upper_limit = (self.curve.order - 1) // 2
        count = 0
        bound = 2
        while bound < upper_limit:
            bound <<= 4
            count += 1
        return count

    def setup(self, rng: random.Random) -> Parameters:
        maximum = self.max_window_size()
        if self.window.window_size > maximum:
            raise ValueError(
                "Bowe-Hopwood-PedersenCRH hash must have a window size resulting in "
                f"scalars < (p-1)/2, maximum segment size is {maximum}"
            )
        return Parameters(self.create_generators(rng))

    def _check_parameters(self, parameters: Parameters) -> None:
        w = self.window
        if len(parameters.generators) != w.num_windows:
            raise ValueError(
                f"incorrect parameters of size {len(parameters.generators)} for window "
                f"params {w.window_size}x{w.num_windows}x{CHUNK_SIZE}"
            )
        for segment in parameters.generators:
            if len(segment) != w.window_size:
                raise ValueError(
                    f"incorrect segment of size {len(segment)} for window size {w.window_size}"
                )

    def evaluate(self, parameters: Parameters, data: bytes) -> int:
        data = bytes(data)
        if len(data) * 8 > self.input_size_bits:
            raise IncorrectInputLength(len(data))
        bits = bytes_to_bits(data)
        remainder = len(bits) % CHUNK_SIZE
        if remainder:
            bits.extend([False] * (CHUNK_SIZE - remainder))
        self._check_parameters(parameters)

        result = self.curve.identity()
        segment_bits = self.window.window_size * CHUNK_SIZE
        for segment, generators in zip(_chunks(bits, segment_bits), parameters.generators):
            for chunk, generator in zip(_chunks(segment, CHUNK_SIZE), generators):
                result = result + _encode_chunk(chunk, generator)
        return result.x


@dataclass(frozen=True)
class BoweHopwoodTwoToOneCRH(TwoToOneCRHScheme):
    """Bowe-Hopwood hash of two equal-length halves laid side by side."""

    curve: TwistedEdwardsCurve
    window: Window

    @property
    def _crh(self) -> BoweHopwoodCRH:
        return BoweHopwoodCRH(self.curve, self.window)

    @property
    def input_size_bits(self) -> int:
        return self.window.input_size_bits

    @property
    def half_input_size_bits(self) -> int:
        return self.input_size_bits // 2

    def setup(self, rng: random.Random) -> Parameters:
        return self._crh.setup(rng)

    def evaluate(self, parameters: Parameters, left: bytes, right: bytes) -> int:
        left, right = bytes(left), bytes(right)
        if len(left) != len(right):
            raise ValueError("left and right input should be of equal length")
        if len(left) * 8 > self.half_input_size_bits:
            raise IncorrectInputLength(len(left))
        size = self.input_size_bits // 8
        buffer = (left + right)[:size].ljust(size, b"\0")
        return self._crh.evaluate(parameters, buffer)

    def compress(self, parameters: Parameters, left: int, right: int) -> int:
        width = self.curve.field_bytes
        return self.evaluate(
            parameters, left.to_bytes(width, "little"), right.to_bytes(width, "little")
        )