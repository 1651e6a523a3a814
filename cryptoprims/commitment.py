"""Pedersen, compressed Pedersen and BLAKE2s commitment schemes."""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass, field

from .curves import EdwardsPoint, TwistedEdwardsCurve
from .errors import IncorrectInputLength
from .injective_map import TECompressor
from .pedersen import Parameters, PedersenCRH, Window
from .schemes import CommitmentScheme


@dataclass
class CommitmentParameters:
    """Generators for the message windows plus powers of the blinding generator."""

    randomness_generator: list[EdwardsPoint]
    generators: list[list[EdwardsPoint]]


@dataclass(frozen=True)
class PedersenCommitment(CommitmentScheme):
    """Pedersen hash of the message blinded by a random multiple of a generator."""

    curve: TwistedEdwardsCurve
    window: Window

    @property
    def _crh(self) -> PedersenCRH:
        return PedersenCRH(self.curve, self.window)

    def setup(self, rng: random.Random) -> CommitmentParameters:
        crh = self._crh
        randomness_generator = crh.generator_powers(self.curve.scalar_bit_size(), rng)
        generators = crh.create_generators(rng)
        return CommitmentParameters(randomness_generator, generators)

    def random_randomness(self, rng: random.Random) -> int:
        return self.curve.random_scalar(rng)

    def commit(self, parameters: CommitmentParameters, data: bytes,
               randomness: int) -> EdwardsPoint:
        data = bytes(data)
        if len(data) * 8 > self.window.input_size_bits:
            raise IncorrectInputLength(len(data))
        if len(parameters.generators) != self.window.num_windows:
            raise ValueError(
                f"incorrect parameters with {len(parameters.generators)} windows "
                f"for {self.window.num_windows} windows"
            )
        result = self._crh.evaluate(Parameters(parameters.generators), data)
        scalar = randomness % self.curve.order
        for i, power in enumerate(parameters.randomness_generator):
            if (scalar >> i) & 1:
                result = result + power
        return result


@dataclass(frozen=True)
class PedersenCommCompressor(CommitmentScheme):
    """Pedersen commitment followed by an injective map to a field element."""

    curve: TwistedEdwardsCurve
    window: Window
    compressor: TECompressor = field(default_factory=TECompressor)

    @property
    def _commitment(self) -> PedersenCommitment:
        return PedersenCommitment(self.curve, self.window)

    def setup(self, rng: random.Random) -> CommitmentParameters:
        return self._commitment.setup(rng)

    def commit(self, parameters: CommitmentParameters, data: bytes, randomness: int) -> int:
        point = self._commitment.commit(parameters, data, randomness)
        return self.compressor.injective_map(point)


class Blake2sCommitment(CommitmentScheme):
    """BLAKE2s-256 of the message followed by 32 bytes of randomness."""

    RANDOMNESS_SIZE = 32

    def setup(self, rng: random.Random) -> None:
        return None

    def commit(self, parameters: None, data: bytes, randomness: bytes) -> bytes:
        randomness = bytes(randomness)
        if len(randomness) != self.RANDOMNESS_SIZE:
            raise IncorrectInputLength(len(randomness))
        h = hashlib.blake2s()
        h.update(bytes(data))
        h.update(randomness)
        return h.digest()