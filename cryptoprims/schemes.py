"""Abstract interfaces for hash, commitment and encryption schemes."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any


class CRHScheme(ABC):
    """A collision-resistant hash with public parameters."""

    @abstractmethod
    def setup(self, rng: random.Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def evaluate(self, parameters: Any, data: Any) -> Any:
        """Hash the input under the given parameters."""


class TwoToOneCRHScheme(ABC):
    """A hash of two inputs, as used for inner Merkle-tree nodes."""

    @abstractmethod
    def setup(self, rng: random.Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def evaluate(self, parameters: Any, left: Any, right: Any) -> Any:
        """Hash two raw inputs."""

    @abstractmethod
    def compress(self, parameters: Any, left: Any, right: Any) -> Any:
        """Hash two earlier outputs of this scheme."""


class CommitmentScheme(ABC):
    """A commitment scheme with public parameters and blinding randomness."""

    @abstractmethod
    def setup(self, rng: random.Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def commit(self, parameters: Any, data: bytes, randomness: Any) -> Any:
        """Commit to data using the given randomness."""


class AsymmetricEncryptionScheme(ABC):
    """A public-key encryption scheme."""

    @abstractmethod
    def setup(self, rng: random.Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def keygen(self, parameters: Any, rng: random.Random) -> tuple[Any, Any]:
        """Return a (public key, secret key) pair."""

    @abstractmethod
    def encrypt(self, parameters: Any, public_key: Any, message: Any, randomness: Any) -> Any:
        """Encrypt a message under a public key."""

    @abstractmethod
    def decrypt(self, parameters: Any, secret_key: Any, ciphertext: Any) -> Any:
        """Decrypt a ciphertext with a secret key."""