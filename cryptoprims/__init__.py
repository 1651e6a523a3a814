"""Twisted Edwards curves, Pedersen and Bowe-Hopwood hashes, commitments, SHA-256 and scheme interfaces."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "curves",
    "schemes",
    "pedersen",
    "bitops",
    "bowe_hopwood",
    "injective_map",
    "commitment",
    "sha256",
]