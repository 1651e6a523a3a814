"""Errors raised by the cryptographic primitives."""


class CryptoError(Exception):
    """Base class for errors reported by the primitives."""


class IncorrectInputLength(CryptoError):
    """Raised when an input does not have an acceptable length."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"input length is wrong: {length}")


class NotPrimeOrder(CryptoError):
    """Raised when a group element is not of prime order."""

    def __init__(self) -> None:
        super().__init__("element is not prime order")