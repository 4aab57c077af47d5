from __future__ import annotations


class ImpositionError(ValueError):
    """Bad imposition input; the message is safe to show to a user."""


class InvalidPageCount(ImpositionError):
    pass


class InvalidSignature(ImpositionError):
    pass


class InvalidRange(ImpositionError):
    pass


class UnrecognizedSignatureFormat(ImpositionError):
    pass


class InvalidOptions(ImpositionError):
    pass


class InternalInvariantViolation(RuntimeError):
    """Raised when an arithmetic guarantee of the imposition code does not hold."""
