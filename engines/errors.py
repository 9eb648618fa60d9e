"""Exceptions raised by the compression engines."""


class CompressionError(Exception):
    """Base class for failures inside a compression call."""


class InvalidImageError(CompressionError, ValueError):
    """Input image is malformed or empty."""


class FactorizationError(CompressionError):
    """Low-rank factorization could not be completed."""
