"""
Exception types raised while constructing and configuring Cauchy generators.
"""


class CauchyError(Exception):
    """Base class for all errors raised by this package."""


class InvalidLocationError(CauchyError, TypeError):
    """Location parameter is not a number, or is NaN."""


class InvalidScaleError(CauchyError, TypeError):
    """Scale parameter is not a positive number."""


class InvalidOptionsError(CauchyError, TypeError):
    """Options argument is not a configuration structure or holds a bad value."""


class InvalidStateError(CauchyError, ValueError):
    """State snapshot is not a well-formed state buffer."""
