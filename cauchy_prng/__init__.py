"""
Pseudorandom numbers drawn from a Cauchy distribution.
"""
from .errors import (
    CauchyError,
    InvalidLocationError,
    InvalidOptionsError,
    InvalidScaleError,
    InvalidStateError,
)
from .factory import BaseCauchy, Cauchy, ExternalCauchy, factory
from .options import Options
from .reviver import revive
from .utils.validate import validate

cauchy = factory()

__all__ = [
    'cauchy',
    'factory',
    'revive',
    'validate',
    'Options',
    'BaseCauchy',
    'Cauchy',
    'ExternalCauchy',
    'CauchyError',
    'InvalidLocationError',
    'InvalidOptionsError',
    'InvalidScaleError',
    'InvalidStateError',
]
