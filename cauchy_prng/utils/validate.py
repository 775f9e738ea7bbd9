"""
Parameter validation for the Cauchy distribution.
"""
import math
import numbers

from ..errors import InvalidLocationError, InvalidScaleError


def is_number(value):
    """Return True for real numbers, excluding booleans."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate(x0, gamma):
    """
    Validate distribution parameters.
    
    Parameters:
    -----------
    x0 : float
        Location parameter
    gamma : float
        Scale parameter
        
    Raises:
    -------
    InvalidLocationError : if `x0` is not a finite number
    InvalidScaleError : if `gamma` is not a positive number
    """
    if not is_number(x0) or not math.isfinite(x0):
        raise InvalidLocationError(
            f"invalid argument. First argument must be a finite number. Value: `{x0!r}`."
        )
    if not is_number(gamma) or math.isnan(gamma) or gamma <= 0.0:
        raise InvalidScaleError(
            f"invalid argument. Second argument must be a positive number. Value: `{gamma!r}`."
        )
