"""
Cauchy distribution sampling functions.
"""
import math

import numpy as np


def cauchy(rnorm, x0, gamma):
    """
    Generate a random sample from Cauchy distribution.
    
    The ratio of two independent standard normal variates is standard
    Cauchy; the result is shifted by `x0` and scaled by `gamma`.
    
    Parameters:
    -----------
    rnorm : callable
        Standard normal pseudorandom number generator
    x0 : float
        Location parameter
    gamma : float
        Scale parameter
        
    Returns:
    --------
    float : Random value from Cauchy distribution
    """
    n1 = rnorm()
    n2 = rnorm()
    # n2 == 0.0 yields +-inf or NaN
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        ratio = np.float64(n1) / np.float64(n2)
        return float(x0 + gamma * ratio)


def cauchy_unbound(rnorm, x0, gamma):
    """
    Generate a random sample from Cauchy distribution with per-call parameters.
    
    Returns NaN, without drawing, when `x0` or `gamma` is NaN or `gamma <= 0`.
    """
    if math.isnan(x0) or math.isnan(gamma) or gamma <= 0.0:
        return math.nan
    return cauchy(rnorm, x0, gamma)
