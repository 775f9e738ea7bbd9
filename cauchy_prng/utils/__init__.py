"""
Sampling and validation helpers for the Cauchy distribution.
"""
from .cauchy import cauchy, cauchy_unbound
from .validate import is_number, validate

__all__ = ['cauchy', 'cauchy_unbound', 'is_number', 'validate']
