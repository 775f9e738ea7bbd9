"""
Standard normal pseudorandom number generators.
"""
from .box_muller import BoxMullerNormal
from .mt19937_normal import MT19937Normal, create_state, normalize_seed, verify_state

__all__ = ['BoxMullerNormal', 'MT19937Normal', 'create_state', 'normalize_seed', 'verify_state']
