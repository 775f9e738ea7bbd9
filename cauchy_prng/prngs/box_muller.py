"""
Standard normal generator driven by an external uniform generator.
"""
import math


class BoxMullerNormal:
    """
    Deterministic normal via Box-Muller transform over a caller supplied
    uniform generator on [0, 1).
    
    The uniform source is opaque, so the state accessors read as None and
    state assignment is ignored.
    """

    NAME = 'box-muller'

    def __init__(self, prng):
        self.PRNG = prng

    def __call__(self):
        u1 = self.PRNG()
        u2 = self.PRNG()
        # 1 - u1 lies in (0, 1]
        r = math.sqrt(-2.0 * math.log(1.0 - u1))
        return r * math.cos(2.0 * math.pi * u2)

    seed = None
    seed_length = None
    state_length = None
    byte_length = None

    @property
    def state(self):
        return None

    @state.setter
    def state(self, s):
        pass

    def serialize(self):
        return None
