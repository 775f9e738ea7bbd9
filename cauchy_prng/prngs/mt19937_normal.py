"""
Standard normal pseudorandom number generator over a Mersenne Twister state buffer.

The complete generator state lives in a ``numpy.uint32`` array laid out as

    [version, num_sections, 624, key[0..623], 1, pos, seed_length, seed...]

Every draw loads the buffer into a numpy ``MT19937`` bit generator, draws a
standard normal variate with ``Generator.standard_normal`` (ziggurat), and
writes the advanced key and position back into the same buffer.  Generators
that hold the same buffer therefore advance each other.
"""
import logging
import numbers

import numpy as np

from ..errors import InvalidOptionsError, InvalidStateError
from ..utils.typedarray import typedarray_to_json

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF

STATE_ARRAY_VERSION = 1
NUM_STATE_SECTIONS = 3
N = 624  # MT19937 key length

# Buffer offsets
KEY_OFFSET = 3
POS_SECTION_OFFSET = KEY_OFFSET + N
POS_OFFSET = POS_SECTION_OFFSET + 1
SEED_SECTION_OFFSET = POS_OFFSET + 1
SEED_OFFSET = SEED_SECTION_OFFSET + 1


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def normalize_seed(seed):
    """
    Check a user supplied seed.
    
    Parameters:
    -----------
    seed : int or sequence of int
        Positive 32-bit integer, or non-empty sequence of unsigned 32-bit integers
        
    Returns:
    --------
    int or list : seed in the form accepted by ``numpy.random.RandomState``
    """
    if _is_integer(seed):
        if not 1 <= seed <= UINT32_MAX:
            raise InvalidOptionsError(
                f"invalid option. `seed` option must be a positive integer less than or equal to {UINT32_MAX}. Option: `{seed!r}`."
            )
        return int(seed)
    if isinstance(seed, (list, tuple, np.ndarray)):
        values = list(np.asarray(seed).ravel()) if isinstance(seed, np.ndarray) else list(seed)
        if not values or not all(_is_integer(v) and 0 <= v <= UINT32_MAX for v in values):
            raise InvalidOptionsError(
                f"invalid option. `seed` option must be a non-empty sequence of unsigned 32-bit integers. Option: `{seed!r}`."
            )
        # A list, not an array: RandomState squeezes one-element arrays to a scalar
        return [int(v) for v in values]
    raise InvalidOptionsError(
        f"invalid option. `seed` option must be either a positive integer or a sequence of integers. Option: `{seed!r}`."
    )


def random_seed():
    """Draw a positive 32-bit seed from OS entropy."""
    return max(int(np.random.SeedSequence().generate_state(1)[0]), 1)


def create_state(seed):
    """
    Build a state buffer from a normalized seed.
    
    An integer seed uses MT19937 ``init_genrand``; an array seed uses
    ``init_by_array``, following numpy's legacy seeding.
    """
    mt_state = np.random.RandomState(seed).get_state(legacy=False)['state']
    seed_arr = np.atleast_1d(np.asarray(seed, dtype=np.uint32))

    state = np.empty(SEED_OFFSET + seed_arr.size, dtype=np.uint32)
    state[0] = STATE_ARRAY_VERSION
    state[1] = NUM_STATE_SECTIONS
    state[2] = N
    state[KEY_OFFSET:POS_SECTION_OFFSET] = mt_state['key']
    state[POS_SECTION_OFFSET] = 1
    state[POS_OFFSET] = mt_state['pos']
    state[SEED_SECTION_OFFSET] = seed_arr.size
    state[SEED_OFFSET:] = seed_arr
    return state


def verify_state(state):
    """Raise `InvalidStateError` unless `state` is a well-formed state buffer."""
    if not isinstance(state, np.ndarray) or state.dtype != np.uint32 or state.ndim != 1:
        raise InvalidStateError(
            f"invalid argument. State must be a one-dimensional uint32 array. Value: `{state!r}`."
        )
    if state.size <= SEED_OFFSET:
        raise InvalidStateError(
            f"invalid argument. State has insufficient length. Length: `{state.size}`."
        )
    if state[0] != STATE_ARRAY_VERSION:
        raise InvalidStateError(
            f"invalid argument. State array has an incompatible schema version. Expected: `{STATE_ARRAY_VERSION}`. Actual: `{state[0]}`."
        )
    if state[1] != NUM_STATE_SECTIONS:
        raise InvalidStateError(
            f"invalid argument. State array has an incompatible number of sections. Expected: `{NUM_STATE_SECTIONS}`. Actual: `{state[1]}`."
        )
    if state[2] != N:
        raise InvalidStateError(
            f"invalid argument. State array has an incompatible state length. Expected: `{N}`. Actual: `{state[2]}`."
        )
    if state[POS_SECTION_OFFSET] != 1 or state[POS_OFFSET] > N:
        raise InvalidStateError(
            "invalid argument. State array has an invalid position section."
        )
    seed_length = int(state[SEED_SECTION_OFFSET])
    if seed_length == 0 or state.size != SEED_OFFSET + seed_length:
        raise InvalidStateError(
            f"invalid argument. State array length is inconsistent with its seed length. Seed length: `{seed_length}`. Length: `{state.size}`."
        )


class MT19937Normal:
    """
    Standard normal generator with an inspectable, replaceable uint32 state.
    
    Parameters:
    -----------
    seed : int or sequence of int, optional
        Generator seed, ignored when `state` is provided
    state : ndarray, optional
        State buffer to start from
    copy : bool
        Whether to copy a provided `state`; when False the buffer is shared
    """

    NAME = 'mt19937-normal'

    def __init__(self, seed=None, state=None, copy=True):
        self._copy = copy
        self._shared = False
        if state is not None:
            verify_state(state)
            if copy:
                self._state = state.copy()
            else:
                self._state = state
                self._shared = True
        else:
            seed = random_seed() if seed is None else normalize_seed(seed)
            self._state = create_state(seed)
        self._bitgen = np.random.MT19937(0)
        self._generator = np.random.Generator(self._bitgen)

    def __call__(self):
        state = self._state
        self._bitgen.state = {
            'bit_generator': 'MT19937',
            'state': {
                'key': state[KEY_OFFSET:POS_SECTION_OFFSET],
                'pos': int(state[POS_OFFSET]),
            },
        }
        value = self._generator.standard_normal()
        advanced = self._bitgen.state['state']
        state[KEY_OFFSET:POS_SECTION_OFFSET] = advanced['key']
        state[POS_OFFSET] = advanced['pos']
        return float(value)

    @property
    def seed(self):
        return self._state[SEED_OFFSET:].copy()

    @property
    def seed_length(self):
        return int(self._state[SEED_SECTION_OFFSET])

    @property
    def state(self):
        return self._state.copy()

    @state.setter
    def state(self, s):
        verify_state(s)
        if self._copy is False:
            if self._shared and s.size == self._state.size:
                # Update the shared buffer in place
                self._state[:] = s
            else:
                self._state = s
                self._shared = True
                logger.debug("Rebound %s to a new shared state buffer (length %d)", self.NAME, s.size)
        else:
            if s.size != self._state.size:
                self._state = np.empty_like(s)
            self._state[:] = s

    @property
    def state_length(self):
        return int(self._state.size)

    @property
    def byte_length(self):
        return int(self._state.nbytes)

    def serialize(self):
        return {
            'type': 'PRNG',
            'name': self.NAME,
            'state': typedarray_to_json(self._state),
            'params': [],
        }
