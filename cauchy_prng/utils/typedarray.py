"""
JSON encoding of uint32 state buffers.
"""
import numpy as np

from ..errors import InvalidStateError

TYPE_NAME = 'Uint32Array'


def typedarray_to_json(arr):
    """Encode a uint32 array as ``{"type": "Uint32Array", "data": [...]}``."""
    return {'type': TYPE_NAME, 'data': [int(v) for v in arr]}


def json_to_typedarray(obj):
    """Decode the output of `typedarray_to_json` into a new uint32 array."""
    if not isinstance(obj, dict) or obj.get('type') != TYPE_NAME or 'data' not in obj:
        raise InvalidStateError(
            f"invalid argument. Must provide a serialized `{TYPE_NAME}`. Value: `{obj!r}`."
        )
    data = obj['data']
    if not isinstance(data, (list, tuple)):
        raise InvalidStateError(
            f"invalid argument. Serialized state data must be a list. Value: `{data!r}`."
        )
    if any(isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 0xFFFFFFFF for v in data):
        raise InvalidStateError(
            "invalid argument. Serialized state must contain unsigned 32-bit integers."
        )
    return np.array(data, dtype=np.uint32)
