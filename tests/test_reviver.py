import json

import numpy as np
import pytest

from cauchy_prng import Cauchy, InvalidStateError, factory, revive
from cauchy_prng.reviver import json_to_typedarray, typedarray_to_json


def test_revive_bound_generator_continues_sequence():
    rand = factory(1.5, 0.25, seed=808)
    for _ in range(3):
        rand()
    data = json.loads(json.dumps(rand.serialize()))
    copy = revive(data)
    assert isinstance(copy, Cauchy)
    assert copy.x0 == 1.5 and copy.gamma == 0.25
    assert [copy() for _ in range(25)] == [rand() for _ in range(25)]


def test_revive_unbound_generator():
    rand = factory(seed=[9, 8, 7])
    copy = revive(rand.serialize())
    assert not copy.bound
    assert copy.seed.tolist() == [9, 8, 7]
    assert copy(0.0, 3.0) == rand(0.0, 3.0)


@pytest.mark.parametrize("data", [
    None,
    {'type': 'PRNG', 'name': 'normal', 'state': {}, 'params': []},
    {'type': 'Function', 'name': 'cauchy', 'state': {}, 'params': []},
    {'type': 'PRNG', 'name': 'cauchy', 'state': [1, 2, 3], 'params': []},
    {'type': 'PRNG', 'name': 'cauchy', 'state': {'type': 'Uint32Array', 'data': [1, 2]}, 'params': []},
    {'type': 'PRNG', 'name': 'cauchy', 'state': {'type': 'Uint32Array', 'data': [-1]}, 'params': []},
    {'type': 'PRNG', 'name': 'cauchy', 'state': {'type': 'Uint32Array', 'data': 5}, 'params': []},
])
def test_revive_rejects_malformed_input(data):
    with pytest.raises(InvalidStateError):
        revive(data)


def test_revive_rejects_bad_params():
    data = factory(seed=1).serialize()
    data['params'] = [1.0]
    with pytest.raises(InvalidStateError):
        revive(data)


def test_typedarray_json():
    arr = np.array([0, 1, 2**32 - 1], dtype=np.uint32)
    obj = typedarray_to_json(arr)
    assert obj == {'type': 'Uint32Array', 'data': [0, 1, 4294967295]}
    back = json_to_typedarray(obj)
    assert back.dtype == np.uint32
    assert np.array_equal(back, arr)


@pytest.mark.parametrize("params", [None, 3.0, "ab"])
def test_revive_rejects_non_sequence_params(params):
    data = factory(seed=1).serialize()
    data['params'] = params
    with pytest.raises(InvalidStateError):
        revive(data)
