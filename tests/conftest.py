import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from cauchy_prng import factory


@pytest.fixture
def snapshot():
    """State buffer of a freshly seeded generator."""
    return factory(seed=12345).state


@pytest.fixture(params=[0.0, -3.5, 1e6])
def x0(request):
    return request.param


@pytest.fixture(params=[0.5, 1.0, 20.0])
def gamma(request):
    return request.param


@pytest.fixture
def fixed_source():
    """Return a standard normal stand-in yielding the given values in order."""
    def make(values):
        it = iter(values)
        return lambda: next(it)
    return make


@pytest.fixture
def uniform():
    return np.random.default_rng(2024).random
