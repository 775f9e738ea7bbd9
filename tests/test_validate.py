import math

import numpy as np
import pytest

from cauchy_prng import InvalidLocationError, InvalidScaleError, validate


@pytest.mark.parametrize("x0, gamma", [
    (0.0, 1.0),
    (-3.0, 0.5),
    (2, 3),
    (np.float64(1.5), np.float32(2.0)),
])
def test_valid_parameters(x0, gamma):
    assert validate(x0, gamma) is None


@pytest.mark.parametrize("x0", [math.nan, math.inf, -math.inf, "1.0", None, True, [0.0]])
def test_invalid_location(x0):
    with pytest.raises(InvalidLocationError):
        validate(x0, 1.0)


@pytest.mark.parametrize("gamma", [0.0, -1.0, math.nan, -math.inf, "2", None, False])
def test_invalid_scale(gamma):
    with pytest.raises(InvalidScaleError):
        validate(0.0, gamma)


def test_errors_are_type_errors():
    with pytest.raises(TypeError):
        validate(math.nan, 1.0)
    with pytest.raises(TypeError):
        validate(0.0, 0.0)
