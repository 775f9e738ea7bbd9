import numpy as np
import pandas as pd
import pytest

from cauchy_prng import factory
from cauchy_prng.diagnostics import (
    cauchy_cdf,
    cauchy_pdf,
    cauchy_ppf,
    draw,
    plot_samples,
    quantile_table,
)


def test_draw_bound_and_unbound():
    bound = draw(factory(0.0, 1.0, seed=3), 50)
    unbound = draw(factory(seed=3), 50, 0.0, 1.0)
    assert bound.shape == (50,)
    assert np.array_equal(bound, unbound)


def test_distribution_functions():
    p = np.array([0.1, 0.5, 0.9])
    assert cauchy_cdf(cauchy_ppf(p, 2.0, 3.0), 2.0, 3.0) == pytest.approx(p)
    assert cauchy_ppf(0.5, 2.0, 3.0) == pytest.approx(2.0)
    assert cauchy_ppf(0.75, 2.0, 3.0) == pytest.approx(5.0)
    assert cauchy_pdf(0.0) == pytest.approx(1.0 / np.pi)


def test_quantile_table():
    samples = draw(factory(0.0, 1.0, seed=11), 10000)
    df = quantile_table(samples, 0.0, 1.0)
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ['prob', 'empirical', 'theoretical', 'abs_error']
    median = df.loc[df['prob'] == 0.5].iloc[0]
    assert median['theoretical'] == pytest.approx(0.0, abs=1e-12)
    assert median['abs_error'] < 0.15


def test_plot_samples():
    import matplotlib.pyplot as plt

    samples = draw(factory(1.0, 0.5, seed=5), 500)
    ax = plot_samples(samples, 1.0, 0.5, bins=20)
    assert len(ax.patches) == 20
    assert len(ax.get_lines()) == 1
    plt.close(ax.figure)
