"""
Diagnostics comparing generated samples against the Cauchy distribution.
"""
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

DEFAULT_PROBS = (0.05, 0.1, 0.25, 0.5, 0.75, 0.9, 0.95)


def draw(generator, size, x0=None, gamma=None):
    """
    Draw `size` samples into an array.
    
    `x0` and `gamma` are passed on every call when given (unbound generators).
    """
    args = () if x0 is None else (x0, gamma)
    return np.array([generator(*args) for _ in range(size)], dtype=np.float64)


def cauchy_pdf(x, x0=0.0, gamma=1.0):
    z = (np.asarray(x, dtype=np.float64) - x0) / gamma
    return 1.0 / (np.pi * gamma * (1.0 + z * z))


def cauchy_cdf(x, x0=0.0, gamma=1.0):
    return 0.5 + np.arctan((np.asarray(x, dtype=np.float64) - x0) / gamma) / np.pi


def cauchy_ppf(p, x0=0.0, gamma=1.0):
    """Inverse CDF."""
    return x0 + gamma * np.tan(np.pi * (np.asarray(p, dtype=np.float64) - 0.5))


def quantile_table(samples, x0=0.0, gamma=1.0, probs=DEFAULT_PROBS):
    """
    Compare empirical and theoretical quantiles.
    
    Parameters:
    -----------
    samples : array-like
        Generated values
    x0 : float
        Location parameter
    gamma : float
        Scale parameter
    probs : sequence of float
        Probabilities in (0, 1)
        
    Returns:
    --------
    DataFrame : columns prob, empirical, theoretical, abs_error
    """
    samples = np.asarray(samples, dtype=np.float64)
    probs = np.asarray(probs, dtype=np.float64)
    df = pd.DataFrame({
        'prob': probs,
        'empirical': np.quantile(samples, probs),
        'theoretical': cauchy_ppf(probs, x0, gamma),
    })
    df['abs_error'] = (df['empirical'] - df['theoretical']).abs()
    return df


def plot_samples(samples, x0=0.0, gamma=1.0, ax=None, bins=60, tail=0.02):
    """
    Plot a density histogram of the central samples with the theoretical pdf.
    
    Heavy tails are clipped at the `tail` and `1 - tail` quantiles; bar heights
    are normalized by the total sample count so they match the pdf.
    """
    samples = np.asarray(samples, dtype=np.float64)
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))

    lo, hi = cauchy_ppf([tail, 1.0 - tail], x0, gamma)
    edges = np.linspace(lo, hi, bins + 1)
    counts, _ = np.histogram(samples, bins=edges)
    widths = np.diff(edges)
    density = counts / (samples.size * widths)

    ax.bar(edges[:-1], density, widths, align='edge', alpha=0.6,
           edgecolor='black', linewidth=0.5, label='samples')
    xs = np.linspace(lo, hi, 400)
    ax.plot(xs, cauchy_pdf(xs, x0, gamma), color='#d62728', linewidth=2, label='pdf')
    ax.set_xlabel('x')
    ax.set_ylabel('density')
    ax.set_title(f'Cauchy(x0={x0}, gamma={gamma})', fontweight='bold')
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax
