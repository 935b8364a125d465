"""
Shifted geometric distribution.

The probability distribution of the number X of Bernoulli trials needed to
get one success, supported on the set {1, 2, 3, ...}. The count includes the
successful trial, as opposed to the geometric distribution on {0, 1, 2, ...}
counting failures before the first success.

See https://en.wikipedia.org/wiki/Geometric_distribution

Notes
-----
Every function validates its arguments against a module-level limits table
before evaluating a closed-form expression. ``cdf`` accepts ``k = 0`` ("no
trials observed yet"), so it uses its own table instead of the one of ``pmf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from pysatl_geometric.limits import check_limits
from pysatl_geometric.types import Interval1D

if TYPE_CHECKING:
    from pysatl_geometric.types import Limits, Number

PMF_LIMITS: Limits = MappingProxyType(
    {
        "k": Interval1D.from_notation("[1,∞)"),
        "p": Interval1D.from_notation("(0,1]"),
    }
)
"""Domain of :func:`pmf`: k ∈ [1,∞), p ∈ (0,1]."""

CDF_LIMITS: Limits = MappingProxyType(
    {
        "k": Interval1D.from_notation("[0,∞)"),
        "p": Interval1D.from_notation("(0,1]"),
    }
)
"""Domain of :func:`cdf`: k ∈ [0,∞), p ∈ (0,1]."""

PARAMETER_LIMITS: Limits = MappingProxyType(
    {
        "p": Interval1D.from_notation("(0,1]"),
    }
)
"""Domain of the success probability alone, used by the summary statistics."""


def _as_trials(k: object) -> int:
    # bool is an int subclass but never a trial count
    if isinstance(k, bool) or not isinstance(k, int | np.integer):
        raise TypeError(f"Number of trials must be an integer, got {type(k).__name__}")
    return int(k)


def _as_probability(p: object) -> float:
    if isinstance(p, bool) or not isinstance(p, int | float | np.integer | np.floating):
        raise TypeError(f"Success probability must be a real number, got {type(p).__name__}")
    return float(p)


def pmf(k: int, p: Number) -> float:
    """
    Probability mass function.

    pmf = (1 - p)ᵏ⁻¹ p

    Parameters
    ----------
    k : int
        Number of trials, k ≥ 1.
    p : float
        Success probability, 0 < p ≤ 1.

    Returns
    -------
    float
        Probability that the first success occurs exactly on trial ``k``.

    Raises
    ------
    DomainValidationError
        If ``k < 1`` or ``p`` is outside (0, 1].
    TypeError
        If ``k`` is not an integer or ``p`` is not a real number.
    """
    trials = _as_trials(k)
    prob = _as_probability(p)
    check_limits(PMF_LIMITS, {"k": trials, "p": prob})

    return (1.0 - prob) ** (trials - 1) * prob


def cdf(k: int, p: Number) -> float:
    """
    Cumulative distribution function.

    cdf = 1 - (1 - p)ᵏ

    Parameters
    ----------
    k : int
        Number of trials, k ≥ 0.
    p : float
        Success probability, 0 < p ≤ 1.

    Returns
    -------
    float
        Probability that the first success occurs on or before trial ``k``.

    Raises
    ------
    DomainValidationError
        If ``k < 0`` or ``p`` is outside (0, 1].
    TypeError
        If ``k`` is not an integer or ``p`` is not a real number.
    """
    trials = _as_trials(k)
    prob = _as_probability(p)
    check_limits(CDF_LIMITS, {"k": trials, "p": prob})

    return 1.0 - (1.0 - prob) ** trials


def mean(p: Number) -> float:
    """Mean of the distribution, 1 / p."""
    prob = _as_probability(p)
    check_limits(PARAMETER_LIMITS, {"p": prob})
    return 1.0 / prob


def variance(p: Number) -> float:
    """Variance of the distribution, (1 - p) / p²."""
    prob = _as_probability(p)
    check_limits(PARAMETER_LIMITS, {"p": prob})
    return (1.0 - prob) / prob**2


def mode(p: Number) -> int:
    """Mode of the distribution, always the first trial."""
    check_limits(PARAMETER_LIMITS, {"p": _as_probability(p)})
    return 1


def median(p: Number) -> int:
    """
    Median of the distribution.

    The smallest number of trials k with cdf(k, p) ≥ 1/2, that is
    ⌈-1 / log₂(1 - p)⌉.

    Parameters
    ----------
    p : float
        Success probability, 0 < p ≤ 1.

    Returns
    -------
    int
        Median number of trials.
    """
    prob = _as_probability(p)
    check_limits(PARAMETER_LIMITS, {"p": prob})

    if prob == 1.0:
        return 1

    # log1p keeps tiny p away from log(1) == 0
    k = max(math.ceil(math.log1p(-0.5) / math.log1p(-prob)), 1)
    # ceil can overshoot by one when the ratio lands just above an integer
    if k > 1 and 1.0 - (1.0 - prob) ** (k - 1) >= 0.5:
        k -= 1
    return k


__all__ = [
    "PMF_LIMITS",
    "CDF_LIMITS",
    "PARAMETER_LIMITS",
    "pmf",
    "cdf",
    "mean",
    "variance",
    "mode",
    "median",
]
