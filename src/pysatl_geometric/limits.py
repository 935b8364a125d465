"""
Parameter limits checking.

A limits table maps parameter names to the intervals they must belong to::

    LIMITS = {
        "k": Interval1D.from_notation("[1,∞)"),
        "p": Interval1D.from_notation("(0,1]"),
    }

and :func:`check_limits` verifies a set of supplied values against it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_geometric.errors import DomainValidationError, UndeclaredParameterError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_geometric.types import Limits, Number, ParameterName


def check_limits(limits: Limits, values: Mapping[ParameterName, Number]) -> None:
    """
    Check that every supplied value lies within its declared interval.

    Parameters
    ----------
    limits : Limits
        Declared domain of each parameter.
    values : Mapping[str, Number]
        Supplied parameter values. Parameters declared in ``limits`` but
        absent here are not checked.

    Raises
    ------
    DomainValidationError
        For the first value found outside its interval.
    UndeclaredParameterError
        If a value is supplied for a parameter missing from ``limits``.
    """
    for name, value in values.items():
        interval = limits.get(name)
        if interval is None:
            raise UndeclaredParameterError(name)
        if value not in interval:
            raise DomainValidationError(name, value, interval)


__all__ = [
    "check_limits",
]
