"""
Core Type Definitions
=====================

Numeric aliases and the interval type used to declare parameter domains.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re
from collections.abc import Mapping
from dataclasses import dataclass
from math import inf, isnan
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ParameterName: TypeAlias = str
"""Type alias for distribution parameter names (e.g., 'k', 'p')."""

_NOTATION = re.compile(
    r"^\s*(?P<lbr>[\[(])\s*(?P<left>[^,\s\[\]()]+)\s*,"
    r"\s*(?P<right>[^,\s\[\]()]+)\s*(?P<rbr>[\])])\s*$"
)
_POS_INF = {"∞", "+∞", "inf", "+inf"}
_NEG_INF = {"-∞", "-inf"}


def _parse_endpoint(token: str) -> float:
    if token in _POS_INF:
        return inf
    if token in _NEG_INF:
        return -inf
    try:
        value = float(token)
    except ValueError:
        raise ValueError(f"Invalid interval endpoint: {token!r}") from None
    if isnan(value):
        raise ValueError(f"Invalid interval endpoint: {token!r}")
    return value


def _format_endpoint(value: float) -> str:
    if value == inf:
        return "∞"
    if value == -inf:
        return "-∞"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @classmethod
    def from_notation(cls, notation: str) -> Interval1D:
        """
        Build an interval from its mathematical notation.

        Parameters
        ----------
        notation : str
            Interval such as ``"[1,∞)"`` or ``"(0, 1]"``. ``inf`` and
            ``-inf`` are accepted in place of ``∞`` and ``-∞``.

        Returns
        -------
        Interval1D
            Parsed interval.

        Raises
        ------
        ValueError
            If the notation cannot be parsed or the endpoints are reversed.
        """
        match = _NOTATION.match(notation)
        if match is None:
            raise ValueError(f"Invalid interval notation: {notation!r}")

        left = _parse_endpoint(match["left"])
        right = _parse_endpoint(match["right"])
        if left > right:
            raise ValueError(f"Left endpoint exceeds right endpoint in {notation!r}")

        return cls(
            left=left,
            right=right,
            left_closed=match["lbr"] == "[",
            right_closed=match["rbr"] == "]",
        )

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        """Check if the interval is empty."""
        if self.left > self.right:
            return True

        return bool(self.left == self.right and not (self.left_closed and self.right_closed))

    def __str__(self) -> str:
        lbr = "[" if self.left_closed else "("
        rbr = "]" if self.right_closed else ")"
        return f"{lbr}{_format_endpoint(self.left)}, {_format_endpoint(self.right)}{rbr}"


Limits = Mapping[ParameterName, Interval1D]
"""Type alias for a table of declared parameter domains."""


__all__ = [
    "BoolArray",
    "Interval1D",
    "Limits",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "ParameterName",
]
