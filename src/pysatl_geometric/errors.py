"""
Exceptions raised while validating distribution parameters.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_geometric.types import Interval1D, Number, ParameterName


class DomainValidationError(ValueError):
    """
    A parameter value lies outside its declared domain.

    Parameters
    ----------
    parameter : str
        Name of the offending parameter.
    value : Number
        Supplied value.
    interval : Interval1D
        Declared domain the value had to belong to.
    """

    def __init__(self, parameter: ParameterName, value: Number, interval: Interval1D) -> None:
        self.parameter = parameter
        self.value = value
        self.interval = interval
        super().__init__(f"Parameter '{parameter}' = {value!r} is outside of its domain {interval}")


class UndeclaredParameterError(LookupError):
    """A value was supplied for a parameter that has no declared domain."""

    def __init__(self, parameter: ParameterName) -> None:
        self.parameter = parameter
        super().__init__(f"Parameter '{parameter}' has no declared limits")


__all__ = [
    "DomainValidationError",
    "UndeclaredParameterError",
]
