"""
PySATL Geometric
================

Mass and cumulative distribution functions of the shifted geometric
distribution, with parameter validation against declared domains.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .errors import *
from .errors import __all__ as _errors_all
from .limits import *
from .limits import __all__ as _limits_all
from .shifted_geometric import *
from .shifted_geometric import __all__ as _geometric_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-geometric")
__all__ = [
    "__version__",
    *_errors_all,
    *_limits_all,
    *_geometric_all,
    *_types_all,
]

del _errors_all
del _limits_all
del _geometric_all
del _types_all
