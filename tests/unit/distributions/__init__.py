"""
PySATL Geometric
================

Unit tests for parameter limits and the shifted geometric distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
