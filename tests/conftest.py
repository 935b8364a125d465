from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest


@pytest.fixture(params=[1e-6, 0.05, 0.25, 0.5, 0.75, 0.999, 1.0])
def probability(request: pytest.FixtureRequest) -> float:
    """Valid success probabilities, including the closed right endpoint."""
    return float(request.param)
