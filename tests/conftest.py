"""Pytest helpers for the heat_equation library."""

from __future__ import annotations

import pytest

from heat_equation.types import COPPER, Material


@pytest.fixture
def base_params() -> dict:
    """Default run parameters (1 m bar, 16 s)."""
    return {
        "L": 1.0,
        "tmax": 16.0,
        "u0": 13.0,
        "f": 80.0,
    }


@pytest.fixture
def copper() -> Material:
    return COPPER


@pytest.fixture
def slow_material() -> Material:
    """A made-up material with a moderate diffusion number on coarse grids."""
    return Material("Slow", conductivity=1.0, density=1000.0, specific_heat=1000.0)

