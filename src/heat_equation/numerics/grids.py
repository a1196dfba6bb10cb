# src/heat_equation/numerics/grids.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..config import N_STEPS, SimulationConfig

__all__ = [
    "Grid",
    "build_grid",
    "diffusion_number",
]


@dataclass(frozen=True, slots=True)
class Grid:
    """Uniform space/time grid.

    ``x[i] = i * dx`` for ``i = 0..n-1``; the same nodes are used on both axes
    of the plate.
    """

    x: NDArray[np.floating]
    dx: float
    dt: float
    length: float
    tmax: float
    n_steps: int = N_STEPS

    @property
    def n(self) -> int:
        return int(self.x.shape[0])


def build_grid(cfg: SimulationConfig) -> Grid:
    n = int(cfg.n)
    dx = cfg.dx
    # i*dx rather than linspace: source regions are tested against these exact values
    x = np.arange(n, dtype=float) * dx
    return Grid(
        x=x,
        dx=dx,
        dt=cfg.dt,
        length=float(cfg.length),
        tmax=float(cfg.tmax),
    )


def diffusion_number(alpha: float, dt: float, dx: float) -> float:
    """Implicit diffusion number ``r = alpha * dt / dx**2``."""
    return float(alpha) * float(dt) / (float(dx) * float(dx))
