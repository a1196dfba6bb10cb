# src/heat_equation/numerics/relaxation.py
"""Bounded Gauss-Seidel relaxation for the 2D implicit heat step.

One backward-Euler step on the plate solves, for every non-Dirichlet cell,

    (1 + 4r) u[j, i] - r (u_left + u_right + u_down + u_up) = u_prev[j, i] + k F[j, i]

The grid is stored row-major: ``u[j, i]`` is the value at ``(x_i, y_j)``.
Boundaries follow the plate convention:

- ``i == 0`` / ``j == 0``: zero flux, the missing neighbour mirrors index 1
- ``i == n-1`` / ``j == n-1``: fixed temperature
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..config import RelaxationConfig

__all__ = ["RelaxationResult", "gauss_seidel_heat_step"]


@dataclass(frozen=True, slots=True)
class RelaxationResult:
    u: NDArray[np.floating]  # (n, n) row-major
    sweeps: int
    max_change: float
    converged: bool


def gauss_seidel_heat_step(
    u_prev: NDArray[np.floating],
    source: NDArray[np.floating],
    *,
    r: float,
    dirichlet_value: float,
    cfg: RelaxationConfig | None = None,
) -> RelaxationResult:
    """
    Relax one implicit step starting from the previous time level.

    ``source`` is the already-scaled source increment ``k * F``. Sweeps run in
    row-major order (rows j outer, columns i inner) and update in place, so a
    cell sees the new values of its left and lower neighbours. Stops when the
    largest change of a sweep is below ``cfg.tol`` or after ``cfg.max_sweeps``
    sweeps; hitting the cap is reported in the result, not raised.

    The inputs are never modified.
    """
    if cfg is None:
        cfg = RelaxationConfig()

    u_prev = np.asarray(u_prev, dtype=float)
    source = np.asarray(source, dtype=float)
    if u_prev.ndim != 2 or u_prev.shape[0] != u_prev.shape[1]:
        raise ValueError(f"u_prev must be a square 2D array, got {u_prev.shape}")
    if source.shape != u_prev.shape:
        raise ValueError(f"source must have shape {u_prev.shape} got {source.shape}")

    n = int(u_prev.shape[0])
    if n < 2:
        raise ValueError("Need n >= 2 points per axis")

    r = float(r)
    u_fix = float(dirichlet_value)
    denom = 1.0 + 4.0 * r
    rhs = u_prev + source

    w = u_prev.copy()
    last = n - 1

    sweeps = 0
    max_change = 0.0
    for _ in range(int(cfg.max_sweeps)):
        sweeps += 1
        max_change = 0.0

        for j in range(n):
            for i in range(n):
                if i == last or j == last:
                    w[j, i] = u_fix
                    continue

                old = w[j, i]

                left = w[j, i - 1] if i > 0 else w[j, 1]
                right = w[j, i + 1]
                down = w[j - 1, i] if j > 0 else w[1, i]
                up = w[j + 1, i]

                new = (rhs[j, i] + r * (left + right + down + up)) / denom
                w[j, i] = new

                change = abs(new - old)
                if change > max_change:
                    max_change = change

        if max_change < cfg.tol:
            break

    return RelaxationResult(
        u=w,
        sweeps=sweeps,
        max_change=float(max_change),
        converged=bool(max_change < cfg.tol),
    )
