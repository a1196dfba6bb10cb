from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import numpy as np
from numpy.typing import NDArray

from ..numerics.tridiag import Tridiag


@dataclass(frozen=True, slots=True)
class HeatSystem1D:
    A: Tridiag  # system matrix for u^{n+1}, boundary rows included
    rhs: NDArray[np.floating]


def build_heat_system_1d(
    *,
    u_n: NDArray[np.floating],
    source: NDArray[np.floating],
    r: float,
    k: float,
    dirichlet_value: float,
) -> HeatSystem1D:
    """
    Backward-Euler system for the bar, on all n nodes:

        -r u[i-1] + (1+2r) u[i] - r u[i+1] = u_n[i] + k F[i]

    Row 0 (zero flux at x=0) becomes (1+r) u[0] - r u[1] = rhs[0].
    Row n-1 (fixed temperature at x=L) becomes u[n-1] = dirichlet_value.
    """
    u_n = np.asarray(u_n, dtype=float)
    source = np.asarray(source, dtype=float)
    if u_n.ndim != 1:
        raise ValueError("u_n must be 1D")
    n = int(u_n.shape[0])
    if n < 2:
        raise ValueError("Need at least 2 spatial points")
    if source.shape != (n,):
        raise ValueError(f"source must have shape {(n,)} got {source.shape}")

    r = float(r)

    a = np.full(n, -r)
    b = np.full(n, 1.0 + 2.0 * r)
    c = np.full(n, -r)
    d = u_n + float(k) * source

    # Neumann
    b[0] = 1.0 + r
    c[0] = -r

    # Dirichlet
    b[-1] = 1.0
    a[-1] = 0.0
    c[-1] = 0.0
    d[-1] = float(dirichlet_value)

    return HeatSystem1D(
        A=Tridiag.from_bands(a, b, c), rhs=cast(NDArray[np.floating], d)
    )
