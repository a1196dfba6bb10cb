# src/heat_equation/numerics/source.py
"""Static heat-source fields.

The source strength is ``tmax * f**2`` (scaled per region in 1D) on a few
fixed regions of the domain and zero elsewhere. Region bounds are fractions
of the domain length taken from :mod:`heat_equation.config` and are inclusive.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ..config import SourceLayout1D, SourceLayout2D

__all__ = ["source_field_1d", "source_field_2d"]


def _bounds(lo: int, hi: int, length: float, divisions: int) -> tuple[float, float]:
    return lo * length / divisions, hi * length / divisions


def source_field_1d(
    x: NDArray[np.floating],
    *,
    length: float,
    tmax: float,
    f: float,
    layout: SourceLayout1D | None = None,
) -> NDArray[np.floating]:
    """Source on the bar, sampled at the nodes ``x``.

    Default layout: ``tmax*f**2`` on ``[L/10, 2L/10]``, ``0.75*tmax*f**2`` on
    ``[5L/10, 6L/10]``.
    """
    if layout is None:
        layout = SourceLayout1D()

    x = np.asarray(x, dtype=float)
    if x.ndim != 1:
        raise ValueError("x must be 1D")

    amplitude = float(tmax) * float(f) * float(f)
    F = np.zeros_like(x)
    assigned = np.zeros(x.shape, dtype=bool)

    for lo, hi, weight in layout.regions:
        x_lo, x_hi = _bounds(lo, hi, float(length), layout.divisions)
        inside = (x >= x_lo) & (x <= x_hi) & ~assigned
        F[inside] = weight * amplitude
        assigned |= inside

    return F


def source_field_2d(
    x: NDArray[np.floating],
    *,
    length: float,
    tmax: float,
    f: float,
    layout: SourceLayout2D | None = None,
) -> NDArray[np.floating]:
    """Source on the plate, row-major: ``F[j, i]`` is the value at ``(x[i], x[j])``.

    Default layout: four squares of side ``L/6`` centred in the quadrants.
    """
    if layout is None:
        layout = SourceLayout2D()

    x = np.asarray(x, dtype=float)
    if x.ndim != 1:
        raise ValueError("x must be 1D")

    L = float(length)
    X, Y = np.meshgrid(x, x, indexing="xy")  # X[j, i] = x[i], Y[j, i] = x[j]

    in_source = np.zeros(X.shape, dtype=bool)
    for (x_lo, x_hi), (y_lo, y_hi) in layout.squares:
        ax, bx = _bounds(x_lo, x_hi, L, layout.divisions)
        ay, by = _bounds(y_lo, y_hi, L, layout.divisions)
        in_source |= (X >= ax) & (X <= bx) & (Y >= ay) & (Y <= by)

    amplitude = float(tmax) * float(f) * float(f)
    return np.where(in_source, amplitude, 0.0)
