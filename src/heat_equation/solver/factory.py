from __future__ import annotations

from ..config import (
    DEFAULT_N_1D,
    DEFAULT_N_2D,
    RelaxationConfig,
    SimulationConfig,
    SourceLayout1D,
    SourceLayout2D,
)
from ..types import Material
from .field import SteppedField
from .methods import BoundedRelaxation, SolveStrategy


def heat_solver_1d(
    material: Material,
    L: float = 1.0,
    tmax: float = 16.0,
    u0: float = 13.0,
    f: float = 80.0,
    n: int = DEFAULT_N_1D,
    *,
    method: str | SolveStrategy | None = None,
    layout: SourceLayout1D | None = None,
) -> SteppedField:
    """Implicit solver for a bar of length ``L``.

    Zero flux at ``x=0``, temperature held at ``u0`` (Celsius in, Kelvin
    stored) at ``x=L``. Each step solves the tridiagonal system exactly.
    """
    cfg = SimulationConfig(length=L, tmax=tmax, u0=u0, f=f, n=n)
    return SteppedField(material, cfg, dim=1, method=method, layout=layout)


def heat_solver_2d(
    material: Material,
    L: float = 1.0,
    tmax: float = 16.0,
    u0: float = 13.0,
    f: float = 80.0,
    n: int = DEFAULT_N_2D,
    *,
    relaxation: RelaxationConfig | None = None,
    method: str | SolveStrategy | None = None,
    layout: SourceLayout2D | None = None,
) -> SteppedField:
    """Implicit solver for a square plate of side ``L`` with ``n x n`` points.

    Zero flux on ``x=0`` and ``y=0``, temperature held at ``u0`` on ``x=L`` and
    ``y=L``. Each step runs a capped Gauss-Seidel relaxation; pass
    ``relaxation`` to change the cap or tolerance.
    """
    if relaxation is not None:
        if method is not None:
            raise ValueError("Provide at most one of relaxation or method")
        method = BoundedRelaxation(cfg=relaxation)
    cfg = SimulationConfig(length=L, tmax=tmax, u0=u0, f=f, n=n)
    return SteppedField(material, cfg, dim=2, method=method, layout=layout)
