"""Implicit finite-difference heat solvers for a bar (1D) and a plate (2D).

Solved PDE:

    u_t = alpha * laplacian(u) + F / (rho * c)

with zero flux on the low edges and a fixed temperature on the high edges.
"""

from .factory import heat_solver_1d, heat_solver_2d
from .field import SteppedField
from .methods import (
    BoundedRelaxation,
    DirectBanded,
    SolveStrategy,
    StepResult,
    available_methods,
    register_method,
    resolve_method,
)
from .operators import HeatSystem1D, build_heat_system_1d

__all__ = [
    # Lifecycle
    "SteppedField",
    "heat_solver_1d",
    "heat_solver_2d",
    # Strategies / registry
    "SolveStrategy",
    "StepResult",
    "DirectBanded",
    "BoundedRelaxation",
    "register_method",
    "available_methods",
    "resolve_method",
    # Low-level system builder
    "HeatSystem1D",
    "build_heat_system_1d",
]
