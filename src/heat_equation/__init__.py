"""
heat_equation

Transient heat conduction in a 1D bar and a 2D plate, integrated with an
implicit (backward Euler) finite-difference scheme.

The everyday API lives at the top level:

    from heat_equation import COPPER, heat_solver_1d

    solver = heat_solver_1d(COPPER, L=1.0, tmax=16.0, u0=13.0, f=80.0, n=101)
    while solver.step():
        pass
"""

from .config import RelaxationConfig, SimulationConfig, SourceLayout1D, SourceLayout2D
from .exceptions import InvalidParameterError
from .solver import SteppedField, heat_solver_1d, heat_solver_2d
from .types import (
    COPPER,
    GLASS,
    IRON,
    KELVIN_OFFSET,
    MATERIALS,
    POLYSTYRENE,
    Material,
    get_material,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Material",
    "COPPER",
    "IRON",
    "GLASS",
    "POLYSTYRENE",
    "MATERIALS",
    "get_material",
    "KELVIN_OFFSET",
    # Config
    "SimulationConfig",
    "RelaxationConfig",
    "SourceLayout1D",
    "SourceLayout2D",
    "InvalidParameterError",
    # Solvers
    "SteppedField",
    "heat_solver_1d",
    "heat_solver_2d",
]
