# src/heat_equation/numerics/__init__.py
"""
Numerical building blocks (advanced API).

Top-level package `heat_equation` exposes the solver factories.
This subpackage exposes the kernels they are built from.
"""

from .grids import Grid, build_grid, diffusion_number
from .relaxation import RelaxationResult, gauss_seidel_heat_step
from .source import source_field_1d, source_field_2d
from .tridiag import (
    Tridiag,
    solve_tridiag_scipy,
    solve_tridiag_thomas,
    tridiag_mv,
    tridiag_to_dense,
)

__all__ = [
    # Grids
    "Grid",
    "build_grid",
    "diffusion_number",
    # Sources
    "source_field_1d",
    "source_field_2d",
    # Tridiagonal
    "Tridiag",
    "solve_tridiag_thomas",
    "solve_tridiag_scipy",
    "tridiag_mv",
    "tridiag_to_dense",
    # Relaxation
    "RelaxationResult",
    "gauss_seidel_heat_step",
]
