from __future__ import annotations

import logging
from typing import cast

import numpy as np
from numpy.typing import NDArray

from ..config import SimulationConfig, SourceLayout1D, SourceLayout2D
from ..numerics.grids import Grid, build_grid, diffusion_number
from ..numerics.relaxation import RelaxationResult
from ..numerics.source import source_field_1d, source_field_2d
from ..types import Material, celsius_to_kelvin
from .methods import SolveStrategy, resolve_method

logger = logging.getLogger(__name__)


class SteppedField:
    """Temperature field on a bar (``dim=1``) or square plate (``dim=2``).

    The field is advanced by backward-Euler steps of fixed size
    ``dt = tmax / 1000`` until ``tmax`` is reached. Boundary conventions:

    - zero flux at ``x = 0`` (and ``y = 0`` on the plate)
    - temperature held at ``u0`` at ``x = L`` (and ``y = L`` on the plate)

    All temperatures are stored and returned in Kelvin. The plate is stored
    row-major, ``u[j, i]`` being the value at ``(x_i, y_j)``.

    Parameters
    ----------
    material : Material
        Physical constants.
    cfg : SimulationConfig
        Geometry, horizon, temperatures and grid size.
    dim : int
        1 for the bar, 2 for the plate.
    method : str or SolveStrategy, optional
        Strategy for the implicit solve. Defaults to the Thomas solve in 1D and
        the bounded Gauss-Seidel relaxation in 2D.
    layout : SourceLayout1D or SourceLayout2D, optional
        Heated regions. Defaults to the standard layout for ``dim``.
    """

    def __init__(
        self,
        material: Material,
        cfg: SimulationConfig,
        *,
        dim: int = 1,
        method: str | SolveStrategy | None = None,
        layout: SourceLayout1D | SourceLayout2D | None = None,
    ) -> None:
        if dim not in (1, 2):
            raise ValueError(f"dim must be 1 or 2, got {dim}")

        self.material = material
        self.cfg = cfg
        self.dim = int(dim)
        self.method = resolve_method(method=method, dim=self.dim)
        self.grid: Grid = build_grid(cfg)

        self._u0_kelvin = celsius_to_kelvin(cfg.u0)
        self._r = diffusion_number(material.alpha(), self.grid.dt, self.grid.dx)
        self._k = self.grid.dt / material.heat_capacity

        n = self.grid.n
        shape = (n,) if self.dim == 1 else (n, n)
        self._F = self._build_source(layout)
        if self._F.shape != shape:
            raise ValueError(f"source must have shape {shape} got {self._F.shape}")
        self._F.setflags(write=False)

        self._u = np.full(shape, self._u0_kelvin, dtype=float)
        self._step_count = 0
        self.last_relaxation: RelaxationResult | None = None

        logger.debug(
            "Created %dD field: material=%s n=%d dx=%g dt=%g r=%g method=%s",
            self.dim,
            material.name,
            n,
            self.grid.dx,
            self.grid.dt,
            self._r,
            self.method.name,
        )

    def _build_source(
        self, layout: SourceLayout1D | SourceLayout2D | None
    ) -> NDArray[np.floating]:
        kw = dict(length=self.grid.length, tmax=self.grid.tmax, f=float(self.cfg.f))
        if self.dim == 1:
            if layout is not None and not isinstance(layout, SourceLayout1D):
                raise TypeError("A 1D field needs a SourceLayout1D")
            return source_field_1d(self.grid.x, layout=layout, **kw)

        if layout is not None and not isinstance(layout, SourceLayout2D):
            raise TypeError("A 2D field needs a SourceLayout2D")
        return source_field_2d(self.grid.x, layout=layout, **kw)

    # --- lifecycle ----------------------------------------------------------

    @property
    def finished(self) -> bool:
        return self._step_count >= self.grid.n_steps

    def step(self) -> bool:
        """Advance one time step.

        Returns False, without touching the field or the clock, once ``tmax``
        has been reached.
        """
        if self.finished:
            return False

        res = self.method.advance(
            u_n=self._u,
            source=self._F,
            r=self._r,
            k=self._k,
            dirichlet_value=self._u0_kelvin,
        )
        self._u = np.asarray(res.u, dtype=float)
        self.last_relaxation = res.relaxation
        self._step_count += 1

        if res.relaxation is not None and not res.relaxation.converged:
            logger.debug(
                "Relaxation capped at %d sweeps (max change %.3e) at t=%g",
                res.relaxation.sweeps,
                res.relaxation.max_change,
                self.get_time(),
            )
        if self.finished:
            logger.info(
                "%dD simulation for %s reached tmax=%g after %d steps",
                self.dim,
                self.material.name,
                self.grid.tmax,
                self._step_count,
            )
        return True

    def run(self, max_steps: int | None = None) -> int:
        """Step until finished (or ``max_steps`` steps); return the number taken."""
        taken = 0
        while max_steps is None or taken < max_steps:
            if not self.step():
                break
            taken += 1
        return taken

    def reset(self) -> None:
        """Back to ``t = 0`` and a uniform field at ``u0``; the source is kept."""
        self._step_count = 0
        self._u = np.full(self._u.shape, self._u0_kelvin, dtype=float)
        self.last_relaxation = None

    # --- read access --------------------------------------------------------

    def get_time(self) -> float:
        return self._step_count * self.grid.dt

    def get_tmax(self) -> float:
        return self.grid.tmax

    def get_n(self) -> int:
        return self.grid.n

    @property
    def steps_taken(self) -> int:
        return self._step_count

    @property
    def diffusion_number(self) -> float:
        return self._r

    @property
    def initial_kelvin(self) -> float:
        return self._u0_kelvin

    @property
    def source(self) -> NDArray[np.floating]:
        return cast(NDArray[np.floating], self._F.copy())

    @property
    def temperature(self) -> NDArray[np.floating]:
        """Copy of the field as an array (shape ``(n,)`` or ``(n, n)``)."""
        return cast(NDArray[np.floating], self._u.copy())

    def get_temperature(self) -> list[float]:
        """Field values in Kelvin (row-major flattened on the plate)."""
        return [float(v) for v in self._u.ravel()]

    def get_temperature_2d(self) -> list[list[float]]:
        """Plate values in Kelvin as rows: ``result[j][i]`` is at ``(x_i, y_j)``."""
        if self.dim != 2:
            raise ValueError("get_temperature_2d is only available on a 2D field")
        return cast(list[list[float]], self._u.tolist())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dim={self.dim}, material={self.material.name!r}, "
            f"n={self.grid.n}, t={self.get_time():g}, tmax={self.grid.tmax:g}, "
            f"method={self.method.name!r})"
        )
