from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from time import perf_counter

import numpy as np
import pandas as pd

from heat_equation.config import RelaxationConfig, SimulationConfig
from heat_equation.solver import SteppedField
from heat_equation.solver.methods import BoundedRelaxation
from heat_equation.types import KELVIN_OFFSET, MATERIALS, Material

logger = logging.getLogger(__name__)

# ----------------------------
# Results dataclass
# ----------------------------


@dataclass(frozen=True, slots=True)
class MaterialRun:
    # Identifiers
    material: str
    dim: int
    n: int

    # material / discretization
    alpha: float
    r: float

    # outputs
    time: float
    steps: int
    T_min: float
    T_max: float
    T_mean: float
    runtime_ms: float


# ----------------------------
# Core execution
# ----------------------------


def run_material(
    material: Material,
    cfg: SimulationConfig,
    *,
    dim: int = 1,
    steps: int | None = None,
    relaxation: RelaxationConfig | None = None,
) -> tuple[MaterialRun, SteppedField]:
    """Build one solver, advance it ``steps`` times (default: to ``tmax``)."""
    method = None if relaxation is None else BoundedRelaxation(cfg=relaxation)
    field = SteppedField(material, cfg, dim=dim, method=method)

    t0 = perf_counter()
    taken = field.run(max_steps=steps)
    runtime_ms = (perf_counter() - t0) * 1e3

    u = field.temperature
    res = MaterialRun(
        material=material.name,
        dim=int(dim),
        n=field.get_n(),
        alpha=material.alpha(),
        r=field.diffusion_number,
        time=field.get_time(),
        steps=int(taken),
        T_min=float(np.min(u)),
        T_max=float(np.max(u)),
        T_mean=float(np.mean(u)),
        runtime_ms=float(runtime_ms),
    )
    return res, field


def compare_materials(
    materials: Iterable[Material] | None = None,
    *,
    cfg: SimulationConfig,
    dim: int = 1,
    steps: int | None = None,
    relaxation: RelaxationConfig | None = None,
) -> pd.DataFrame:
    """Run the same simulation for several materials side by side.

    One independent solver per material (default: the four presets). Returns
    one row per material, temperatures in Kelvin.
    """
    mats = list(MATERIALS.values()) if materials is None else list(materials)
    if not mats:
        raise ValueError("Need at least one material")

    records: list[dict[str, object]] = []
    for mat in mats:
        res, _ = run_material(mat, cfg, dim=dim, steps=steps, relaxation=relaxation)
        logger.debug("%s: %d steps in %.1f ms", res.material, res.steps, res.runtime_ms)
        records.append(asdict(res))

    return pd.DataFrame.from_records(records)


def profile_table(field: SteppedField) -> pd.DataFrame:
    """Current bar temperature per node, in Kelvin and Celsius."""
    if field.dim != 1:
        raise ValueError("profile_table needs a 1D field")
    T = field.temperature
    return pd.DataFrame(
        {
            "x": np.asarray(field.grid.x, dtype=float),
            "T_kelvin": T,
            "T_celsius": T - KELVIN_OFFSET,
        }
    )
