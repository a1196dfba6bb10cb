"""Solve strategies and a small registry.

Both solvers share one lifecycle (:class:`~heat_equation.solver.field.SteppedField`)
and differ only in how the next time level is obtained:

1) :class:`DirectBanded`: assemble the tridiagonal backward-Euler system of the
   bar and solve it exactly with the Thomas algorithm.
2) :class:`BoundedRelaxation`: relax the five-point backward-Euler system of
   the plate with a capped number of Gauss-Seidel sweeps.

The registry lets callers pick a strategy by name (``method="thomas"``) and
register their own.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from ..config import RelaxationConfig
from ..numerics.relaxation import RelaxationResult, gauss_seidel_heat_step
from ..numerics.tridiag import Tridiag, solve_tridiag_thomas
from .operators import build_heat_system_1d

TridiagSolver = Callable[[Tridiag, NDArray[np.floating]], NDArray[np.floating]]


@dataclass(frozen=True, slots=True)
class StepResult:
    u: NDArray[np.floating]
    relaxation: RelaxationResult | None = None


@runtime_checkable
class SolveStrategy(Protocol):
    """Advance a temperature field by one implicit step."""

    @property
    def name(self) -> str:  # pragma: no cover
        ...

    @property
    def dim(self) -> int:  # pragma: no cover
        ...

    def advance(
        self,
        *,
        u_n: NDArray[np.floating],
        source: NDArray[np.floating],
        r: float,
        k: float,
        dirichlet_value: float,
    ) -> StepResult:  # pragma: no cover
        ...


@dataclass(frozen=True, slots=True)
class DirectBanded:
    """Exact tridiagonal solve of the 1D implicit step."""

    solve_tridiag: TridiagSolver = solve_tridiag_thomas

    @property
    def name(self) -> str:
        return "direct"

    @property
    def dim(self) -> int:
        return 1

    def advance(
        self,
        *,
        u_n: NDArray[np.floating],
        source: NDArray[np.floating],
        r: float,
        k: float,
        dirichlet_value: float,
    ) -> StepResult:
        system = build_heat_system_1d(
            u_n=u_n, source=source, r=r, k=k, dirichlet_value=dirichlet_value
        )
        u = np.asarray(self.solve_tridiag(system.A, system.rhs), dtype=float)
        if u.shape != u_n.shape:
            raise ValueError(f"solve_tridiag must return shape {u_n.shape} got {u.shape}")
        return StepResult(u=u)


@dataclass(frozen=True, slots=True)
class BoundedRelaxation:
    """Capped Gauss-Seidel relaxation of the 2D implicit step."""

    cfg: RelaxationConfig = field(default_factory=RelaxationConfig)

    @property
    def name(self) -> str:
        return "relaxation"

    @property
    def dim(self) -> int:
        return 2

    def advance(
        self,
        *,
        u_n: NDArray[np.floating],
        source: NDArray[np.floating],
        r: float,
        k: float,
        dirichlet_value: float,
    ) -> StepResult:
        res = gauss_seidel_heat_step(
            u_n,
            float(k) * np.asarray(source, dtype=float),
            r=r,
            dirichlet_value=dirichlet_value,
            cfg=self.cfg,
        )
        return StepResult(u=res.u, relaxation=res)


# -----------------------------
# Registry
# -----------------------------

MethodFactory = Callable[[], SolveStrategy]
_METHOD_REGISTRY: dict[str, MethodFactory] = {}


def register_method(
    name: str,
    factory: MethodFactory,
    *,
    overwrite: bool = False,
    aliases: tuple[str, ...] = (),
) -> None:
    """Register a strategy factory under one or more names.

    Parameters
    ----------
    name:
        Primary key users pass as ``method=...``.
    factory:
        Callable returning a new strategy instance.
    overwrite:
        If False (default), raise if ``name`` or any alias already exists.
    aliases:
        Additional strings that should resolve to the same factory.
    """

    keys = (name, *aliases)
    for k in keys:
        kk = str(k).lower().strip()
        if not kk:
            raise ValueError("Method name/alias cannot be empty")
        if (not overwrite) and (kk in _METHOD_REGISTRY):
            raise KeyError(f"Method '{kk}' is already registered")
        _METHOD_REGISTRY[kk] = factory


def available_methods() -> list[str]:
    """Return the currently registered method keys (sorted)."""

    return sorted(_METHOD_REGISTRY.keys())


def default_method(dim: int) -> SolveStrategy:
    if dim == 1:
        return DirectBanded()
    if dim == 2:
        return BoundedRelaxation()
    raise ValueError(f"Unsupported dimension: {dim}")


def resolve_method(
    *,
    method: str | SolveStrategy | None,
    dim: int,
) -> SolveStrategy:
    """Resolve the caller's choice into a concrete :class:`SolveStrategy`.

    Resolution order:
    1) ``None`` -> the default strategy for ``dim``.
    2) A :class:`SolveStrategy` instance -> used as is.
    3) A string -> looked up in the registry.

    The resolved strategy must match ``dim``.
    """

    if method is None:
        return default_method(dim)

    if isinstance(method, SolveStrategy):
        strategy = method
    else:
        key = str(method).lower().strip()
        try:
            factory = _METHOD_REGISTRY[key]
        except KeyError as e:
            raise ValueError(
                f"Unknown method '{method}'. Available: {', '.join(available_methods())}"
            ) from e
        strategy = factory()

    if strategy.dim != dim:
        raise ValueError(
            f"Method '{strategy.name}' solves {strategy.dim}D fields, not {dim}D"
        )
    return strategy


def _register_builtin_methods() -> None:
    register_method(
        "direct",
        DirectBanded,
        overwrite=True,
        aliases=("thomas", "tridiagonal", "direct-banded", "tdma"),
    )
    register_method(
        "relaxation",
        BoundedRelaxation,
        overwrite=True,
        aliases=("gauss-seidel", "gauss_seidel", "gs", "bounded-relaxation"),
    )


_register_builtin_methods()
