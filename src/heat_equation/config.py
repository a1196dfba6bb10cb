from __future__ import annotations

import math
from dataclasses import dataclass

from .exceptions import InvalidParameterError

# Every run is split into exactly this many implicit steps: dt = tmax / N_STEPS.
N_STEPS = 1000

# Default grid sizes (points per axis).
DEFAULT_N_1D = 1001
DEFAULT_N_2D = 101


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Geometry, time horizon and temperatures shared by both solvers.

    Parameters
    ----------
    length : float
        Bar length / plate side ``L`` in metres.
    tmax : float
        Simulated time horizon ``T`` in seconds.
    u0 : float
        Initial and fixed-boundary temperature in degrees Celsius.
    f : float
        Source amplitude (Celsius scale). The source strength is ``T * f**2``.
    n : int
        Grid points per axis, ``n >= 2``.
    """

    length: float = 1.0
    tmax: float = 16.0
    u0: float = 13.0
    f: float = 80.0
    n: int = DEFAULT_N_1D

    def __post_init__(self) -> None:
        if int(self.n) != self.n or self.n < 2:
            raise InvalidParameterError("n must be an integer >= 2")
        if not math.isfinite(self.length) or self.length <= 0:
            raise InvalidParameterError("length must be finite and > 0")
        if not math.isfinite(self.tmax) or self.tmax <= 0:
            raise InvalidParameterError("tmax must be finite and > 0")
        if not math.isfinite(self.u0):
            raise InvalidParameterError("u0 must be finite")
        if not math.isfinite(self.f):
            raise InvalidParameterError("f must be finite")

    @property
    def dx(self) -> float:
        return float(self.length) / (int(self.n) - 1)

    @property
    def dt(self) -> float:
        return float(self.tmax) / N_STEPS


@dataclass(frozen=True, slots=True)
class RelaxationConfig:
    """Stopping rule for the 2D Gauss-Seidel relaxation.

    The relaxation stops after ``max_sweeps`` sweeps or as soon as the largest
    change of a sweep drops below ``tol``, whichever comes first.
    """

    max_sweeps: int = 100
    tol: float = 1e-6

    def __post_init__(self) -> None:
        if int(self.max_sweeps) != self.max_sweeps or self.max_sweeps < 1:
            raise InvalidParameterError("max_sweeps must be an integer >= 1")
        if not (self.tol > 0):
            raise InvalidParameterError("tol must be > 0")


def _check_interval(lo: int, hi: int, divisions: int) -> None:
    if not (0 <= lo <= hi <= divisions):
        raise InvalidParameterError(
            f"source interval ({lo}, {hi}) must satisfy 0 <= lo <= hi <= {divisions}"
        )


@dataclass(frozen=True, slots=True)
class SourceLayout1D:
    """Heated segments of the bar, as fractions of ``L``.

    Each region ``(lo, hi, weight)`` heats ``[lo*L/divisions, hi*L/divisions]``
    (bounds inclusive) with ``weight * tmax * f**2``. The first matching region
    wins.
    """

    divisions: int = 10
    regions: tuple[tuple[int, int, float], ...] = ((1, 2, 1.0), (5, 6, 0.75))

    def __post_init__(self) -> None:
        if self.divisions < 1:
            raise InvalidParameterError("divisions must be >= 1")
        for lo, hi, weight in self.regions:
            _check_interval(lo, hi, self.divisions)
            if weight < 0:
                raise InvalidParameterError("region weight must be >= 0")


@dataclass(frozen=True, slots=True)
class SourceLayout2D:
    """Heated squares of the plate, as fractions of ``L`` on both axes.

    Each square ``((x_lo, x_hi), (y_lo, y_hi))`` heats the closed rectangle
    ``[x_lo*L/d, x_hi*L/d] x [y_lo*L/d, y_hi*L/d]`` with ``tmax * f**2``.
    """

    divisions: int = 6
    squares: tuple[tuple[tuple[int, int], tuple[int, int]], ...] = (
        ((1, 2), (1, 2)),
        ((4, 5), (1, 2)),
        ((1, 2), (4, 5)),
        ((4, 5), (4, 5)),
    )

    def __post_init__(self) -> None:
        if self.divisions < 1:
            raise InvalidParameterError("divisions must be >= 1")
        for (x_lo, x_hi), (y_lo, y_hi) in self.squares:
            _check_interval(x_lo, x_hi, self.divisions)
            _check_interval(y_lo, y_hi, self.divisions)
