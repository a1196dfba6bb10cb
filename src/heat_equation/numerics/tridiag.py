# src/heat_equation/numerics/tridiag.py
from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "Tridiag",
    "tridiag_mv",
    "solve_tridiag_thomas",
    "solve_tridiag_scipy",
    "tridiag_to_dense",
]


@dataclass(frozen=True, slots=True)
class Tridiag:
    lower: NDArray[np.floating]
    diag: NDArray[np.floating]
    upper: NDArray[np.floating]

    @classmethod
    def from_bands(cls, a: ArrayLike, b: ArrayLike, c: ArrayLike) -> Tridiag:
        """
        Build from full-length bands of the row equations

            a[i]*x[i-1] + b[i]*x[i] + c[i]*x[i+1] = d[i]

        All three bands have length M; a[0] and c[M-1] fall outside the matrix
        and are dropped.
        """
        a = np.asarray(a, dtype=float)
        b = np.asarray(b, dtype=float)
        c = np.asarray(c, dtype=float)
        if b.ndim != 1:
            raise ValueError("b must be 1D")
        M = int(b.shape[0])
        if a.shape != (M,) or c.shape != (M,):
            raise ValueError(f"a, b, c must all have shape {(M,)}")
        if M == 0:
            return cls(lower=a, diag=b, upper=c)
        return cls(lower=a[1:].copy(), diag=b.copy(), upper=c[:-1].copy())

    def check(self) -> int:
        """
        Validate internal shapes and return M (system size).

        Supports M == 0 with empty diagonals:
          diag.shape  == (0,)
          lower.shape == (0,)
          upper.shape == (0,)
        """
        diag = np.asarray(self.diag)
        if diag.ndim != 1:
            raise ValueError("diag must be 1D")

        M = int(diag.shape[0])

        lower = np.asarray(self.lower)
        upper = np.asarray(self.upper)

        if M == 0:
            if lower.shape != (0,) or upper.shape != (0,):
                raise ValueError("For M==0, lower/upper must be empty (shape (0,))")
            return 0

        if lower.shape != (M - 1,) or upper.shape != (M - 1,):
            raise ValueError(f"lower/upper must have shape {(M - 1,)}")
        return M

    def mv(self, u: NDArray[np.floating]) -> NDArray[np.floating]:
        M = self.check()
        u = np.asarray(u)
        if u.shape != (M,):
            raise ValueError(f"u must have shape {(M,)} got {u.shape}")
        return tridiag_mv(Bl=self.lower, Bd=self.diag, Bu=self.upper, u=u)


def tridiag_mv(
    Bl: NDArray[np.floating],  # (M-1,) or (0,) if M==0
    Bd: NDArray[np.floating],  # (M,)
    Bu: NDArray[np.floating],  # (M-1,) or (0,) if M==0
    u: NDArray[np.floating],  # (M,)
) -> NDArray[np.floating]:
    """
    Compute y = T u where T is tridiagonal with diagonals (Bl,Bd,Bu).

    Convention (for M>=2):
      y[0]   = Bd[0]*u[0] + Bu[0]*u[1]
      y[j]   = Bl[j-1]*u[j-1] + Bd[j]*u[j] + Bu[j]*u[j+1]   for 1<=j<=M-2
      y[M-1] = Bl[M-2]*u[M-2] + Bd[M-1]*u[M-1]
    """
    Bd = np.asarray(Bd)
    Bl = np.asarray(Bl)
    Bu = np.asarray(Bu)
    u = np.asarray(u)

    if Bd.ndim != 1:
        raise ValueError("Bd must be 1D")

    M = int(Bd.shape[0])

    if u.shape != (M,):
        raise ValueError(f"u must have shape {(M,)} got {u.shape}")

    if M == 0:
        if Bl.shape != (0,) or Bu.shape != (0,):
            raise ValueError("For M==0, Bl,Bu must be empty (shape (0,))")
        return cast(NDArray[np.floating], Bd * u)  # empty

    if Bl.shape != (M - 1,) or Bu.shape != (M - 1,):
        raise ValueError(f"Bl,Bu must have shape {(M - 1,)} got {Bl.shape}, {Bu.shape}")

    y = Bd * u
    y[1:] += Bl * u[:-1]
    y[:-1] += Bu * u[1:]
    return cast(NDArray[np.floating], y)


def solve_tridiag_thomas(
    A: Tridiag,
    rhs: NDArray[np.floating],
) -> NDArray[np.floating]:
    """
    Solve A x = rhs for tridiagonal A (Thomas algorithm, O(M)).

    Notes:
    - No pivoting. The heat-equation matrices are diagonally dominant, so the
      pivots stay away from zero.
    - Raises np.linalg.LinAlgError on (near-)zero pivots.
    - A and rhs are never modified.
    """
    M = A.check()

    rhs = np.asarray(rhs)
    if rhs.shape != (M,):
        raise ValueError(f"rhs must have shape {(M,)} got {rhs.shape}")

    dtype = np.result_type(A.lower, A.diag, A.upper, rhs, np.float64)
    lower = np.asarray(A.lower).astype(dtype, copy=True)
    diag = np.asarray(A.diag).astype(dtype, copy=True)
    upper = np.asarray(A.upper).astype(dtype, copy=True)
    d = rhs.astype(dtype, copy=True)

    if M == 0:
        return d

    tol = 100.0 * np.finfo(dtype).eps

    if M == 1:
        denom = diag[0]
        if abs(denom) < tol:
            raise np.linalg.LinAlgError("Near-zero pivot at row 0")
        return cast(NDArray[np.floating], d / denom)

    # Forward sweep (c' stored in upper, d' in d)
    denom = diag[0]
    if abs(denom) < tol:
        raise np.linalg.LinAlgError("Near-zero pivot at row 0")
    upper[0] = upper[0] / denom
    d[0] = d[0] / denom

    for i in range(1, M - 1):
        denom = diag[i] - lower[i - 1] * upper[i - 1]
        if abs(denom) < tol:
            raise np.linalg.LinAlgError(f"Near-zero pivot at row {i}")
        upper[i] = upper[i] / denom
        d[i] = (d[i] - lower[i - 1] * d[i - 1]) / denom

    denom = diag[M - 1] - lower[M - 2] * upper[M - 2]
    if abs(denom) < tol:
        raise np.linalg.LinAlgError(f"Near-zero pivot at row {M - 1}")
    d[M - 1] = (d[M - 1] - lower[M - 2] * d[M - 2]) / denom

    # Back substitution
    x = np.empty(M, dtype=dtype)
    x[M - 1] = d[M - 1]
    for i in range(M - 2, -1, -1):
        x[i] = d[i] - upper[i] * x[i + 1]
    return x


def solve_tridiag_scipy(
    A: Tridiag,
    rhs: NDArray[np.floating],
) -> NDArray[np.floating]:
    """
    Solve using SciPy's banded LU solver. SciPy is imported lazily.

    Same contract as :func:`solve_tridiag_thomas`; used as a reference solver.
    """
    from scipy.linalg import solve_banded

    M = A.check()

    rhs = np.asarray(rhs)
    if rhs.shape != (M,):
        raise ValueError(f"rhs must have shape {(M,)} got {rhs.shape}")

    if M == 0:
        return cast(NDArray[np.floating], rhs.astype(float, copy=True))

    ab = np.zeros((3, M), dtype=np.result_type(A.lower, A.diag, A.upper, rhs))
    ab[0, 1:] = np.asarray(A.upper)
    ab[1, :] = np.asarray(A.diag)
    ab[2, :-1] = np.asarray(A.lower)

    return cast(NDArray[np.floating], np.asarray(solve_banded((1, 1), ab, rhs)))


def tridiag_to_dense(A: Tridiag) -> NDArray[np.floating]:
    """Dense copy of A, for tests and small diagnostics."""
    M = A.check()
    lower = np.asarray(A.lower)
    diag = np.asarray(A.diag)
    upper = np.asarray(A.upper)

    dense = np.zeros((M, M), dtype=np.result_type(lower, diag, upper))
    idx = np.arange(M)
    dense[idx, idx] = diag
    dense[idx[1:], idx[:-1]] = lower
    dense[idx[:-1], idx[1:]] = upper
    return dense
