from __future__ import annotations

from pathlib import Path
from typing import Literal

import numpy as np

from ..solver import SteppedField
from ..types import KELVIN_OFFSET

Style = Literal["pretty", "minimal"]
Unit = Literal["K", "C"]


def _mpl_context(style: Style):
    import matplotlib as mpl

    if style == "minimal":
        return mpl.rc_context({})

    return mpl.rc_context(
        {
            "axes.grid": True,
            "axes.axisbelow": True,
            "grid.alpha": 0.18,
            "grid.linewidth": 0.8,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "axes.titlesize": 11,
            "axes.titleweight": "semibold",
            "axes.labelsize": 10,
            "lines.linewidth": 2.0,
            "figure.dpi": 120,
        }
    )


def _get_plt():
    try:
        import matplotlib.pyplot as plt
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "Plotting requires matplotlib. Install it with: pip install matplotlib"
        ) from e
    return plt


def _title(field: SteppedField) -> str:
    return (
        f"{field.material.name}  "
        f"alpha={field.material.alpha():.3g} m^2/s  "
        f"t={field.get_time():.3g}/{field.get_tmax():g} s"
    )


def _finish(fig, *, show: bool, savepath: str | Path | None, dpi: int) -> None:
    if savepath is not None:
        fig.savefig(Path(savepath), dpi=dpi, bbox_inches="tight")
    if show:
        _get_plt().show()


def plot_profile(
    field: SteppedField,
    *,
    unit: Unit = "K",
    style: Style = "pretty",
    ax=None,
    figsize: tuple[float, float] = (8, 4),
    show: bool = True,
    savepath: str | Path | None = None,
    dpi: int = 150,
):
    """Temperature along the bar at the current time."""
    if field.dim != 1:
        raise ValueError("plot_profile needs a 1D field")

    plt = _get_plt()
    x = np.asarray(field.grid.x, dtype=float)
    T = field.temperature
    if unit == "C":
        T = T - KELVIN_OFFSET

    with _mpl_context(style):
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
        else:
            fig = ax.figure

        ax.plot(x, T, color="tab:red")
        ax.axhline(
            field.initial_kelvin - (KELVIN_OFFSET if unit == "C" else 0.0),
            color="0.5",
            linestyle="--",
            linewidth=1.0,
            label="u0",
        )
        ax.set_xlabel("x [m]")
        ax.set_ylabel(f"T [{'°C' if unit == 'C' else 'K'}]")
        ax.set_title(_title(field))
        ax.legend(loc="best")

    _finish(fig, show=show, savepath=savepath, dpi=dpi)
    return fig, ax


def plot_plate(
    field: SteppedField,
    *,
    unit: Unit = "K",
    cmap: str = "inferno",
    style: Style = "pretty",
    ax=None,
    figsize: tuple[float, float] = (6, 5),
    show: bool = True,
    savepath: str | Path | None = None,
    dpi: int = 150,
):
    """Heat map of the plate at the current time (origin at the lower left)."""
    if field.dim != 2:
        raise ValueError("plot_plate needs a 2D field")

    plt = _get_plt()
    T = field.temperature
    if unit == "C":
        T = T - KELVIN_OFFSET
    L = field.grid.length

    with _mpl_context(style):
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
        else:
            fig = ax.figure

        im = ax.imshow(
            T,
            origin="lower",
            extent=(0.0, L, 0.0, L),
            cmap=cmap,
            interpolation="nearest",
        )
        ax.grid(False)
        ax.set_xlabel("x [m]")
        ax.set_ylabel("y [m]")
        ax.set_title(_title(field))
        fig.colorbar(im, ax=ax, label=f"T [{'°C' if unit == 'C' else 'K'}]")

    _finish(fig, show=show, savepath=savepath, dpi=dpi)
    return fig, ax
