"""Run a heat-conduction simulation to completion and print a summary table.

Non-interactive: every choice is a command-line flag.

Run from the repository root:

    PYTHONPATH=src python scripts/run_simulation.py --dim 1 --material copper
    PYTHONPATH=src python scripts/run_simulation.py --dim 2 --material all --n 31
    PYTHONPATH=src python scripts/run_simulation.py --dim 1 --plot bar.png

Temperatures in the table are Kelvin.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import asdict

from heat_equation import MATERIALS, SimulationConfig, get_material
from heat_equation.config import DEFAULT_N_1D, DEFAULT_N_2D
from heat_equation.diagnostics import compare_materials, run_material
from heat_equation.logging_config import setup_logging

logger = logging.getLogger("heat_equation.scripts.run_simulation")


def _parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--dim", type=int, choices=[1, 2], default=1)
    ap.add_argument(
        "--material",
        default="copper",
        help=f"one of {', '.join(sorted(MATERIALS))}, or 'all'",
    )
    ap.add_argument("--length", type=float, default=1.0, help="L [m]")
    ap.add_argument("--tmax", type=float, default=16.0, help="simulated time [s]")
    ap.add_argument("--u0", type=float, default=13.0, help="initial temp [C]")
    ap.add_argument("--f", type=float, default=80.0, help="source amplitude [C]")
    ap.add_argument("--n", type=int, default=None, help="grid points per axis")
    ap.add_argument("--steps", type=int, default=None, help="stop after this many steps")
    ap.add_argument("--plot", default=None, help="save a snapshot figure to this path")
    ap.add_argument("--log-level", default="INFO")
    return ap.parse_args()


def main() -> None:
    args = _parse_args()
    setup_logging(args.log_level)

    n = args.n
    if n is None:
        n = DEFAULT_N_1D if args.dim == 1 else DEFAULT_N_2D

    cfg = SimulationConfig(
        length=args.length, tmax=args.tmax, u0=args.u0, f=args.f, n=n
    )
    logger.info(
        "dim=%d L=%g tmax=%g u0=%g f=%g n=%d",
        args.dim,
        cfg.length,
        cfg.tmax,
        cfg.u0,
        cfg.f,
        cfg.n,
    )

    if args.material.lower().strip() == "all":
        if args.plot is not None:
            logger.warning("--plot is ignored with --material all")
        df = compare_materials(cfg=cfg, dim=args.dim, steps=args.steps)
        print(df.to_string(index=False, float_format=lambda v: f"{v:.6g}"))
        return

    material = get_material(args.material)
    res, field = run_material(material, cfg, dim=args.dim, steps=args.steps)
    for key, value in asdict(res).items():
        print(f"{key:>12}: {value}")

    if args.plot is not None:
        from heat_equation.viz import plot_plate, plot_profile

        plot = plot_profile if args.dim == 1 else plot_plate
        plot(field, show=False, savepath=args.plot)
        logger.info("Saved figure to %s", args.plot)


if __name__ == "__main__":
    main()
