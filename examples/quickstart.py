from __future__ import annotations


def main() -> None:
    from heat_equation import COPPER, heat_solver_1d, heat_solver_2d

    bar = heat_solver_1d(COPPER, L=1.0, tmax=16.0, u0=13.0, f=80.0, n=101)
    while bar.step():
        pass
    T = bar.get_temperature()
    print(f"bar:   t={bar.get_time():.3f} s  T_max={max(T):.3f} K  T(L)={T[-1]:.2f} K")

    plate = heat_solver_2d(COPPER, L=1.0, tmax=16.0, u0=13.0, f=80.0, n=21)
    plate.run(max_steps=50)
    rows = plate.get_temperature_2d()
    print(f"plate: t={plate.get_time():.3f} s  T_max={max(map(max, rows)):.3f} K")
    if plate.last_relaxation is not None:
        print("last step sweeps:", plate.last_relaxation.sweeps)


if __name__ == "__main__":
    main()
