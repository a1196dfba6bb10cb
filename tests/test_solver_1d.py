import numpy as np
import pytest

from heat_equation import COPPER, InvalidParameterError, Material, heat_solver_1d
from heat_equation.numerics.tridiag import solve_tridiag_scipy
from heat_equation.solver import DirectBanded, SteppedField
from heat_equation.types import KELVIN_OFFSET


def test_copper_bar_reference_scenario(copper, base_params) -> None:
    solver = heat_solver_1d(copper, n=11, **base_params)
    u0_k = 13.0 + 273.15
    dt = 16.0 / 1000

    steps = 0
    while solver.step():
        steps += 1

    assert steps == 1000
    assert solver.get_time() == pytest.approx(16.0, abs=dt / 2)

    T = solver.get_temperature()
    assert len(T) == 11
    assert T[-1] == u0_k

    x = solver.grid.x
    heated = (x >= 0.1) & (x <= 0.2)
    assert heated.sum() == 2
    assert np.all(np.asarray(T)[heated] > u0_k)


def test_step_returns_false_and_is_idempotent_after_tmax(copper) -> None:
    solver = heat_solver_1d(copper, L=1.0, tmax=2.0, u0=20.0, f=50.0, n=21)
    assert solver.run() == 1000
    assert solver.finished

    t_end = solver.get_time()
    T_end = solver.temperature

    for _ in range(5):
        assert solver.step() is False
        assert solver.get_time() == t_end
        np.testing.assert_array_equal(solver.temperature, T_end)


def test_time_is_integer_multiple_of_dt(copper) -> None:
    solver = heat_solver_1d(copper, L=1.0, tmax=0.3, u0=0.0, f=1.0, n=5)
    dt = 0.3 / 1000
    for k in range(1, 40):
        solver.step()
        assert solver.get_time() == k * dt
        assert solver.get_time() <= solver.get_tmax()


@pytest.mark.parametrize("n", [2, 3, 50])
def test_zero_source_keeps_flat_field(slow_material, n) -> None:
    solver = heat_solver_1d(slow_material, L=0.1, tmax=1e6, u0=-5.0, f=0.0, n=n)
    assert not np.any(solver.source)
    solver.run(max_steps=200)

    np.testing.assert_allclose(solver.temperature, -5.0 + KELVIN_OFFSET, rtol=0, atol=1e-9)


def test_dirichlet_end_fixed_after_every_step(slow_material) -> None:
    solver = heat_solver_1d(slow_material, L=0.2, tmax=5e4, u0=13.0, f=30.0, n=41)
    u0_k = 13.0 + 273.15
    for _ in range(100):
        assert solver.step()
        assert solver.get_temperature()[-1] == u0_k


def test_insulated_end_has_zero_gradient_discretely(slow_material) -> None:
    # Row 0 of the system reads (1+r) u0 - r u1 = u0_prev + k F0.
    solver = heat_solver_1d(slow_material, L=0.2, tmax=5e4, u0=13.0, f=30.0, n=41)
    u_prev = solver.temperature
    solver.step()
    u = solver.temperature

    r = solver.diffusion_number
    k = solver.grid.dt / slow_material.heat_capacity
    lhs = (1.0 + r) * u[0] - r * u[1]
    assert lhs == pytest.approx(u_prev[0] + k * solver.source[0], rel=1e-12)


def test_heat_stays_warmer_near_sources(slow_material) -> None:
    solver = heat_solver_1d(slow_material, L=0.5, tmax=2e4, u0=13.0, f=40.0, n=51)
    solver.run(max_steps=300)
    T = solver.temperature

    assert np.all(T >= 13.0 + KELVIN_OFFSET - 1e-9)
    # the first (stronger) source region holds the hottest point
    i_max = int(np.argmax(T))
    assert 0.0 <= solver.grid.x[i_max] <= 0.25


def test_reset_restores_initial_state(copper, base_params) -> None:
    solver = heat_solver_1d(copper, n=31, **base_params)
    F0 = solver.source

    solver.run(max_steps=250)
    assert solver.get_time() > 0.0

    solver.reset()

    assert solver.get_time() == 0.0
    assert solver.steps_taken == 0
    assert all(v == 13.0 + 273.15 for v in solver.get_temperature())
    np.testing.assert_array_equal(solver.source, F0)

    # and the run can be repeated in full
    assert solver.run() == 1000


def test_results_do_not_depend_on_tridiagonal_backend(slow_material) -> None:
    a = heat_solver_1d(slow_material, L=0.3, tmax=3e4, u0=10.0, f=20.0, n=61)
    b = heat_solver_1d(
        slow_material,
        L=0.3,
        tmax=3e4,
        u0=10.0,
        f=20.0,
        n=61,
        method=DirectBanded(solve_tridiag=solve_tridiag_scipy),
    )
    a.run(max_steps=50)
    b.run(max_steps=50)

    np.testing.assert_allclose(a.temperature, b.temperature, rtol=1e-12, atol=1e-9)


def test_get_temperature_returns_a_copy(copper) -> None:
    solver = heat_solver_1d(copper, n=5)
    T = solver.get_temperature()
    T[0] = -1.0
    arr = solver.temperature
    arr[1] = -1.0
    assert solver.get_temperature()[0] == 13.0 + KELVIN_OFFSET
    assert solver.get_temperature()[1] == 13.0 + KELVIN_OFFSET


def test_accessors(copper) -> None:
    solver = heat_solver_1d(copper, L=2.0, tmax=8.0, n=17)
    assert solver.get_n() == 17
    assert solver.get_tmax() == 8.0
    assert solver.grid.dx == pytest.approx(2.0 / 16)
    assert solver.grid.dt == pytest.approx(8.0 / 1000)
    assert solver.method.name == "direct"
    with pytest.raises(ValueError):
        solver.get_temperature_2d()


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(n=1),
        dict(n=0),
        dict(L=0.0),
        dict(L=-1.0),
        dict(tmax=0.0),
        dict(tmax=-3.0),
        dict(u0=float("nan")),
    ],
)
def test_invalid_construction_rejected(copper, kwargs) -> None:
    with pytest.raises(InvalidParameterError):
        heat_solver_1d(copper, **kwargs)


@pytest.mark.parametrize(
    "constants",
    [(0.0, 1.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, -2.0), (float("inf"), 1.0, 1.0)],
)
def test_invalid_material_rejected(constants) -> None:
    lam, rho, c = constants
    with pytest.raises(InvalidParameterError):
        Material("bad", conductivity=lam, density=rho, specific_heat=c)


def test_bar_rejects_2d_strategy(copper) -> None:
    with pytest.raises(ValueError):
        heat_solver_1d(copper, n=5, method="gauss-seidel")


def test_independent_instances_share_nothing(base_params) -> None:
    a = heat_solver_1d(COPPER, n=11, **base_params)
    b = heat_solver_1d(COPPER, n=11, **base_params)
    a.run(max_steps=10)
    assert b.get_time() == 0.0
    assert isinstance(a, SteppedField)
    assert not np.array_equal(a.temperature, b.temperature)
