import numpy as np
import pytest

from heat_equation import RelaxationConfig, heat_solver_2d
from heat_equation.exceptions import InvalidParameterError
from heat_equation.solver import BoundedRelaxation, SteppedField
from heat_equation.types import KELVIN_OFFSET


@pytest.fixture
def plate(slow_material):
    """Plate with r = 1 and a weak source."""

    def _make(n: int = 13, **kwargs) -> SteppedField:
        # dx = L/(n-1); pick tmax so r = alpha*dt/dx**2 == 1
        L = 0.12
        dx = L / (n - 1)
        tmax = 1000.0 * dx * dx / slow_material.alpha()
        params = dict(L=L, tmax=tmax, u0=13.0, f=0.05, n=n)
        params.update(kwargs)
        return heat_solver_2d(slow_material, **params)

    return _make


def test_layout_and_accessors(plate) -> None:
    solver = plate(n=9)
    assert solver.get_n() == 9
    assert solver.method.name == "relaxation"
    assert solver.diffusion_number == pytest.approx(1.0)

    grid = solver.get_temperature_2d()
    assert len(grid) == 9
    assert all(len(row) == 9 for row in grid)
    assert len(solver.get_temperature()) == 81


def test_dirichlet_edges_fixed_after_every_step(plate) -> None:
    solver = plate(n=9)
    u0_k = 13.0 + 273.15
    for _ in range(20):
        assert solver.step()
        T = solver.temperature
        assert np.all(T[-1, :] == u0_k)
        assert np.all(T[:, -1] == u0_k)


def test_zero_source_keeps_flat_field(plate) -> None:
    solver = plate(n=8, f=0.0, u0=-40.0)
    solver.run(max_steps=30)

    np.testing.assert_allclose(solver.temperature, -40.0 + KELVIN_OFFSET, rtol=0, atol=1e-9)
    assert solver.last_relaxation is not None
    assert solver.last_relaxation.converged


def test_sources_heat_the_plate(plate) -> None:
    solver = plate(n=13)
    solver.run(max_steps=10)

    T = solver.temperature
    F = solver.source
    u0_k = 13.0 + 273.15

    assert np.all(T >= u0_k - 1e-9)
    assert T[F > 0].mean() > T[F == 0].mean()
    assert solver.last_relaxation is not None
    assert 1 <= solver.last_relaxation.sweeps <= 100


def test_nearly_symmetric_about_diagonal(plate) -> None:
    # Layout and boundaries are symmetric under x <-> y; only the sweep order is not.
    solver = plate(n=11, relaxation=RelaxationConfig(max_sweeps=5000, tol=1e-11))
    solver.run(max_steps=5)

    T = solver.temperature
    np.testing.assert_allclose(T, T.T, rtol=0, atol=1e-8)


def test_default_cap_close_to_converged_solution(plate) -> None:
    loose = plate(n=11)
    tight = plate(n=11, relaxation=RelaxationConfig(max_sweeps=5000, tol=1e-11))
    for _ in range(5):
        loose.step()
        tight.step()

    assert np.max(np.abs(loose.temperature - tight.temperature)) < 1e-4


def test_get_temperature_2d_is_row_major(plate) -> None:
    solver = plate(n=7)
    solver.run(max_steps=3)

    rows = solver.get_temperature_2d()
    T = solver.temperature
    for j in range(7):
        for i in range(7):
            assert rows[j][i] == T[j, i]
    # flattened view follows the same order
    assert solver.get_temperature() == [T[j, i] for j in range(7) for i in range(7)]


def test_runs_to_completion_and_stays_finished(plate) -> None:
    solver = plate(n=4)
    assert solver.run() == 1000
    assert solver.get_time() == pytest.approx(solver.get_tmax())

    snapshot = solver.temperature
    assert solver.step() is False
    assert solver.step() is False
    np.testing.assert_array_equal(solver.temperature, snapshot)
    assert solver.steps_taken == 1000


def test_reset_restores_initial_state(plate) -> None:
    solver = plate(n=9)
    F0 = solver.source
    solver.run(max_steps=7)

    solver.reset()

    assert solver.get_time() == 0.0
    assert solver.last_relaxation is None
    np.testing.assert_array_equal(solver.temperature, np.full((9, 9), 13.0 + 273.15))
    np.testing.assert_array_equal(solver.source, F0)


def test_smallest_plate(plate) -> None:
    solver = plate(n=2)
    solver.run(max_steps=3)
    T = solver.temperature
    assert T.shape == (2, 2)
    assert T[0, 1] == T[1, 0] == T[1, 1] == 13.0 + 273.15


def test_relaxation_and_method_are_exclusive(slow_material) -> None:
    with pytest.raises(ValueError):
        heat_solver_2d(
            slow_material,
            n=5,
            relaxation=RelaxationConfig(),
            method=BoundedRelaxation(),
        )


def test_plate_rejects_1d_strategy(slow_material) -> None:
    with pytest.raises(ValueError):
        heat_solver_2d(slow_material, n=5, method="thomas")


@pytest.mark.parametrize("kwargs", [dict(n=1), dict(L=0.0), dict(tmax=-1.0)])
def test_invalid_construction_rejected(slow_material, kwargs) -> None:
    with pytest.raises(InvalidParameterError):
        heat_solver_2d(slow_material, **kwargs)
