import logging
import math

import numpy as np
import pytest
import chain_sim.simulation as simulation
from chain_sim.simulation import ChainSimulation
from chain_sim.profiler import Profiler
from chain_sim.types import ChainState


def test_reset_restores_snapshot_and_is_idempotent():
    sim = ChainSimulation(n_links=9, link_length=60.0)
    initial, _ = sim.snapshot()
    for _ in range(20):
        sim.advance()
    assert not np.array_equal(sim.snapshot()[0], initial)

    sim.reset()
    once_p, once_v = sim.snapshot()
    sim.reset()
    twice_p, twice_v = sim.snapshot()

    np.testing.assert_array_equal(once_p, initial)
    np.testing.assert_array_equal(once_v, np.zeros((9, 2)))
    np.testing.assert_array_equal(twice_p, once_p)
    np.testing.assert_array_equal(twice_v, once_v)
    assert sim.time == 0.0
    assert sim.frame == 0


def test_reset_keeps_accelerations():
    sim = ChainSimulation(n_links=4, gravity=(1.0, -3.0))
    sim.advance()
    sim.reset()
    np.testing.assert_array_equal(sim.state.accelerations, np.tile([1.0, -3.0], (4, 1)))


def test_frame_advances_time_by_exactly_frame_delta():
    sim = ChainSimulation(n_links=5, substeps=3)
    sim.advance(0.05)
    assert sim.time == 0.05
    sim.advance(0.05)
    assert sim.time == 0.05 + 0.05
    assert sim.frame == 2


def test_substeps_split_frame_delta_evenly(monkeypatch):
    calls = []
    original = simulation.semi_implicit_euler_step

    def recording_step(positions, velocities, accelerations, dt):
        calls.append(dt)
        original(positions, velocities, accelerations, dt)

    monkeypatch.setattr(simulation, "semi_implicit_euler_step", recording_step)

    sim = ChainSimulation(n_links=5, substeps=7)
    sim.advance(0.05)

    assert len(calls) == 7
    assert all(dt == 0.05 / 7 for dt in calls)
    assert sim.substep_dt(0.05) == 0.05 / 7
    assert math.fsum(calls) == pytest.approx(0.05, rel=1e-12)


def test_solver_runs_after_integrator_each_substep(monkeypatch):
    order = []
    integrate = simulation.semi_implicit_euler_step
    solve = simulation.solve_chain_constraints

    def tracking_integrate(*args, **kwargs):
        order.append("integrate")
        return integrate(*args, **kwargs)

    def tracking_solve(*args, **kwargs):
        order.append("solve")
        return solve(*args, **kwargs)

    monkeypatch.setattr(simulation, "semi_implicit_euler_step", tracking_integrate)
    monkeypatch.setattr(simulation, "solve_chain_constraints", tracking_solve)

    ChainSimulation(n_links=3, substeps=4).advance()
    assert order == ["integrate", "solve"] * 4


def test_snapshot_is_a_copy():
    sim = ChainSimulation(n_links=4)
    positions, velocities = sim.snapshot()
    positions[:] = 1e6
    velocities[:] = 1e6
    assert not np.any(sim.state.positions == 1e6)
    assert not sim.state.velocities.any()


def test_initial_positions_are_copied():
    pts = np.array([[1.0, 0.0], [2.0, 0.0]])
    sim = ChainSimulation.from_positions(pts, start=(0.0, 0.0), end=(3.0, 0.0), link_length=1.0)
    pts[:] = 99.0
    np.testing.assert_array_equal(sim.state.positions, [[1.0, 0.0], [2.0, 0.0]])
    assert sim.n_links == 2


def test_chain_sags_under_gravity():
    sim = ChainSimulation()
    for _ in range(20):
        sim.advance()
    positions, velocities = sim.snapshot()
    print("middle particle", positions[7], "max stretch", sim.max_stretch())
    assert np.all(np.isfinite(positions))
    assert np.all(np.isfinite(velocities))
    assert positions[7, 1] < 100.0


def test_single_particle_chain():
    sim = ChainSimulation(n_links=1, start=(-10.0, 0.0), end=(10.0, 0.0), link_length=10.0)
    for _ in range(10):
        sim.advance()
    assert sim.state.positions.shape == (1, 2)
    assert np.all(np.isfinite(sim.state.positions))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n_links": 0},
        {"link_length": 0.0},
        {"link_length": -5.0},
        {"link_length": float("nan")},
        {"dt": 0.0},
        {"dt": -0.01},
        {"substeps": 0},
        {"solver_iters": 0},
        {"solver_iters": 2.0},
        {"substeps": 2.5},
        {"n_links": 2.5},
        {"n_links": True},
        {"beta": -0.1},
        {"beta": 1.5},
        {"start": (0.0, 0.0), "end": (0.0, 0.0)},
        {"start": (0.0, float("inf"))},
        {"gravity": (0.0, 0.0, 1.0)},
        {"n_links": 3, "initial_positions": [(0.0, 0.0), (1.0, 0.0)]},
    ],
)
def test_invalid_configuration_rejected(kwargs):
    with pytest.raises(ValueError):
        ChainSimulation(**kwargs)


@pytest.mark.parametrize("frame_delta", [0.0, -0.05, float("nan")])
def test_invalid_frame_delta_rejected(frame_delta):
    sim = ChainSimulation(n_links=2)
    with pytest.raises(ValueError):
        sim.advance(frame_delta)
    assert sim.frame == 0


def test_chain_state_rejects_mismatched_buffers():
    with pytest.raises(ValueError):
        ChainState(positions=[(0.0, 0.0), (1.0, 0.0)], velocities=[(0.0, 0.0)])
    with pytest.raises(ValueError):
        ChainState(positions=np.zeros((0, 2)))
    with pytest.raises(ValueError):
        ChainState(positions=[1.0, 2.0])


def test_chain_state_copy_is_independent():
    state = ChainState(positions=[(0.0, 0.0), (1.0, 0.0)])
    clone = state.copy()
    clone.positions[0] = (5.0, 5.0)
    clone.initial_positions[1] = (7.0, 7.0)
    np.testing.assert_array_equal(state.positions, [[0.0, 0.0], [1.0, 0.0]])
    np.testing.assert_array_equal(state.initial_positions, [[0.0, 0.0], [1.0, 0.0]])


def test_profiler_times_each_substep(caplog):
    prof = Profiler()
    sim = ChainSimulation(n_links=5, substeps=5, profiler=prof)
    for _ in range(3):
        sim.advance()

    summary = prof.stats.summary()
    assert summary["integrate"]["n"] == 15
    assert summary["solve"]["n"] == 15

    with caplog.at_level(logging.INFO, logger="chain_sim.profiler"):
        prof.log_summary()
    assert "integrate" in caplog.text
    assert "solve" in caplog.text


def test_reset_is_logged(caplog):
    sim = ChainSimulation(n_links=2)
    with caplog.at_level(logging.DEBUG, logger="chain_sim.simulation"):
        sim.reset()
    assert "reset" in caplog.text


def test_numpy_integer_counts_accepted():
    sim = ChainSimulation(n_links=np.int64(4), substeps=np.int32(3))
    sim.advance()
    assert len(sim.state) == sim.n_links == 4


def test_anchor_fields_cannot_be_reassigned():
    sim = ChainSimulation(n_links=3, start=(-10.0, 0.0), end=(10.0, 0.0), link_length=5.0)
    with pytest.raises(AttributeError):
        sim.start = (0.0, 50.0)
    with pytest.raises(AttributeError):
        sim.end = (0.0, 50.0)

    assert sim.start == (-10.0, 0.0)
    start, end = sim.anchors()
    np.testing.assert_array_equal(start, [-10.0, 0.0])
    np.testing.assert_array_equal(end, [10.0, 0.0])

    # other fields stay writable
    sim.beta = 0.5
    assert sim.beta == 0.5
