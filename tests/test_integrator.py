import numpy as np
import pytest

from pilotwave.config import ConfigurationError
from pilotwave.guidance import velocity
from pilotwave.integrator import euler_step, run_simulation
from pilotwave.types import PacketParams, ParticleState, SimulationConfig, Trajectory


SLIT1 = PacketParams(0.0, 1.5, 1.0, 0.0, 5.0)
SLIT2 = PacketParams(0.0, -1.5, 1.0, 0.0, 5.0)

TWO_SLIT = {
    "initialPosition": {"x": -0.5, "y": -5},
    "slit1": {"centerX": 0, "centerY": 1.5, "width": 1.0, "momentumX": 0, "momentumY": 5},
    "slit2": {"centerX": 0, "centerY": -1.5, "width": 1.0, "momentumX": 0, "momentumY": 5},
    "dt": 0.02,
    "steps": 500,
}


def _config(steps=50, dt=0.01, start=(0.3, -2.0)):
    return SimulationConfig(initial_position=start, slit1=SLIT1, slit2=SLIT2, dt=dt, steps=steps)


def test_two_slit_scenario_drifts_forward():
    traj = run_simulation(TWO_SLIT)
    assert isinstance(traj, Trajectory)
    assert len(traj) == 501
    assert traj[0] == (0.0, -0.5, -5.0)
    assert np.isclose(traj.final.t, 500 * 0.02)
    # net forward drift along +y driven by the packets' momentum
    assert traj.final.y > 0.0
    assert traj.final.y - traj[0].y > 10.0
    # no x momentum and equal envelopes in x: the particle stays on its line
    assert np.allclose(traj.positions[:, 0], -0.5, atol=1e-9)
    assert np.all(np.isfinite(traj.samples))


@pytest.mark.parametrize("steps", [0, 1, 7, 120])
def test_length_and_first_sample(steps):
    cfg = _config(steps=steps)
    traj = run_simulation(cfg)
    assert len(traj) == steps + 1
    first = traj[0]
    assert first.t == 0.0 and first.x == 0.3 and first.y == -2.0


def test_zero_steps_ignores_slit_parameters():
    far = PacketParams(1e3, 1e3, 1e-3, 1e6, -1e6)
    cfg = SimulationConfig(initial_position=(1.0, 2.0), slit1=far, slit2=SLIT2, dt=0.5, steps=0)
    traj = run_simulation(cfg)
    assert len(traj) == 1
    assert traj.to_records() == [{"t": 0.0, "x": 1.0, "y": 2.0}]


def test_times_are_spaced_by_dt():
    dt = 0.013
    traj = run_simulation(_config(steps=200, dt=dt))
    assert np.allclose(np.diff(traj.times), dt, rtol=0.0, atol=1e-12)
    assert np.all(np.diff(traj.times) > 0.0)


def test_each_sample_is_one_euler_step():
    cfg = _config(steps=20, dt=0.02)
    traj = run_simulation(cfg)
    for i in range(len(traj) - 1):
        p, q = traj[i], traj[i + 1]
        vx, vy = velocity(p.x, p.y, SLIT1, SLIT2)
        assert np.isclose(q.x, p.x + vx * cfg.dt, rtol=1e-12, atol=1e-12)
        assert np.isclose(q.y, p.y + vy * cfg.dt, rtol=1e-12, atol=1e-12)


def test_euler_step_matches_run_simulation():
    cfg = _config(steps=30, dt=0.02)
    traj = run_simulation(cfg)
    state = ParticleState(0.0, *cfg.initial_position)
    for i in range(1, len(traj)):
        out = euler_step(state, SLIT1, SLIT2, cfg.dt)
        assert out is state
        assert np.allclose((state.t, state.x, state.y), tuple(traj[i]), rtol=1e-12, atol=1e-12)


def test_particle_at_node_stays_put():
    # psi is exactly zero this far out, so every step has zero velocity
    cfg = _config(steps=25, dt=0.1, start=(0.0, 1e3))
    traj = run_simulation(cfg)
    assert len(traj) == 26
    assert np.all(traj.positions[:, 0] == 0.0)
    assert np.all(traj.positions[:, 1] == 1e3)
    assert np.isclose(traj.final.t, 2.5)


def test_invalid_config_fails_before_running():
    bad_width = SimulationConfig((0.0, 0.0), PacketParams(0.0, 1.0, 0.0, 0.0, 1.0), SLIT2, 0.01, 10)
    with pytest.raises(ConfigurationError, match="slit1.width"):
        run_simulation(bad_width)
    with pytest.raises(ConfigurationError, match="dt"):
        run_simulation(_config(dt=0.0))
    with pytest.raises(ConfigurationError, match="steps"):
        run_simulation(_config(steps=-1))


def test_trajectory_is_read_only():
    traj = run_simulation(_config(steps=3))
    with pytest.raises(ValueError):
        traj.samples[0, 0] = 1.0


def test_infinite_dt_is_rejected():
    with pytest.raises(ConfigurationError, match="dt"):
        run_simulation(_config(steps=3, dt=float("inf")))


def test_slicing_returns_trajectory():
    traj = run_simulation(_config(steps=10, dt=0.02))
    head = traj[:4]
    assert isinstance(head, Trajectory)
    assert len(head) == 4
    assert head[0] == traj[0] and head[-1] == traj[3]
    tail = traj[5:]
    assert len(tail) == 6 and tail.final == traj.final
    assert len(traj[20:]) == 0
