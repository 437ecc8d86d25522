# src/tests/test_observations.py
"""
Observation vector sanity.

Usage (from repo root):
  python -m pytest src/tests/test_observations.py
  python -m src.tests.test_observations
"""
import numpy as np

from src.env.observations import build_observation, observation_bounds, OBS_SIZE
from src.orbit.obstacles import make_obstacle
from src.orbit.simulation import Simulation


def test_shape_dtype_and_bounds():
    sim = Simulation(seed=2)
    obs = build_observation(sim)
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,), \
        "Shape/dtype mismatch"
    low, high = observation_bounds()
    assert np.all(obs >= low) and np.all(obs <= high)
    assert obs[2] == 1.0, "player starts grounded"
    assert np.all(obs[3:] == 0.0), "no obstacles -> empty slots"


def test_nearest_first_and_passed_skipped():
    sim = Simulation(seed=2)
    far = make_obstacle(sim.field.next_id(), -1.2, 1.0, -6.0)
    near = make_obstacle(sim.field.next_id(), 0.0, 0.5, -1.0)
    passed = make_obstacle(sim.field.next_id(), 1.2, 1.0, 1.0)
    sim.obstacles = [far, near, passed]
    sim.passed_ids.add(passed.id)

    obs = build_observation(sim)
    lane0, h0, d0, p0 = obs[3:7]
    lane1, h1, d1, p1 = obs[7:11]
    assert p0 == 1.0 and p1 == 1.0 and obs[14] == 0.0, "two live slots, third empty"
    assert lane0 == 0.0 and abs(h0 - 0.25) < 1e-6, "closest obstacle comes first"
    assert lane1 == -1.0 and d1 < d0


def test_airborne_flags():
    sim = Simulation(seed=2)
    sim.jump()
    sim.update(1.0 / 60.0)
    obs = build_observation(sim)
    assert obs[0] > 0.0 and obs[1] > 0.0
    assert 0.0 <= obs[0] <= 1.0 and -1.0 <= obs[1] <= 1.0


def main():
    test_shape_dtype_and_bounds()
    test_nearest_first_and_passed_skipped()
    test_airborne_flags()
    print("✓ observation checks passed")


if __name__ == "__main__":
    main()
