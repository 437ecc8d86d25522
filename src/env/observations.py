# src/env/observations.py
"""
Fixed-size observation vector for an agent playing the orbit runner.

Layout (float32, length 3 + 4 * OBS_NEAREST):
  [height_norm, vy_norm, grounded,
   lane, height, depth, present   for the nearest obstacle not yet passed,
   ... repeated OBS_NEAREST times, closest first, zeros when missing]
"""
from __future__ import annotations
from typing import List
import numpy as np
from ..orbit.config import (
    OBS_NEAREST, OBS_MAX_HEIGHT, MAX_JUMP_SPEED, MAX_FALL_SPEED,
    LANES, SPAWN_DEPTH, PASS_DEPTH
)

OBS_SIZE = 3 + 4 * OBS_NEAREST
LANE_SPAN = max(abs(x) for x in LANES)


def observation_bounds():
    low = np.array([0.0, -1.0, 0.0] + [-1.0, 0.0, 0.0, 0.0] * OBS_NEAREST, dtype=np.float32)
    high = np.array([1.0, 1.0, 1.0] + [1.0, 1.0, 1.0, 1.0] * OBS_NEAREST, dtype=np.float32)
    return low, high


def build_observation(sim) -> np.ndarray:
    y_norm = min(1.0, sim.height / OBS_MAX_HEIGHT)
    vy = sim.velocity
    vy_norm = vy / MAX_JUMP_SPEED if vy >= 0 else vy / MAX_FALL_SPEED
    grounded = 1.0 if sim.player.grounded else 0.0

    ahead = [ob for ob in sim.obstacles if ob.id not in sim.passed_ids]
    ahead.sort(key=lambda ob: ob.depth, reverse=True)  # closest to the player first

    slots: List[float] = []
    for ob in ahead[:OBS_NEAREST]:
        depth_norm = (ob.depth - SPAWN_DEPTH) / (PASS_DEPTH - SPAWN_DEPTH)
        slots += [ob.lane / LANE_SPAN, ob.height / OBS_MAX_HEIGHT, depth_norm, 1.0]
    slots += [0.0] * (4 * OBS_NEAREST - len(slots))

    obs = np.array([y_norm, vy_norm, grounded] + slots, dtype=np.float32)
    low, high = observation_bounds()
    return np.clip(obs, low, high)
