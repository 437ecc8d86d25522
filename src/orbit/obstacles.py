# src/orbit/obstacles.py
from __future__ import annotations
import itertools
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple
import numpy as np
from .config import (
    LANES, SPAWN_DEPTH, DESPAWN_DEPTH, HEIGHT_RANGES, HIT_RADIUS,
    OBSTACLE_SPEED_START, SPAWN_INTERVAL_START, SPAWN_INTERVAL_MIN,
    SPEED_STEP, INTERVAL_STEP
)


class ObstacleKind(str, Enum):
    ASTEROID = "asteroid"
    SATELLITE = "satellite"
    METEOR = "meteor"


@dataclass
class Obstacle:
    """Something flying at the player. position = (lane x, height y, depth z)."""
    id: int
    position: np.ndarray
    kind: ObstacleKind

    @property
    def lane(self) -> float:
        return float(self.position[0])

    @property
    def height(self) -> float:
        return float(self.position[1])

    @property
    def depth(self) -> float:
        return float(self.position[2])


def make_obstacle(obstacle_id: int, lane: float, height: float, depth: float,
                  kind: ObstacleKind = ObstacleKind.ASTEROID) -> Obstacle:
    return Obstacle(id=obstacle_id,
                    position=np.array([lane, height, depth], dtype=np.float64),
                    kind=ObstacleKind(kind))


def find_collision(player_pos: np.ndarray, obstacles: Iterable[Obstacle],
                   radius: float = HIT_RADIUS) -> Optional[Obstacle]:
    """First obstacle (in spawn order) closer than `radius` to the player, else None."""
    for ob in obstacles:
        if np.linalg.norm(ob.position - player_pos) < radius:
            return ob
    return None


class ObstacleField:
    """
    Owns the live obstacle stream: moves it toward the player, spawns on a
    time accumulator and prunes what has gone behind.
    Difficulty (speed, spawn interval) lives here because both knobs drive it.
    """
    def __init__(self, rng: random.Random):
        self.rng = rng
        self._ids = itertools.count(1)
        self.obstacles: List[Obstacle] = []
        self.speed = OBSTACLE_SPEED_START
        self.spawn_interval = SPAWN_INTERVAL_START
        self.spawn_accumulator = 0.0

    def reset(self):
        self.obstacles = []
        self.speed = OBSTACLE_SPEED_START
        self.spawn_interval = SPAWN_INTERVAL_START
        self.spawn_accumulator = 0.0

    def next_id(self) -> int:
        return next(self._ids)

    # --- per-tick steps ---

    def scroll(self, dt: float):
        """Bring every live obstacle closer by speed*dt along depth."""
        dz = self.speed * dt
        for ob in self.obstacles:
            ob.position[2] += dz

    def accumulate_and_spawn(self, dt: float) -> int:
        """
        Bank dt and spawn once per full interval, keeping the remainder.
        A single long dt can spawn several obstacles. Returns the spawn count.
        """
        self.spawn_accumulator += dt
        spawned = 0
        if self.spawn_interval <= 0.0:
            return spawned
        while self.spawn_accumulator >= self.spawn_interval:
            self.spawn_accumulator -= self.spawn_interval
            if self.spawn_accumulator < 0.0:
                self.spawn_accumulator = 0.0
            self._spawn()
            spawned += 1
        return spawned

    def prune(self) -> List[Obstacle]:
        """Drop obstacles behind the player (order kept). Returns the dropped ones."""
        kept, dropped = [], []
        for ob in self.obstacles:
            (dropped if ob.depth > DESPAWN_DEPTH else kept).append(ob)
        self.obstacles = kept
        return dropped

    def ramp_difficulty(self):
        """One pass event: faster obstacles, shorter interval (floored)."""
        self.speed += SPEED_STEP
        if self.spawn_interval > SPAWN_INTERVAL_MIN:
            self.spawn_interval = max(SPAWN_INTERVAL_MIN, self.spawn_interval - INTERVAL_STEP)

    # --- spawning ---

    def _roll(self) -> Tuple[ObstacleKind, float, float]:
        kind = self.rng.choice(list(ObstacleKind))
        lane = self.rng.choice(LANES)
        lo, hi = HEIGHT_RANGES[kind.value]
        return kind, lane, self.rng.uniform(lo, hi)

    def _spawn(self) -> Obstacle:
        kind, lane, height = self._roll()
        ob = make_obstacle(self.next_id(), lane, height, SPAWN_DEPTH, kind)
        self.obstacles.append(ob)
        return ob
