# src/orbit/simulation.py
"""
Deterministic per-tick simulation of the orbit runner.

One tick, always in this order:
  player physics -> world angle + obstacle scroll -> spawn -> prune
  -> scoring / difficulty -> collision

`update(dt)` returns True on the tick the player gets hit. After that the
run is over and every further `update` is a no-op until `reset()`.
The caller owns timing: dt is expected >= 0 and is not clamped here.
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Set, Tuple
import numpy as np
from .config import (
    TWO_PI, ROTATION_SPEED, PASS_DEPTH, HIT_RADIUS, PLAYER_LANE, PLAYER_DEPTH
)
from .obstacles import Obstacle, ObstacleField, ObstacleKind, find_collision
from .player import Player, PhysicsParams


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of what a renderer needs for one frame."""
    height: float
    velocity: float
    world_angle: float
    score: int
    is_game_over: bool
    obstacles: Mapping[int, Tuple[Tuple[float, float, float], ObstacleKind]]


class Simulation:
    def __init__(self,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None,
                 physics: Optional[PhysicsParams] = None,
                 rotation_speed: float = ROTATION_SPEED):
        if rng is None:
            if seed is None:
                seed = random.randrange(0, 2**32 - 1)
            rng = random.Random(seed)
        self.seed = seed
        self.rng = rng
        self.rotation_speed = rotation_speed

        self.player = Player(physics=physics or PhysicsParams())
        self.field = ObstacleField(rng)

        self.world_angle = 0.0
        self.score = 0
        self.passed_ids: Set[int] = set()
        self.is_game_over = False
        self.hit_obstacle: Optional[Obstacle] = None
        self.elapsed = 0.0

    # -------------------- Lifecycle --------------------

    def reset(self):
        self.player.reset()
        self.field.reset()
        self.world_angle = 0.0
        self.score = 0
        self.passed_ids = set()
        self.is_game_over = False
        self.hit_obstacle = None
        self.elapsed = 0.0

    def jump(self) -> bool:
        if self.is_game_over:
            return False
        return self.player.try_jump()

    def update(self, dt: float) -> bool:
        if self.is_game_over:
            return False

        self.player.update_physics(dt)
        self._scroll_world(dt)
        self.field.accumulate_and_spawn(dt)
        for ob in self.field.prune():
            self.passed_ids.discard(ob.id)
        self._score_passes()
        self.elapsed += dt

        hit = find_collision(self.player_position(), self.field.obstacles, HIT_RADIUS)
        if hit is not None:
            self.is_game_over = True
            self.hit_obstacle = hit
            return True
        return False

    # -------------------- Tick steps --------------------

    def _scroll_world(self, dt: float):
        self.world_angle = (self.world_angle + self.rotation_speed * dt) % TWO_PI
        self.field.scroll(dt)

    def _score_passes(self):
        for ob in self.field.obstacles:
            if ob.depth > PASS_DEPTH and ob.id not in self.passed_ids:
                self.passed_ids.add(ob.id)
                self.score += 1
                self.field.ramp_difficulty()

    # -------------------- Observable state --------------------

    def player_position(self) -> np.ndarray:
        return np.array([PLAYER_LANE, self.player.height, PLAYER_DEPTH], dtype=np.float64)

    @property
    def height(self) -> float:
        return self.player.height

    @height.setter
    def height(self, value: float):
        self.player.height = value

    @property
    def velocity(self) -> float:
        return self.player.velocity

    @velocity.setter
    def velocity(self, value: float):
        self.player.velocity = value

    @property
    def obstacles(self) -> List[Obstacle]:
        return self.field.obstacles

    @obstacles.setter
    def obstacles(self, value: List[Obstacle]):
        self.field.obstacles = list(value)

    @property
    def obstacle_speed(self) -> float:
        return self.field.speed

    @obstacle_speed.setter
    def obstacle_speed(self, value: float):
        self.field.speed = value

    @property
    def spawn_interval(self) -> float:
        return self.field.spawn_interval

    @spawn_interval.setter
    def spawn_interval(self, value: float):
        self.field.spawn_interval = value

    @property
    def spawn_accumulator(self) -> float:
        return self.field.spawn_accumulator

    def snapshot(self) -> Snapshot:
        obstacles = {
            ob.id: (tuple(float(v) for v in ob.position), ob.kind)
            for ob in self.field.obstacles
        }
        return Snapshot(
            height=self.player.height,
            velocity=self.player.velocity,
            world_angle=self.world_angle,
            score=self.score,
            is_game_over=self.is_game_over,
            obstacles=MappingProxyType(obstacles),
        )
