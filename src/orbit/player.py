# src/orbit/player.py
from __future__ import annotations
from dataclasses import dataclass
from .config import (
    GRAVITY, JUMP_IMPULSE, MAX_FALL_SPEED, MAX_JUMP_SPEED, JUMP_TOLERANCE
)


@dataclass(frozen=True)
class PhysicsParams:
    """Per-run constants of the vertical motion model."""
    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    max_fall_speed: float = MAX_FALL_SPEED
    max_jump_speed: float = MAX_JUMP_SPEED


@dataclass
class Player:
    """
    Player seen from the side:
    - height >= 0 is elevation above the ground
    - velocity > 0 means rising, < 0 means falling
    The player never moves in lane or depth; the world comes to it.
    """
    height: float = 0.0
    velocity: float = 0.0
    physics: PhysicsParams = PhysicsParams()

    @property
    def grounded(self) -> bool:
        return self.height <= JUMP_TOLERANCE

    def try_jump(self) -> bool:
        """Jump only when (nearly) on the ground. Returns True if performed."""
        if self.grounded:
            self.velocity = self.physics.jump_impulse
            return True
        return False

    def update_physics(self, dt: float):
        """Semi-implicit Euler step under gravity, velocity clamped, ground stops the fall."""
        p = self.physics
        self.velocity -= p.gravity * dt

        # Clamp vertical speed
        if self.velocity > p.max_jump_speed: self.velocity = p.max_jump_speed
        if self.velocity < -p.max_fall_speed: self.velocity = -p.max_fall_speed

        self.height += self.velocity * dt

        # Ground contact
        if self.height <= 0.0:
            self.height = 0.0
            self.velocity = 0.0

    def reset(self):
        self.height = 0.0
        self.velocity = 0.0
