# src/tests/test_player.py
"""
Vertical motion checks for Player.

Usage (from repo root):
  python -m pytest src/tests/test_player.py
  python -m src.tests.test_player
"""
from src.orbit.config import (
    JUMP_IMPULSE, MAX_FALL_SPEED, MAX_JUMP_SPEED, GRAVITY
)
from src.orbit.player import Player, PhysicsParams


def test_grounded_jump_sets_impulse():
    p = Player()
    assert p.try_jump() is True, "Jump from the ground should be performed"
    assert p.velocity == JUMP_IMPULSE
    assert p.height == 0.0


def test_jump_tolerance_near_ground():
    p = Player(height=0.05, velocity=-0.4)
    assert p.try_jump(), "Jump within tolerance should be accepted"
    assert p.velocity == JUMP_IMPULSE


def test_no_mid_air_jump():
    p = Player(height=0.5, velocity=1.0)
    assert p.try_jump() is False
    assert p.velocity == 1.0, "Airborne jump must not touch velocity"


def test_velocity_clamped_both_ways():
    p = Player(height=1.0, velocity=100.0)
    p.update_physics(0.01)
    assert p.velocity == MAX_JUMP_SPEED

    p = Player(height=50.0, velocity=-100.0)
    p.update_physics(0.01)
    assert p.velocity == -MAX_FALL_SPEED


def test_fall_lands_on_ground():
    p = Player(height=0.0, velocity=-50.0)
    p.update_physics(1.0)
    assert p.height == 0.0 and p.velocity == 0.0


def test_jump_arc_returns_to_ground():
    p = Player()
    p.try_jump()
    dt = 1.0 / 60.0
    peak = 0.0
    for _ in range(120):
        p.update_physics(dt)
        assert p.height >= 0.0, "height must never go negative"
        peak = max(peak, p.height)
    assert p.height == 0.0 and p.velocity == 0.0, "Player should have landed after 2s"
    # v^2 / 2g, loosened for the discrete step
    assert abs(peak - JUMP_IMPULSE ** 2 / (2 * GRAVITY)) < 0.05


def test_custom_physics():
    p = Player(physics=PhysicsParams(gravity=0.0, jump_impulse=2.0))
    p.try_jump()
    p.update_physics(0.5)
    assert p.velocity == 2.0 and p.height == 1.0


def main():
    test_grounded_jump_sets_impulse()
    test_jump_tolerance_near_ground()
    test_no_mid_air_jump()
    test_velocity_clamped_both_ways()
    test_fall_lands_on_ground()
    test_jump_arc_returns_to_ground()
    test_custom_physics()
    print("✓ player checks passed")


if __name__ == "__main__":
    main()
