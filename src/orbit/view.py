# src/orbit/view.py
from __future__ import annotations
import math
from typing import Optional, Tuple
import pygame
from .config import (
    WIDTH, HEIGHT, PX_PER_UNIT, GROUND_Y, PLAYER_SCREEN_X, PLAYER_SIZE,
    OBSTACLE_SIZE, LANES, COLOR_BG, COLOR_FG, COLOR_ACCENT, COLOR_GROUND,
    COLOR_DANGER, COLOR_KIND
)
from .simulation import Snapshot


def world_to_screen(height: float, depth: float) -> Tuple[int, int]:
    """Side view: depth runs left->right toward the player, height goes up."""
    x = PLAYER_SCREEN_X + depth * PX_PER_UNIT
    y = GROUND_Y - height * PX_PER_UNIT
    return int(x), int(y)


def _lane_shade(color, lane: float):
    # far lane darker, near lane brighter
    k = {LANES[0]: 0.6, LANES[1]: 0.8, LANES[2]: 1.0}.get(lane, 0.8)
    return tuple(int(c * k) for c in color)


def draw_world(surf: pygame.Surface, snap: Snapshot):
    surf.fill(COLOR_BG)

    # Ground strip with tick marks that turn with the world angle
    pygame.draw.rect(surf, COLOR_GROUND, pygame.Rect(0, GROUND_Y, WIDTH, HEIGHT - GROUND_Y))
    spacing = 60
    offset = int((snap.world_angle / (2 * math.pi)) * spacing * 8) % spacing
    for x in range(-spacing, WIDTH + spacing, spacing):
        pygame.draw.line(surf, (50, 66, 92), (x + offset, GROUND_Y), (x + offset - 20, HEIGHT), 2)

    # Obstacles: far lanes first so the near lane is drawn on top
    items = sorted(snap.obstacles.values(), key=lambda item: item[0][0])
    for (lane, height, depth), kind in items:
        cx, cy = world_to_screen(height, depth)
        color = _lane_shade(COLOR_KIND[kind.value], lane)
        pygame.draw.circle(surf, color, (cx, cy), OBSTACLE_SIZE // 2)

    # Player (lane 0, depth 0)
    px, py = world_to_screen(snap.height, 0.0)
    rect = pygame.Rect(px - PLAYER_SIZE // 2, py - PLAYER_SIZE, PLAYER_SIZE, PLAYER_SIZE)
    pygame.draw.rect(surf, COLOR_DANGER if snap.is_game_over else COLOR_ACCENT, rect)


def draw_hud(surf: pygame.Surface, font: pygame.font.Font, snap: Snapshot,
             seed: Optional[int] = None, speed: Optional[float] = None):
    parts = [f"Score: {snap.score}"]
    if seed is not None:
        parts.append(f"Seed: {seed}")
    if speed is not None:
        parts.append(f"Speed: {speed:.2f}")
    parts.append("OVER" if snap.is_game_over else "ALIVE")
    surf.blit(font.render("   ".join(parts), True, COLOR_FG), (12, 10))
