# src/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.orbit.config import WIDTH, HEIGHT
from src.orbit.simulation import Simulation
from src.orbit.view import draw_world, draw_hud
from src.env.observations import build_observation, observation_bounds


class OrbitHopEnv(gym.Env):
    """
    Orbit Hop Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal, fixed dt, never clamped).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Observation: see src/env/observations.py, float32.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unknown render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        # Internal sim timing
        self.sim_fps = 60
        self.dt = 1.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.sim: Optional[Simulation] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Seeded -> use it directly; otherwise draw one from the env's generator
        if seed is not None:
            sim_seed = int(seed)
        else:
            sim_seed = int(self.np_random.integers(0, 2**31 - 1))

        self.sim = Simulation(seed=sim_seed)
        self.timestep = 0
        self.current_seed = sim_seed

        obs = build_observation(self.sim)
        info = {"seed": self.current_seed, "score": 0}
        return obs, info

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim is not None, "Call reset() before step()"

        if int(action) == 1:
            self.sim.jump()

        for _ in range(self.frame_skip):
            if self.sim.update(self.dt):
                break

        reward = -1.0 if self.sim.is_game_over else 1.0

        self.timestep += 1
        terminated = self.sim.is_game_over
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = build_observation(self.sim)
        hit = self.sim.hit_obstacle
        info = {
            "score": self.sim.score,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "elapsed": self.sim.elapsed,
            "hit_kind": hit.kind.value if hit is not None else None,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.sim is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Orbit Hop - Gym Env")
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.clock = pygame.time.Clock()
            self.font = pygame.font.SysFont("jetbrainsmono", 18)

        snap = self.sim.snapshot()
        draw_world(self.screen, snap)
        draw_hud(self.screen, self.font, snap, seed=self.current_seed)

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
