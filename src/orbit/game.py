# src/orbit/game.py
# command is python -m src.orbit.game [--seed N | --seed -1] [--no-clamp]
import sys, argparse
import pygame
from pygame import K_SPACE, K_ESCAPE, K_r
from .config import WIDTH, HEIGHT, FPS, MAX_FRAME_DT, SEED_DEFAULT, COLOR_FG
from .simulation import Simulation
from .view import draw_world, draw_hud


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Spawn seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--no-clamp", action="store_true",
                   help="Feed raw frame deltas to the simulation (no stall clamp).")
    return p.parse_args()


def run():
    args = parse_args()

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        launch_seed = SEED_DEFAULT
    elif args.seed == -1:
        launch_seed = None  # signals Simulation to randomize
    else:
        launch_seed = args.seed

    pygame.init()
    pygame.display.set_caption("Orbit Hop")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)
    big = pygame.font.SysFont("jetbrainsmono", 36)

    sim = Simulation(seed=launch_seed)
    running = False  # ready -> running -> over

    def start():
        nonlocal running
        sim.reset()
        running = True

    def press():
        # one button: start when idle, jump when running
        if running:
            sim.jump()
        else:
            start()

    while True:
        dt = clock.tick(FPS) / 1000.0
        if not args.no_clamp and dt > MAX_FRAME_DT:  # clamp stalls
            dt = MAX_FRAME_DT

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_SPACE:
                    press()
                if event.key == K_r and sim.is_game_over:
                    start()
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                press()

        if running and sim.update(dt):
            running = False

        # --- Render ---
        snap = sim.snapshot()
        draw_world(screen, snap)
        draw_hud(screen, font, snap, seed=sim.seed, speed=sim.obstacle_speed)
        screen.blit(font.render("SPACE / click jump | R restart | ESC quit", True, (160, 180, 210)), (12, 32))

        if not running:
            title = "Game Over!" if snap.is_game_over else "Ready"
            lines = [title]
            if snap.is_game_over:
                lines.append(f"Final score: {snap.score}")
            lines.append("Press SPACE to start")
            y = HEIGHT // 2 - 60
            for i, msg in enumerate(lines):
                surf = (big if i == 0 else font).render(msg, True, COLOR_FG)
                screen.blit(surf, (WIDTH // 2 - surf.get_width() // 2, y))
                y += surf.get_height() + 10

        pygame.display.flip()


if __name__ == "__main__":
    run()
