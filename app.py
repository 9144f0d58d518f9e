"""
App shell: window and main loop. Simulation is tick-driven from elapsed time and
tick_rate (independent of frame rate). Grid, brush, UI, and config are wired here.

Controls: drag with the left button to paint; Space swaps solid/fluid; Backspace toggles
erase; P pauses; N steps once while paused; C clears; G toggles the solid guard;
R toggles pressure relief; V switches bars/flat view; S saves the settings; Escape quits.
"""

import logging

import pygame

from liquid import initialize_grid, step
from liquid.brush import PaintMode, apply_brush, screen_to_cell, toggle_erase, toggle_material
from ui import Hud, draw_grid
from ui.hud import HUD_HEIGHT
import config

logger = logging.getLogger(__name__)

TITLE = "Fluid Simulation"
BACKGROUND = (0, 0, 0)
FRAME_RATE = 60


def run() -> None:
    cfg = config.load_config()
    logging.basicConfig(
        level=getattr(logging, cfg["log_level"]),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # load_config has already type-checked and range-checked every value
    columns, rows = cfg["world"]["columns"], cfg["world"]["rows"]
    cell_size = cfg["cell_size"]
    line_width = cfg["line_width"]
    tick_rate = min(120, cfg["tick_rate"])
    solid_guard = cfg["solid_guard"]
    relieve_pressure = cfg["relieve_pressure"]
    view_mode = cfg["view_mode"]
    logger.info(
        "grid %dx%d, cell %dpx, %d ticks/s, solid_guard=%s, relieve_pressure=%s",
        columns, rows, cell_size, tick_rate, solid_guard, relieve_pressure,
    )

    pygame.init()
    width, height = columns * cell_size, rows * cell_size
    screen = pygame.display.set_mode((width, height + HUD_HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    grid = initialize_grid(columns, rows)
    hud = Hud(pygame.Rect(0, height, width, HUD_HEIGHT))

    mode = PaintMode.SOLID
    material = mode
    paused = False
    single_step = False
    total_ticks = 0
    tick_accum = 0.0
    running = True

    def paint_at(pos: tuple[int, int]) -> None:
        cell = screen_to_cell(grid, pos[0], pos[1], cell_size)
        if cell is not None:
            apply_brush(grid, cell[0], cell[1], mode)

    while running:
        dt_s = clock.tick(FRAME_RATE) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                paint_at(event.pos)
            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                paint_at(event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key == pygame.K_SPACE:
                    mode = toggle_material(mode)
                    if mode is not PaintMode.ERASE:
                        material = mode
                elif event.key == pygame.K_BACKSPACE:
                    mode = toggle_erase(mode, material)
                elif event.key == pygame.K_p:
                    paused = not paused
                    tick_accum = 0.0
                elif event.key == pygame.K_n and paused:
                    single_step = True
                elif event.key == pygame.K_c:
                    grid.clear()
                    total_ticks = 0
                    logger.info("grid cleared")
                elif event.key == pygame.K_g:
                    solid_guard = not solid_guard
                    logger.info("solid_guard=%s", solid_guard)
                elif event.key == pygame.K_r:
                    relieve_pressure = not relieve_pressure
                    logger.info("relieve_pressure=%s", relieve_pressure)
                elif event.key == pygame.K_v:
                    view_mode = "flat" if view_mode == "bars" else "bars"
                elif event.key == pygame.K_s:
                    cfg.update(solid_guard=solid_guard, relieve_pressure=relieve_pressure, view_mode=view_mode)
                    try:
                        config.save_config(cfg)
                    except OSError as exc:
                        logger.warning("could not save settings: %s", exc)

        if paused:
            num_ticks = 1 if single_step else 0
            single_step = False
        else:
            tick_accum += dt_s * tick_rate
            # Cap ticks per frame so we never freeze when tick rate exceeds what we can do
            max_ticks_per_frame = max(4, tick_rate // 10)
            num_ticks = min(int(tick_accum), max_ticks_per_frame)
            tick_accum -= num_ticks
            tick_accum = min(tick_accum, max_ticks_per_frame)  # prevent unbounded backlog
        for _ in range(num_ticks):
            step(grid, solid_guard=solid_guard, relieve_pressure=relieve_pressure)
        total_ticks += num_ticks

        screen.fill(BACKGROUND)
        draw_grid(screen, grid, cell_size, line_width=line_width, view_mode=view_mode)
        hud.draw(screen, total_ticks, mode, paused, grid.total_fluid())
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    run()
