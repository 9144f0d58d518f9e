"""Grid surface: per-cell water bars (or flat colors), solids, then grid lines on top."""

import pygame

from liquid import Grid
from ui.colors import BACKGROUND, GRID_LINE, SOLID, WATER, fill_to_rgb, water_heights


def _draw_bars(surface: pygame.Surface, grid: Grid, cell_size: int) -> None:
    """Water rises from the bottom of each cell in proportion to its fill."""
    heights = water_heights(grid.fill, cell_size)
    for row in range(grid.height):
        for col in range(grid.width):
            x, y = col * cell_size, row * cell_size
            if grid.solid[row, col]:
                pygame.draw.rect(surface, SOLID, (x, y, cell_size, cell_size))
                continue
            h = int(heights[row, col])
            if h > 0:
                pygame.draw.rect(surface, WATER, (x, y + cell_size - h, cell_size, h))


def _draw_flat(surface: pygame.Surface, grid: Grid, cell_size: int) -> None:
    rgb = fill_to_rgb(grid.solid, grid.fill)
    # pygame wants (width, height); rgb is (rows, columns, 3) row-major
    img = pygame.image.frombytes(rgb.tobytes(), (grid.width, grid.height), "RGB")
    scaled = pygame.transform.scale(img, (grid.width * cell_size, grid.height * cell_size))
    surface.blit(scaled, (0, 0))


def draw_lines(surface: pygame.Surface, columns: int, rows: int, cell_size: int, line_width: int) -> None:
    w, h = columns * cell_size, rows * cell_size
    for i in range(columns):
        pygame.draw.rect(surface, GRID_LINE, (i * cell_size, 0, line_width, h))
    for j in range(rows):
        pygame.draw.rect(surface, GRID_LINE, (0, j * cell_size, w, line_width))


def draw_grid(
    surface: pygame.Surface,
    grid: Grid,
    cell_size: int,
    line_width: int = 2,
    view_mode: str = "bars",
) -> None:
    """Read-only render of the grid at its top-left corner."""
    surface.fill(BACKGROUND, (0, 0, grid.width * cell_size, grid.height * cell_size))
    if view_mode == "flat":
        _draw_flat(surface, grid, cell_size)
    else:
        _draw_bars(surface, grid, cell_size)
    if line_width > 0:
        draw_lines(surface, grid.width, grid.height, cell_size, line_width)
