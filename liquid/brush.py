"""Painting: explicit brush mode and screen-to-cell mapping. Edits go through paint_cell."""

from enum import Enum

from liquid.cell import CellKind
from liquid.constants import BRUSH_AMOUNT, CAPACITY, EMPTY, PRESSURIZED_BRUSH_AMOUNT
from liquid.grid import Grid, paint_cell


class PaintMode(Enum):
    FLUID = "fluid"
    SOLID = "solid"
    ERASE = "erase"


def screen_to_cell(grid: Grid, x: int, y: int, cell_size: int) -> tuple[int, int] | None:
    """Pixel -> (column, row). None for points outside the grid area, e.g. over the status strip."""
    if cell_size <= 0:
        return None
    col, row = x // cell_size, y // cell_size
    return (col, row) if grid.in_bounds(col, row) else None


def apply_brush(grid: Grid, column: int, row: int, mode: PaintMode) -> None:
    """
    Paint one in-bounds cell. FLUID tops up the existing volume (less once pressurized).
    SOLID stacks the same amount onto the recorded fill, so a painted wall reads at least
    full and an unpressurized cell above it has nothing to drain into when flow is ungated.
    """
    if mode is PaintMode.ERASE:
        paint_cell(grid, column, row, CellKind.FLUID, EMPTY)
        return
    cell = grid.get(column, row)
    if mode is PaintMode.SOLID:
        amount = PRESSURIZED_BRUSH_AMOUNT if cell.fill_level > CAPACITY else BRUSH_AMOUNT
        paint_cell(grid, column, row, CellKind.SOLID, cell.fill_level + amount)
    else:
        amount = PRESSURIZED_BRUSH_AMOUNT if cell.pressurized else BRUSH_AMOUNT
        paint_cell(grid, column, row, CellKind.FLUID, cell.volume + amount)


def toggle_material(mode: PaintMode) -> PaintMode:
    """Space: swap between solid and fluid. Leaves erase mode alone."""
    if mode is PaintMode.SOLID:
        return PaintMode.FLUID
    if mode is PaintMode.FLUID:
        return PaintMode.SOLID
    return mode


def toggle_erase(mode: PaintMode, previous: PaintMode) -> PaintMode:
    """Backspace: enter erase, or return to the material used before it."""
    if mode is PaintMode.ERASE:
        return previous if previous is not PaintMode.ERASE else PaintMode.SOLID
    return PaintMode.ERASE
