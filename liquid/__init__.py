"""Liquid: fixed-size cell grid and the tick-driven transport rules."""

from liquid.cell import Cell, CellKind
from liquid.grid import Grid, initialize_grid, paint_cell
from liquid.flow import step
from liquid.constants import DEFAULT_COLUMNS, DEFAULT_ROWS, CAPACITY

__all__ = [
    "Cell", "CellKind", "Grid", "initialize_grid", "paint_cell", "step",
    "DEFAULT_COLUMNS", "DEFAULT_ROWS", "CAPACITY",
]
