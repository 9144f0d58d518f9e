"""2D grid of cells: solid mask and fill levels. Arrays are (rows, columns), row-major; row 0 is the top."""

import numpy as np

from liquid.cell import Cell, CellKind
from liquid.constants import EMPTY, DEFAULT_COLUMNS, DEFAULT_ROWS


class Grid:
    """Fixed-size cell store. Rules read snapshot() and hand a fresh buffer back through commit()."""

    __slots__ = ("width", "height", "solid", "fill")

    def __init__(self, width: int = DEFAULT_COLUMNS, height: int = DEFAULT_ROWS) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.solid = np.zeros(self.shape, dtype=bool)
        self.fill = np.full(self.shape, EMPTY, dtype=np.float64)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def get(self, col: int, row: int) -> Cell:
        kind = CellKind.SOLID if self.solid[row, col] else CellKind.FLUID
        return Cell(kind, float(self.fill[row, col]), col, row)

    def set(self, col: int, row: int, cell: Cell) -> None:
        # Position is identity: the cell's own column/row are not consulted.
        self.solid[row, col] = cell.kind == CellKind.SOLID
        self.fill[row, col] = cell.fill_level

    def snapshot(self) -> tuple[np.ndarray, np.ndarray]:
        """Read-only views of (solid, fill) as they stand now."""
        solid = self.solid.view()
        fill = self.fill.view()
        solid.flags.writeable = False
        fill.flags.writeable = False
        return solid, fill

    def commit(self, fill: np.ndarray) -> None:
        """
        Replace the fill buffer with a fully computed next state. A float64 array that owns
        its data is adopted as is (made writable again); anything else is copied.
        """
        if fill.shape != self.shape:
            raise ValueError(f"buffer shape {fill.shape} does not match grid {self.shape}")
        if fill.dtype == np.float64 and fill.flags.owndata:
            fill.flags.writeable = True
            self.fill = fill
        else:
            self.fill = np.array(fill, dtype=np.float64)

    def total_fluid(self) -> float:
        return float(np.sum(self.fill[~self.solid]))

    def clear(self) -> None:
        self.solid.fill(False)
        self.fill.fill(EMPTY)


def initialize_grid(width: int, height: int) -> Grid:
    """Every cell FLUID with fill 0."""
    return Grid(width=width, height=height)


def paint_cell(grid: Grid, column: int, row: int, kind: CellKind, fill_level: float) -> None:
    """Overwrite one cell in place. Caller validates bounds and clamps fill_level if it wants to."""
    grid.set(column, row, Cell(CellKind(kind), float(fill_level), column, row))
