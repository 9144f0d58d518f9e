"""Cell value: kind plus fill level at a fixed (column, row)."""

from enum import IntEnum
from typing import NamedTuple

from liquid.constants import CAPACITY, EMPTY


class CellKind(IntEnum):
    FLUID = 0
    SOLID = 1


class Cell(NamedTuple):
    """One grid unit. fill_level is only a volume for FLUID cells; use volume to read it safely."""

    kind: CellKind
    fill_level: float
    column: int
    row: int

    @classmethod
    def fluid(cls, column: int, row: int, fill_level: float = EMPTY) -> "Cell":
        return cls(CellKind.FLUID, float(fill_level), column, row)

    @classmethod
    def solid(cls, column: int, row: int) -> "Cell":
        return cls(CellKind.SOLID, EMPTY, column, row)

    @property
    def is_solid(self) -> bool:
        return self.kind == CellKind.SOLID

    @property
    def volume(self) -> float:
        """Fluid held by the cell; always 0 for solids."""
        return EMPTY if self.is_solid else self.fill_level

    @property
    def pressurized(self) -> bool:
        return not self.is_solid and self.fill_level > CAPACITY
