"""Simulation constants. Empty = 0; a full cell holds CAPACITY."""

EMPTY = 0.0
CAPACITY = 1.0
# Fraction of a level difference moved sideways per pass; damps oscillation.
EQUALIZATION_FRACTION = 1.0 / 3.0
# Painting a pressurized cell adds less so columns don't blow up.
BRUSH_AMOUNT = 1.0
PRESSURIZED_BRUSH_AMOUNT = 0.2
DEFAULT_COLUMNS, DEFAULT_ROWS = 45, 30
DEFAULT_CELL_SIZE = 20
