"""
Per-tick transport: vertical flow, then horizontal equalization, then pressure relief.
Each rule reads a frozen (solid, fill) snapshot and returns a new fill array; every cell
in a pass updates simultaneously. Moves are expressed as transfers (subtract at the source,
add at the destination) so a pass conserves the total except where noted.
"""

import logging

import numpy as np

from liquid.constants import CAPACITY, EQUALIZATION_FRACTION
from liquid.grid import Grid

logger = logging.getLogger(__name__)


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def vertical_flow(solid: np.ndarray, fill: np.ndarray, solid_guard: bool = True) -> np.ndarray:
    """
    Rule 1: a fluid cell drains into the cell below when that cell holds less.
    Whole content moves if it fits in the free space below, otherwise the cell below
    is topped up to CAPACITY and the rest stays. solid_guard=False drops the check on the
    destination's kind, so a solid whose recorded fill is lower will soak up fluid.
    """
    src = fill[:-1, :]
    dest = fill[1:, :]
    moves = ~solid[:-1, :] & (dest < src)
    if solid_guard:
        moves &= ~solid[1:, :]
    free = CAPACITY - dest
    transfer = np.where(moves, np.where(free >= src, src, free), 0.0)
    out = fill.copy()
    out[:-1, :] -= transfer
    out[1:, :] += transfer
    return out


def horizontal_equalization(solid: np.ndarray, fill: np.ndarray) -> np.ndarray:
    """
    Rule 2: where a fluid cell can't drain (bottom row, fuller cell below, or solid below),
    it gives a third of the difference to each lower fluid neighbor left and right.
    Both sides are computed from the pre-pass level.
    """
    fluid = ~solid
    blocked = np.ones(fill.shape, dtype=bool)
    blocked[:-1, :] = (fill[1:, :] > fill[:-1, :]) | solid[1:, :]
    senders = blocked & fluid
    out = fill.copy()

    to_left = senders[:, 1:] & fluid[:, :-1] & (fill[:, :-1] < fill[:, 1:])
    amount = np.where(to_left, (fill[:, 1:] - fill[:, :-1]) * EQUALIZATION_FRACTION, 0.0)
    out[:, 1:] -= amount
    out[:, :-1] += amount

    to_right = senders[:, :-1] & fluid[:, 1:] & (fill[:, 1:] < fill[:, :-1])
    amount = np.where(to_right, (fill[:, :-1] - fill[:, 1:]) * EQUALIZATION_FRACTION, 0.0)
    out[:, :-1] -= amount
    out[:, 1:] += amount
    return out


def pressure_relief(solid: np.ndarray, fill: np.ndarray) -> np.ndarray:
    """Rule 3: a pressurized fluid cell pushes its excess over CAPACITY into a lower fluid cell above."""
    fluid = ~solid
    src = fill[1:, :]
    above = fill[:-1, :]
    relieve = fluid[1:, :] & fluid[:-1, :] & (src > CAPACITY) & (above < src)
    transfer = np.where(relieve, src - CAPACITY, 0.0)
    if logger.isEnabledFor(logging.DEBUG):
        for row, col in np.argwhere(relieve):
            logger.debug("pressure transfer %.4f from (%d, %d) upward", transfer[row, col], col, row + 1)
    out = fill.copy()
    out[1:, :] -= transfer
    out[:-1, :] += transfer
    return out


def step(grid: Grid, *, solid_guard: bool = True, relieve_pressure: bool = True) -> Grid:
    """
    One tick: vertical flow, horizontal equalization, pressure relief, in that order.
    Each rule sees the previous rule's full output. The grid is only written once all rules
    have run, so a failing tick leaves it as it was. relieve_pressure=False runs the
    two-rule variant.
    """
    solid, fill = grid.snapshot()
    fill = _freeze(vertical_flow(solid, fill, solid_guard=solid_guard))
    fill = _freeze(horizontal_equalization(solid, fill))
    if relieve_pressure:
        fill = _freeze(pressure_relief(solid, fill))
    grid.commit(fill)
    return grid
