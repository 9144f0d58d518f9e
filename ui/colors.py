"""
Display colors. Fluid depth maps onto a blue ramp (empty = black, full = water blue);
pressurized cells brighten toward pale cyan so over-full columns stand out. Solids are white.
"""

import numpy as np

BACKGROUND = (0, 0, 0)
WATER = (0x34, 0xC3, 0xEB)
SOLID = (255, 255, 255)
GRID_LINE = (0x1F, 0x1F, 0x1F)

_WATER = np.array(WATER, dtype=np.float64) / 255.0
_PRESSURE = np.array([0.75, 0.95, 1.0], dtype=np.float64)
# Fill at which the pressure tint is at full strength.
PRESSURE_SATURATION = 2.0


def fill_to_rgb(solid: np.ndarray, fill: np.ndarray) -> np.ndarray:
    """Returns (rows, columns, 3) uint8 RGB for the flat view."""
    depth = np.clip(fill, 0.0, 1.0)[..., np.newaxis]
    over = np.clip((fill - 1.0) / (PRESSURE_SATURATION - 1.0), 0.0, 1.0)[..., np.newaxis]
    rgb = depth * ((1.0 - over) * _WATER + over * _PRESSURE)
    rgb[solid] = np.array(SOLID, dtype=np.float64) / 255.0
    rgb = np.clip(rgb, 0, 1)
    return (rgb * 255).round().astype(np.uint8)


def water_heights(fill: np.ndarray, cell_size: int) -> np.ndarray:
    """Pixel height of the water bar per cell; pressurized cells draw full."""
    return (np.clip(fill, 0.0, 1.0) * cell_size).astype(np.int32)
