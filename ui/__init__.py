"""UI: grid view and status strip."""

from ui.grid_view import draw_grid
from ui.hud import Hud
from ui.colors import fill_to_rgb

__all__ = ["draw_grid", "Hud", "fill_to_rgb"]
