"""One-line status strip: tick, brush, paused state, total fluid."""

import pygame

from liquid.brush import PaintMode

FONT_SIZE = 18
LABEL_COLOR = (200, 200, 200)
HUD_BG = (20, 20, 24)
HUD_HEIGHT = 22

MODE_LABELS = {PaintMode.FLUID: "Fluid", PaintMode.SOLID: "Solid", PaintMode.ERASE: "Erase"}


def status_text(tick_count: int, mode: PaintMode, paused: bool, total_fluid: float) -> str:
    state = "Paused" if paused else "Running"
    return f"Tick: {tick_count}  Brush: {MODE_LABELS[mode]}  {state}  Fluid: {total_fluid:.2f}"


class Hud:
    """Lazily creates its font; draw() renders into a strip below the grid."""

    def __init__(self, rect: pygame.Rect) -> None:
        self.rect = rect
        self._font = None

    def _ensure_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface, tick_count: int, mode: PaintMode, paused: bool, total_fluid: float) -> None:
        font = self._ensure_font()
        pygame.draw.rect(surface, HUD_BG, self.rect)
        label = font.render(status_text(tick_count, mode, paused, total_fluid), True, LABEL_COLOR)
        surface.blit(label, (self.rect.x + 8, self.rect.y + 4))
