from typing import Tuple
import pygame
from love_maze.core.rng import RandomSource

HSL = "HSL"
BW = "BW"

def hsl_color(h: float, s: float, l: float, a: float = 100.0) -> pygame.Color:
    color = pygame.Color(0, 0, 0)
    color.hsla = (h % 360, min(s, 100.0), min(l, 100.0), min(a, 100.0))
    return color

def translucent(color: pygame.Color, alpha: float = 0.4) -> pygame.Color:
    h, s, l, _ = color.hsla
    return hsl_color(h, s, l, alpha * 100)

class ColorScheme:
    foreground: pygame.Color
    background: pygame.Color
    highlight: pygame.Color

class BWColorScheme(ColorScheme):
    def __init__(self):
        self.foreground = pygame.Color(0, 0, 0)
        self.background = pygame.Color(255, 255, 255)
        self.highlight = pygame.Color(0, 0, 0)

class HSLColorScheme(ColorScheme):
    """Base card colors with a small seeded jitter per card."""

    # (h, s, l) of the rose-on-amber card
    BASE_FOREGROUND = (336, 80, 47)
    BASE_BACKGROUND = (40, 100, 57)
    BASE_HIGHLIGHT = (336, 80, 47)

    def __init__(self, rng: RandomSource):
        self.rng = rng
        # Draw order: foreground, background, highlight; h, s, l each
        self.foreground = self._jitter(self.BASE_FOREGROUND, (0.8, 0.2), (1.0, 0.4))
        self.background = self._jitter(self.BASE_BACKGROUND, (0.6, 0.4), (1.0, 0.2))
        self.highlight = self._jitter(self.BASE_HIGHLIGHT, (0.8, 0.2), (1.0, 0.2))

    def _jitter(self, base: Tuple[float, float, float], sat: Tuple[float, float],
                light: Tuple[float, float]) -> pygame.Color:
        h, s, l = base
        new_h = h * (0.95 + self.rng.random() * 0.1)
        new_s = s * (sat[0] + self.rng.random() * sat[1])
        new_l = l * (light[0] + self.rng.random() * light[1])
        return hsl_color(new_h, new_s, new_l)

def create_color_scheme(kind: str, rng: RandomSource) -> ColorScheme:
    kind = kind.upper()
    if kind == HSL:
        return HSLColorScheme(rng)
    if kind == BW:
        return BWColorScheme()
    raise ValueError(f"Invalid color scheme: {kind}")
