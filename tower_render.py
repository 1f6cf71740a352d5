"""
Rendering helpers for the tower stacker.

PygameCanvas implements the three primitives the game controller draws with
(filled rect, outlined rect, text) on top of a pygame Surface.

Optimizations:
- Fonts are created once per pixel size and reused.
- Text surfaces are cached per (text, size, color); HUD strings only change
  when the score/height does, so most frames are pure blits.
- The translucent game-over veil is built once per (size, color, alpha).
"""
from __future__ import annotations
import pygame
from typing import Dict, Optional, Tuple

Color = Tuple[int, int, int]
Rect = Tuple[float, float, float, float]

TEXT_CACHE_LIMIT = 256


class PygameCanvas:
    """Draws onto a pygame Surface; holds the font/text caches."""
    def __init__(self, surface: pygame.Surface, font_name: Optional[str] = None):
        self.surface = surface
        self.font_name = font_name
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._text: Dict[Tuple[str, int, Color], pygame.Surface] = {}
        self._veils: Dict[Tuple[int, int, Color, int], pygame.Surface] = {}

    # ---------- Fonts / text ----------
    def font(self, size: int) -> pygame.font.Font:
        f = self._fonts.get(size)
        if f is None:
            f = pygame.font.Font(self.font_name, size)
            self._fonts[size] = f
        return f

    def render_text(self, text: str, size: int, color: Color) -> pygame.Surface:
        key = (text, size, tuple(color))
        s = self._text.get(key)
        if s is None:
            if len(self._text) >= TEXT_CACHE_LIMIT:
                self._text.clear()
            s = self.font(size).render(text, True, color)
            self._text[key] = s
        return s

    def text(self, text: str, pos: Tuple[float, float], size: int, color: Color) -> None:
        self.surface.blit(self.render_text(text, size, color), (int(pos[0]), int(pos[1])))

    # ---------- Rectangles ----------
    def fill_rect(self, rect: Rect, color: Color, alpha: Optional[float] = None) -> None:
        r = _to_rect(rect)
        if alpha is None:
            pygame.draw.rect(self.surface, color, r)
            return
        a = max(0, min(255, int(round(alpha * 255))))
        key = (r.width, r.height, tuple(color), a)
        veil = self._veils.get(key)
        if veil is None:
            veil = pygame.Surface((r.width, r.height), pygame.SRCALPHA)
            veil.fill((*color, a))
            self._veils[key] = veil
        self.surface.blit(veil, r.topleft)

    def outline_rect(self, rect: Rect, color: Color, thickness: int = 1) -> None:
        pygame.draw.rect(self.surface, color, _to_rect(rect), thickness)


def _to_rect(rect: Rect) -> pygame.Rect:
    x, y, w, h = rect
    return pygame.Rect(round(x), round(y), max(1, round(w)), max(1, round(h)))
