# fsmatrix/column.py

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .glyphs import GlyphSet, next_glyph
from .ui.theme import BACKGROUND, BRIGHT, DIM, MID_BRIGHT

if TYPE_CHECKING:  # pragma: no cover
    from .ui.renderer import Renderer


def compute_fade_length(height_limit: int, rng: random.Random) -> int:
    """
    Row at which the tail starts fading: a third of the height scaled
    by -30%..+49%, then pushed further down by up to its own length.
    """
    fade_length = int(abs(height_limit / 3.0) * (1 + rng.randrange(-30, 50) / 100.0))
    if fade_length > 0:
        fade_length += rng.randrange(fade_length)
    return fade_length


@dataclass
class Column:
    """
    One falling drop.

    Two edges travel down the same column: a bright head that starts at
    row 1 and a fading tail that starts at row 0 once the head has passed
    `fade_length`. The column is done when the tail leaves the grid.
    """

    position: int
    height_limit: int
    fade_length: int
    glyph_set: GlyphSet
    rng: random.Random
    head: int = 1
    fade: int = 0

    @classmethod
    def new(
        cls, position: int, height_limit: int, glyph_set: GlyphSet, rng: random.Random
    ) -> "Column":
        return cls(
            position=position,
            height_limit=height_limit,
            fade_length=compute_fade_length(height_limit, rng),
            glyph_set=glyph_set,
            rng=rng,
        )

    @property
    def finished(self) -> bool:
        return self.fade >= self.height_limit

    def step(self, renderer: "Renderer") -> bool:
        """Advance one frame; returns False once the tail has left the grid."""
        x = self.position

        if self.head < self.height_limit:
            self._paint(renderer, x, self.head, self._glyph(), BRIGHT)
            # Repaint the previous lead so it reads dimmer than the new one
            self._paint(renderer, x, self.head - 1, self._glyph(), MID_BRIGHT)
            self.head += 1

        if self.head > self.fade_length:
            self._paint(renderer, x, self.fade, self._glyph(), DIM)
            if self.fade - 1 < self.height_limit:
                self._paint(renderer, x, self.fade - 1, " ", BACKGROUND)
            self.fade += 1

        if self.fade < self.height_limit:
            return True

        # Last row of the tail
        if self.fade - 1 < self.height_limit:
            self._paint(renderer, x, self.fade - 1, " ", BACKGROUND)
        return False

    def _glyph(self) -> str:
        return next_glyph(self.rng, self.glyph_set)

    @staticmethod
    def _paint(renderer: "Renderer", x: int, y: int, char: str, color: str) -> None:
        # The grid may have shrunk since this column was created
        if 0 <= x < renderer.width() - 1 and 0 <= y < renderer.height():
            renderer.set_cursor(x, y)
            renderer.write(char, color, BACKGROUND)
