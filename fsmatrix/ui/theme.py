# fsmatrix/ui/theme.py

from functools import lru_cache

from rich.style import Style

# Rain colors, brightest to darkest (rich color names)
BRIGHT = "bright_white"     # leading glyph
MID_BRIGHT = "bright_green"  # glyph right behind the lead
DIM = "green"               # fading tail
BACKGROUND = "black"


@lru_cache(maxsize=None)
def cell_style(foreground: str, background: str = BACKGROUND) -> Style:
    """
    Return the rich Style for one grid cell.
    Cached because every paint asks for one of a handful of color pairs.
    """
    return Style(color=foreground, bgcolor=background)
