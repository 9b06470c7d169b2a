"""
fsmatrix - digital rain for the terminal.

Basic Usage:
    from fsmatrix import GlyphSet, run_animation
    run_animation(GlyphSet.JAPANESE)

With a custom renderer:
    from fsmatrix import FrameScheduler, GlyphSet

    scheduler = FrameScheduler.create(my_renderer, glyph_set=GlyphSet.HEX)
    scheduler.run_frame()
"""

__version__ = "0.1.0"

from .column import Column
from .config import EngineConfig, load_config
from .engine import EngineContext, FrameScheduler, FrameStats
from .glyphs import GlyphSet, next_glyph, parse_glyph_set
from .registry import ColumnRegistry
from .ui.running import run_animation

__all__ = [
    "__version__",
    "Column",
    "ColumnRegistry",
    "EngineConfig",
    "EngineContext",
    "FrameScheduler",
    "FrameStats",
    "GlyphSet",
    "load_config",
    "next_glyph",
    "parse_glyph_set",
    "run_animation",
]
