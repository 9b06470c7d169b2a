# fsmatrix/ui/running.py

from __future__ import annotations

from typing import Optional

from ..config import EngineConfig
from ..engine import FrameScheduler, FrameStats
from ..glyphs import GlyphSet
from .renderer import TerminalRenderer


def run_animation(
    glyph_set: GlyphSet,
    config: Optional[EngineConfig] = None,
    renderer: Optional[TerminalRenderer] = None,
) -> FrameStats:
    """
    Run the rain until the exit key is pressed.

    The terminal is always restored afterwards, including when setup fails
    part way or the loop is interrupted with Ctrl-C (the KeyboardInterrupt
    still propagates).
    """
    renderer = renderer or TerminalRenderer()
    scheduler = FrameScheduler.create(renderer, glyph_set=glyph_set, config=config)

    try:
        renderer.setup()
        scheduler.run()
    finally:
        renderer.teardown()
    return scheduler.stats
