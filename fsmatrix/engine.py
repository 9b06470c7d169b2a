# fsmatrix/engine.py

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .column import Column
from .config import EngineConfig
from .glyphs import DEFAULT_GLYPH_SET, GlyphSet
from .registry import ColumnRegistry
from .ui.renderer import Renderer
from .util.console import debug


@dataclass
class FrameStats:
    frames: int = 0
    spawned: int = 0
    retired: int = 0
    clears: int = 0


@dataclass
class EngineContext:
    """Everything one animation run shares: no module-level state."""

    renderer: Renderer
    config: EngineConfig = field(default_factory=EngineConfig)
    glyph_set: GlyphSet = DEFAULT_GLYPH_SET
    rng: random.Random = field(default_factory=random.Random)
    registry: ColumnRegistry = field(default_factory=ColumnRegistry)
    running: bool = True


class FrameScheduler:
    """
    Main animation loop.

    Each iteration: clear on resize, maybe spawn a column, step all columns,
    sleep for the frame delay, then check for the exit key. The exit key is
    only looked at after the pause, so stopping takes up to one frame delay.
    """

    def __init__(
        self,
        ctx: EngineContext,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.ctx = ctx
        self.sleep = sleep
        self.stats = FrameStats()
        self._last_size: Tuple[int, int] = (-1, -1)

    @classmethod
    def create(
        cls,
        renderer: Renderer,
        glyph_set: GlyphSet = DEFAULT_GLYPH_SET,
        config: Optional[EngineConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "FrameScheduler":
        config = config or EngineConfig()
        ctx = EngineContext(
            renderer=renderer,
            config=config,
            glyph_set=glyph_set,
            rng=random.Random(config.seed),
        )
        return cls(ctx, sleep=sleep)

    @property
    def running(self) -> bool:
        return self.ctx.running

    def stop(self) -> None:
        self.ctx.running = False

    def run(self) -> FrameStats:
        while self.ctx.running:
            self.run_frame()
        debug(
            f"stopped after {self.stats.frames} frames "
            f"({self.stats.spawned} spawned, {self.stats.retired} retired)"
        )
        return self.stats

    def run_frame(self) -> None:
        """One full iteration of the loop."""
        with self.ctx.renderer.frame():
            self.check_resize()
            self.spawn()
            self.step_columns()
        self.stats.frames += 1
        self.pace()
        self.check_exit()

    # -- phases ---------------------------------------------------------------
    def check_resize(self) -> bool:
        """Clear the whole display when the grid size changed. Existing columns are left alone."""
        renderer = self.ctx.renderer
        size = (renderer.width(), renderer.height())
        if size == self._last_size:
            return False
        renderer.clear()
        self._last_size = size
        self.stats.clears += 1
        return True

    def spawn(self) -> Optional[Column]:
        ctx = self.ctx
        if len(ctx.registry) >= ctx.config.max_columns:
            return None
        if ctx.rng.random() >= ctx.config.spawn_chance:
            return None

        width = ctx.renderer.width()
        # No free position means the retry below would never end
        if width <= 0 or ctx.registry.occupied_within(width) >= width:
            return None

        position = ctx.rng.randrange(width)
        while position in ctx.registry:
            position = ctx.rng.randrange(width)

        column = Column.new(position, ctx.renderer.height(), ctx.glyph_set, ctx.rng)
        ctx.registry.insert(position, column)
        self.stats.spawned += 1
        return column

    def step_columns(self) -> int:
        completed = self.ctx.registry.step_all(self.ctx.renderer)
        self.stats.retired += len(completed)
        return len(completed)

    def pace(self) -> None:
        self.sleep(self.ctx.config.frame_wait_seconds)

    def check_exit(self) -> None:
        key = self.ctx.renderer.poll_key()
        if key is not None and key == self.ctx.config.exit_key:
            self.stop()
