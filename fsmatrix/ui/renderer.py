# fsmatrix/ui/renderer.py
"""
Terminal abstraction the rain engine paints through.

The engine only needs a character grid: its size, cursor positioning,
single-cell colored writes, a screen clear and a non-blocking key poll.
`TerminalRenderer` implements that on top of a rich Console.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, Protocol

from rich.console import Console
from rich.control import Control

from .keys import KeyPoller
from .theme import BACKGROUND, cell_style


class Renderer(Protocol):
    def width(self) -> int: ...

    def height(self) -> int: ...

    def clear(self) -> None: ...

    def set_cursor(self, x: int, y: int) -> None: ...

    def write(self, char: str, foreground: str, background: str) -> None: ...

    def poll_key(self) -> Optional[str]: ...

    def set_output_encoding(self, encoding: str) -> None: ...

    def frame(self): ...


class TerminalRenderer:
    """
    Renderer backed by a rich Console writing to stdout.

    Every styled write ends with an attribute reset, so the terminal is back
    on its default colors as soon as a write completes.
    """

    def __init__(self, console: Optional[Console] = None, keys: Optional[KeyPoller] = None) -> None:
        self.console = console or Console(highlight=False)
        self.keys = keys or KeyPoller()

    # -- grid ---------------------------------------------------------------
    def width(self) -> int:
        return self.console.size.width

    def height(self) -> int:
        return self.console.size.height

    def clear(self) -> None:
        """Clear the screen and paint every cell with the background color."""
        width, height = self.width(), self.height()
        style = cell_style(BACKGROUND, BACKGROUND)
        with self.console:
            self.console.clear(home=True)
            for y in range(height):
                # Leave the bottom-right cell alone so the screen never scrolls
                span = width - 1 if y == height - 1 else width
                if span <= 0:
                    continue
                self.set_cursor(0, y)
                self.console.out(" " * span, style=style, end="", highlight=False)
            self.set_cursor(0, 0)

    def set_cursor(self, x: int, y: int) -> None:
        self.console.control(Control.move_to(x, y))

    def write(self, char: str, foreground: str, background: str) -> None:
        self.console.out(char, style=cell_style(foreground, background), end="", highlight=False)

    @contextmanager
    def frame(self) -> Iterator[None]:
        """Buffer one frame's writes and flush them together."""
        with self.console:
            yield

    # -- input ----------------------------------------------------------------
    def poll_key(self) -> Optional[str]:
        return self.keys.poll()

    # -- lifecycle ------------------------------------------------------------
    def set_output_encoding(self, encoding: str) -> None:
        reconfigure = getattr(sys.stdout, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding=encoding)

    def setup(self) -> None:
        self.set_output_encoding("utf-8")
        self.keys.open()
        self.console.show_cursor(False)

    def teardown(self) -> None:
        """Restore the terminal. Safe to call after a setup that failed part way."""
        try:
            self.console.clear(home=True)
            self.console.show_cursor(True)
        finally:
            self.keys.close()
