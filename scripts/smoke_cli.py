#!/usr/bin/env python3
"""
fsmatrix: CLI smoke test (no pytest, no terminal required)

• Drives the CLI through Typer's CliRunner for every glyph set.
• Swaps the terminal for an in-memory grid that presses Esc after a few
  frames, so the real engine runs end to end without touching the screen.
• Safe to run locally: `python scripts/smoke_cli.py`

Exit code is 0 if all checks pass, non-zero otherwise.
"""
from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional, Tuple

from typer.testing import CliRunner

FRAMES = 60


# -----------------------------------------------------------------------------
# 1) In-memory grid standing in for the terminal
# -----------------------------------------------------------------------------

class MemoryRenderer:
    def __init__(self, width: int = 40, height: int = 16, frames: int = FRAMES) -> None:
        self.w, self.h = width, height
        self.cursor = (0, 0)
        self.grid: Dict[Tuple[int, int], str] = {}
        self.glyphs: set = set()
        self.polls = 0
        self.frames = frames

    def width(self) -> int:
        return self.w

    def height(self) -> int:
        return self.h

    def clear(self) -> None:
        self.grid.clear()

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def write(self, char: str, foreground: str, background: str) -> None:
        self.grid[self.cursor] = char
        if char != " ":
            self.glyphs.add(char)

    def poll_key(self) -> Optional[str]:
        self.polls += 1
        return "escape" if self.polls >= self.frames else None

    def set_output_encoding(self, encoding: str) -> None:
        pass

    @contextmanager
    def frame(self):
        yield

    def setup(self) -> None:
        pass

    def teardown(self) -> None:
        self.clear()


def install_memory_terminal() -> List[MemoryRenderer]:
    """Route the CLI's animation through MemoryRenderer; returns the renderers used."""
    import fsmatrix.__main__ as cli
    from fsmatrix.ui import running

    used: List[MemoryRenderer] = []

    def run_in_memory(glyph_set, config=None, renderer=None):
        renderer = MemoryRenderer()
        used.append(renderer)
        if config is not None:
            config.frame_wait = 0
        return running.run_animation(glyph_set, config, renderer=renderer)

    cli.run_animation = run_in_memory
    return used


# -----------------------------------------------------------------------------
# 2) Helpers
# -----------------------------------------------------------------------------

def must_ok(label: str, result, expect_exit: int = 0, *, contains: str | None = None) -> bool:
    text = result.output or ""
    ok = result.exit_code == expect_exit
    if contains is not None:
        ok = ok and contains.lower() in text.lower()
    status = "PASS" if ok else "FAIL"
    print(f"[{status}] {label}\n{text}")
    return ok


# -----------------------------------------------------------------------------
# 3) Checks
# -----------------------------------------------------------------------------

def t_usage(runner: CliRunner, used: List[MemoryRenderer]) -> bool:
    from fsmatrix.__main__ import USAGE, app
    before = len(used)
    res = runner.invoke(app, [])
    return must_ok("usage (no args)", res, contains=USAGE) and len(used) == before


def _glyph_check(name: str, alphabet: str) -> Callable[[CliRunner, List[MemoryRenderer]], bool]:
    def check(runner: CliRunner, used: List[MemoryRenderer]) -> bool:
        from fsmatrix.__main__ import app
        res = runner.invoke(app, [name, "--seed", "1"])
        ok = must_ok(f"rain ({name})", res)
        glyphs = used[-1].glyphs if used else set()
        stray = sorted(g for g in glyphs if g not in alphabet)
        if not glyphs or stray:
            print(f"[FAIL] {name}: drew {len(glyphs)} glyphs, stray={stray}")
            return False
        return ok

    return check


def t_version(runner: CliRunner, used: List[MemoryRenderer]) -> bool:
    from fsmatrix.__main__ import app
    return must_ok("version", runner.invoke(app, ["--version"]), contains="fsmatrix")


# -----------------------------------------------------------------------------
# 4) Main
# -----------------------------------------------------------------------------

def main() -> int:
    try:
        from fsmatrix import glyphs
        used = install_memory_terminal()
    except Exception as e:
        print(f"Cannot import fsmatrix: {e}")
        return 1

    runner = CliRunner()
    japanese = "".join(glyphs.JAPANESE_SCRIPTS)

    tests: List[Tuple[str, Callable[[CliRunner, List[MemoryRenderer]], bool]]] = [
        ("usage", t_usage),
        ("ascii", _glyph_check("ascii", glyphs.ASCII_CHARS)),
        ("japanese", _glyph_check("JAPANESE", japanese)),
        ("hex", _glyph_check("Hex", glyphs.HEX_CHARS)),
        ("bin", _glyph_check("bin", glyphs.BIN_CHARS)),
        ("fallback", _glyph_check("unknown", glyphs.BIN_CHARS)),
        ("version", t_version),
    ]

    passed = 0
    for name, fn in tests:
        try:
            ok = fn(runner, used)
            passed += int(ok)
        except Exception as e:  # continue suite on individual error
            print(f"[EXC ] {name}: {e}")

    total = len(tests)
    print("-" * 60)
    print(f"Summary: {passed}/{total} passed")
    return 0 if passed == total else 1


if __name__ == "__main__":
    sys.exit(main())
