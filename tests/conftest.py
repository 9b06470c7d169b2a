# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import random
from contextlib import contextmanager
from typing import List, Optional, Tuple

import pytest
from typer.testing import CliRunner


class FakeRenderer:
    """
    In-memory renderer: records every call so tests can assert on paints,
    clears and cursor moves without a terminal.
    """

    def __init__(self, width: int = 10, height: int = 5, keys: Optional[List[str]] = None) -> None:
        self.w = width
        self.h = height
        self.keys: List[Optional[str]] = list(keys or [])
        self.cursor: Tuple[int, int] = (0, 0)
        self.cells: dict[Tuple[int, int], Tuple[str, str, str]] = {}
        self.writes: List[Tuple[int, int, str, str, str]] = []
        self.clears = 0
        self.frames = 0
        self.encoding: Optional[str] = None
        self.setup_calls = 0
        self.teardown_calls = 0

    def width(self) -> int:
        return self.w

    def height(self) -> int:
        return self.h

    def clear(self) -> None:
        self.clears += 1
        self.cells.clear()

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def write(self, char: str, foreground: str, background: str) -> None:
        x, y = self.cursor
        self.cells[(x, y)] = (char, foreground, background)
        self.writes.append((x, y, char, foreground, background))

    def poll_key(self) -> Optional[str]:
        return self.keys.pop(0) if self.keys else None

    def set_output_encoding(self, encoding: str) -> None:
        self.encoding = encoding

    @contextmanager
    def frame(self):
        yield
        self.frames += 1

    def setup(self) -> None:
        self.setup_calls += 1
        self.set_output_encoding("utf-8")

    def teardown(self) -> None:
        self.teardown_calls += 1
        self.clear()


class ScriptedRandom(random.Random):
    """
    Random source pinned to the low end of every range: random() is 0.0
    and randrange() returns its start. Spawn draws always succeed and
    always pick position 0.
    """

    def random(self) -> float:
        return 0.0

    def randrange(self, start, stop=None, step=1):  # noqa: ANN001
        if stop is None:
            return 0
        return start


@pytest.fixture()
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture()
def scripted_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()
