from __future__ import annotations

import pytest

import fsmatrix.__main__ as cli
from fsmatrix.engine import FrameStats
from fsmatrix.glyphs import GlyphSet


@pytest.fixture()
def calls(monkeypatch):
    """Replace the terminal animation with a recorder."""
    recorded = []

    def fake_run_animation(glyph_set, config=None, renderer=None):
        recorded.append((glyph_set, config))
        return FrameStats(frames=1)

    monkeypatch.setattr(cli, "run_animation", fake_run_animation)
    for name in ("FSMATRIX_MAX_COLUMNS", "FSMATRIX_FRAME_WAIT", "FSMATRIX_SEED"):
        monkeypatch.delenv(name, raising=False)
    return recorded


def test_no_arguments_prints_usage_and_does_not_animate(runner, calls):
    r = runner.invoke(cli.app, [])
    assert r.exit_code == 0
    assert cli.USAGE in r.output
    assert calls == []


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("HEX", GlyphSet.HEX),
        ("hex", GlyphSet.HEX),
        ("Japanese", GlyphSet.JAPANESE),
        ("ascii", GlyphSet.ASCII),
        ("bin", GlyphSet.BIN),
        ("morse", GlyphSet.BIN),
    ],
)
def test_glyph_set_argument(runner, calls, arg, expected):
    r = runner.invoke(cli.app, [arg])
    assert r.exit_code == 0
    assert len(calls) == 1
    assert calls[0][0] is expected


def test_defaults_reach_the_engine(runner, calls):
    r = runner.invoke(cli.app, ["bin"])
    assert r.exit_code == 0
    cfg = calls[0][1]
    assert cfg.max_columns == 64
    assert cfg.frame_wait == 100
    assert cfg.seed is None


def test_options_override_environment(runner, calls, monkeypatch):
    monkeypatch.setenv("FSMATRIX_SEED", "11")
    monkeypatch.setenv("FSMATRIX_FRAME_WAIT", "50")

    r = runner.invoke(cli.app, ["ascii", "--max-columns", "8", "--seed", "3"])
    assert r.exit_code == 0
    cfg = calls[0][1]
    assert cfg.max_columns == 8
    assert cfg.seed == 3
    assert cfg.frame_wait == 50


@pytest.mark.parametrize(
    "option",
    [["--frame-wait", "-1"], ["--max-columns", "-5"], ["--seed=-3"]],
)
def test_negative_option_is_ignored(runner, calls, option):
    r = runner.invoke(cli.app, ["hex", *option])
    assert r.exit_code == 0
    cfg = calls[0][1]
    assert cfg.frame_wait == 100
    assert cfg.max_columns == 64
    assert cfg.seed is None


def test_last_glyph_set_argument_wins(runner, calls):
    r = runner.invoke(cli.app, ["foo", "hex"])
    assert r.exit_code == 0
    assert [c[0] for c in calls] == [GlyphSet.HEX]


def test_unknown_last_argument_selects_bin(runner, calls):
    r = runner.invoke(cli.app, ["japanese", "ascii", "morse"])
    assert r.exit_code == 0
    assert calls[0][0] is GlyphSet.BIN


def test_ctrl_c_exits_cleanly(runner, monkeypatch):
    def interrupted(glyph_set, config=None, renderer=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run_animation", interrupted)
    r = runner.invoke(cli.app, ["hex"])
    assert r.exit_code == 0


def test_version(runner, calls):
    r = runner.invoke(cli.app, ["--version"])
    assert r.exit_code == 0
    assert r.output.startswith("fsmatrix ")
    assert calls == []
