from __future__ import annotations

import random

import pytest

from fsmatrix.glyphs import (
    ASCII_CHARS,
    BIN_CHARS,
    DEFAULT_GLYPH,
    HEX_CHARS,
    JAPANESE_SCRIPTS,
    KANJI_CHARS,
    KATAKANA_CHARS,
    GlyphSet,
    alphabet_for,
    next_glyph,
    parse_glyph_set,
)


class RecordingRandom(random.Random):
    """Replays fixed randrange results and records the requested ranges."""

    def __init__(self, results):
        super().__init__(0)
        self.results = list(results)
        self.calls = []

    def randrange(self, start, stop=None, step=1):  # noqa: ANN001
        self.calls.append((start, stop))
        return self.results.pop(0)


@pytest.mark.parametrize(
    "glyph_set, alphabet",
    [
        (GlyphSet.ASCII, ASCII_CHARS),
        (GlyphSet.HEX, HEX_CHARS),
        (GlyphSet.BIN, BIN_CHARS),
        (GlyphSet.JAPANESE, "".join(JAPANESE_SCRIPTS)),
    ],
)
def test_glyphs_come_from_requested_alphabet(glyph_set, alphabet):
    rng = random.Random(1234)
    for _ in range(500):
        ch = next_glyph(rng, glyph_set)
        assert len(ch) == 1
        assert ch in alphabet


def test_same_seed_same_sequence():
    a = random.Random(42)
    b = random.Random(42)
    seq_a = [next_glyph(a, GlyphSet.JAPANESE) for _ in range(100)]
    seq_b = [next_glyph(b, GlyphSet.JAPANESE) for _ in range(100)]
    assert seq_a == seq_b


def test_japanese_draws_script_then_character():
    rng = RecordingRandom([2, 3])
    assert next_glyph(rng, GlyphSet.JAPANESE) == KANJI_CHARS[3]
    # one draw over the three scripts, then one within the chosen script
    assert rng.calls == [(3, None), (len(KANJI_CHARS), None)]


def test_flat_sets_use_a_single_draw():
    rng = RecordingRandom([15])
    assert next_glyph(rng, GlyphSet.HEX) == "F"
    assert rng.calls == [(16, None)]


def test_japanese_lookup_uses_only_the_given_generator():
    random.seed(7)
    state = random.getstate()
    rng = RecordingRandom([1])
    assert alphabet_for(GlyphSet.JAPANESE, rng) == KATAKANA_CHARS
    assert rng.calls == [(3, None)]
    assert random.getstate() == state


def test_alphabet_lookup_requires_a_generator():
    with pytest.raises(TypeError):
        alphabet_for(GlyphSet.JAPANESE)  # type: ignore[call-arg]


def test_unknown_set_falls_back_to_default_glyph():
    rng = random.Random(0)
    assert alphabet_for("nope", rng) == ""  # type: ignore[arg-type]
    assert next_glyph(rng, "nope") == DEFAULT_GLYPH  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("ascii", GlyphSet.ASCII),
        ("HEX", GlyphSet.HEX),
        ("Japanese", GlyphSet.JAPANESE),
        ("bin", GlyphSet.BIN),
        ("  hex ", GlyphSet.HEX),
        ("octal", GlyphSet.BIN),
        ("", GlyphSet.BIN),
        (None, GlyphSet.BIN),
    ],
)
def test_parse_glyph_set(name, expected):
    assert parse_glyph_set(name) is expected
