# fsmatrix/glyphs.py

from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Tuple


class GlyphSet(Enum):
    """Character alphabets the rain can be drawn from."""

    ASCII = "ascii"
    JAPANESE = "japanese"
    HEX = "hex"
    BIN = "bin"


ASCII_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!·$%&/()=?¿*-:;ºª"

# The japanese set is three equally weighted scripts, not one flat alphabet
HIRAGANA_CHARS = "あいうえおかきくけこさしすせそたちつてとなにぬねの"
KATAKANA_CHARS = "アイウエオカキクケコサシスセソタチツテトナニヌネノ"
KANJI_CHARS = "一二三四五六七八九十百千万円口目手足早長明正高中大"
JAPANESE_SCRIPTS: Tuple[str, ...] = (HIRAGANA_CHARS, KATAKANA_CHARS, KANJI_CHARS)

HEX_CHARS = "1234567890ABCDEF"
BIN_CHARS = "01"

DEFAULT_GLYPH = "0"
DEFAULT_GLYPH_SET = GlyphSet.BIN


def alphabet_for(glyph_set: GlyphSet, rng: random.Random) -> str:
    """
    Return the alphabet to draw from for `glyph_set`.

    For the japanese set the script is chosen first with one uniform draw
    from `rng`, so each script gets the same weight regardless of its size.
    Unknown values return an empty string.
    """
    if glyph_set is GlyphSet.ASCII:
        return ASCII_CHARS
    if glyph_set is GlyphSet.JAPANESE:
        return JAPANESE_SCRIPTS[rng.randrange(len(JAPANESE_SCRIPTS))]
    if glyph_set is GlyphSet.HEX:
        return HEX_CHARS
    if glyph_set is GlyphSet.BIN:
        return BIN_CHARS
    return ""


def next_glyph(rng: random.Random, glyph_set: GlyphSet) -> str:
    """Draw one pseudo-random character from `glyph_set`."""
    alphabet = alphabet_for(glyph_set, rng)
    if not alphabet:
        return DEFAULT_GLYPH
    return alphabet[rng.randrange(len(alphabet))]


def parse_glyph_set(name: Optional[str]) -> GlyphSet:
    """Case-insensitive name lookup; anything unrecognised selects `bin`."""
    if not name:
        return DEFAULT_GLYPH_SET
    try:
        return GlyphSet(name.strip().lower())
    except ValueError:
        return DEFAULT_GLYPH_SET
