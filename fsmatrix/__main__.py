from __future__ import annotations

import sys
from importlib import metadata
from typing import List, Optional

import typer

from .config import EngineConfig, load_config
from .glyphs import GlyphSet, parse_glyph_set
from .ui.running import run_animation
from .util.console import debug, info, set_verbose, warn

USAGE = "Usage: fsmatrix [ascii|bin|hex|japanese]"

app = typer.Typer(
    name="fsmatrix",
    help="Digital rain in your terminal. Press Esc to quit.",
    add_completion=False,
)


def _version_string() -> str:
    try:
        return metadata.version("fsmatrix")
    except metadata.PackageNotFoundError:  # pragma: no cover
        return "0.0.0"


def _option_value(name: str, value: Optional[int]) -> Optional[int]:
    """Negative option values are reported and ignored, like bad env values."""
    if value is not None and value < 0:
        warn(f"Ignoring {name} {value}: must be >= 0.")
        return None
    return value


def _apply_overrides(
    cfg: EngineConfig,
    max_columns: Optional[int],
    frame_wait: Optional[int],
    seed: Optional[int],
) -> EngineConfig:
    max_columns = _option_value("--max-columns", max_columns)
    frame_wait = _option_value("--frame-wait", frame_wait)
    seed = _option_value("--seed", seed)
    if max_columns is not None:
        cfg.max_columns = max_columns
    if frame_wait is not None:
        cfg.frame_wait = frame_wait
    if seed is not None:
        cfg.seed = seed
    return cfg


@app.command()
def main(
    glyph_set: Optional[List[str]] = typer.Argument(
        None,
        metavar="[ascii|bin|hex|japanese]",
        help="Character set to rain; the last one given wins. Unknown names fall back to bin.",
        show_default=False,
    ),
    max_columns: Optional[int] = typer.Option(
        None,
        "--max-columns",
        help="Maximum number of columns falling at once (default 64).",
        show_default=False,
    ),
    frame_wait: Optional[int] = typer.Option(
        None,
        "--frame-wait",
        help="Delay between frames in milliseconds (default 100).",
        show_default=False,
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the random source for a reproducible run.",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show fsmatrix version and exit.",
        is_eager=True,
    ),
) -> None:
    """
    Fill the terminal with falling glyphs until Esc is pressed.
    """
    if version:
        typer.echo(f"fsmatrix {_version_string()}")
        raise typer.Exit(code=0)

    if not glyph_set:
        typer.echo(USAGE)
        raise typer.Exit(code=0)

    set_verbose(verbose)
    selected: GlyphSet = parse_glyph_set(glyph_set[-1])
    cfg = _apply_overrides(load_config(), max_columns, frame_wait, seed)
    debug(
        f"glyphs={selected.value} max_columns={cfg.max_columns} "
        f"frame_wait={cfg.frame_wait}ms seed={cfg.seed}"
    )

    try:
        stats = run_animation(selected, cfg)
    except KeyboardInterrupt:
        info("Interrupted.")
        raise typer.Exit(code=0)

    debug(f"frames={stats.frames} spawned={stats.spawned} retired={stats.retired}")


def run() -> None:
    app()


if __name__ == "__main__":
    # When run as a module: python -m fsmatrix
    sys.exit(run())
