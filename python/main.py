#!/usr/bin/env python3
"""Tile Swap Puzzle.

Usage::

    python main.py                      # 3×3 classic puzzle
    python main.py -c 4 -r 4            # 4×4 classic puzzle
    python main.py -v paired -r 5       # 2-column multiplication puzzle
    python main.py --seed 7 --log-level debug
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tileswap.models.grid import Variant  # noqa: E402
from tileswap.models.settings import MAX_SIDE, MIN_SIDE, GameSettings  # noqa: E402


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=getattr(logging, level.value.upper()),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    columns: int = typer.Option(
        3, "-c", "--columns",
        min=MIN_SIDE, max=MAX_SIDE,
        help="Grid columns (ignored for paired puzzles, which use 2).",
    ),
    rows: int = typer.Option(
        3, "-r", "--rows",
        min=MIN_SIDE, max=MAX_SIDE,
        help="Grid rows.",
    ),
    variant: Variant = typer.Option(
        Variant.CLASSIC, "-v", "--variant",
        help="Puzzle kind: full scramble or paired columns.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffles for a reproducible puzzle.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
) -> None:
    """Tile Swap Puzzle."""
    _configure_logging(log_level)

    from frontend.cli.rich.app import check_settings, run

    settings = GameSettings.initial().with_difficulty(columns, rows).with_variant(variant)
    try:
        check_settings(settings)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    run(settings, seed=seed)


if __name__ == "__main__":
    app()
