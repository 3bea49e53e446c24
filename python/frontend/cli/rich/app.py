"""Rich terminal frontend for the tile-swap puzzle.

Uses the ``rich`` library for styled output.  Tiles are swapped by typing
two position numbers at the prompt; the board shows each position number
next to the tile currently sitting there.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from tileswap.engine.gameplay import GamePlay
from tileswap.engine.gamesolver import SwapSolver
from tileswap.models.board import BoardState
from tileswap.models.grid import Variant
from tileswap.models.mapping import educational_shuffle
from tileswap.models.settings import GameSettings

console = Console()

_HELP = (
    "[bold cyan]<a> <b>[/bold cyan] [dim]swap[/dim]   "
    "[bold cyan]h[/bold cyan] [dim]hint[/dim]   "
    "[bold cyan]r[/bold cyan] [dim]reset[/dim]   "
    "[bold cyan]s[/bold cyan] [dim]reshuffle[/dim]   "
    "[bold cyan]q[/bold cyan] [dim]quit[/dim]"
)


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# Times-table facts dealt to paired puzzles; two products repeat so that
# some rows can be completed by more than one answer tile.
_DECK: tuple[tuple[int, int], ...] = (
    (3, 4),
    (2, 6),
    (4, 5),
    (6, 7),
    (2, 9),
    (3, 6),
)


def check_settings(settings: GameSettings) -> None:
    """Reject settings whose puzzle would start out solved.

    Raises ``ValueError`` for a paired puzzle with fewer than 2 rows or a
    classic puzzle with a single tile.
    """
    if settings.variant is Variant.PAIRED_COLUMNS:
        if settings.rows < 2:
            raise ValueError(
                f"Paired puzzles need at least 2 rows, got {settings.rows}."
            )
    elif settings.columns * settings.rows < 2:
        raise ValueError("Classic puzzles need at least 2 tiles.")


def _times_table_deck(
    rows: int, rng: random.Random | None
) -> tuple[list[bytes], list[int]]:
    """Build prompt/answer tiles for a 2-column multiplication puzzle.

    Facts sharing a product share a group, so ``3×4`` may be answered by
    either ``12`` tile.
    """
    rng = rng or random.Random()
    while True:
        order = educational_shuffle(len(_DECK), rng)
        facts = [_DECK[i] for i in order[:rows]]
        if rows < 2 or len({a * b for a, b in facts}) > 1:
            break

    pieces: list[bytes] = []
    for a, b in facts:
        pieces.append(f"{a}×{b}".encode())
        pieces.append(str(a * b).encode())
    mapping = [a * b for a, b in facts]
    return pieces, mapping


def _scramble(game: GamePlay) -> None:
    # Shared products can make a fresh shuffle come out already solved.
    while game.is_complete():
        game.reshuffle()


def _new_game(settings: GameSettings, rng: random.Random | None) -> GamePlay:
    check_settings(settings)
    if settings.variant is Variant.PAIRED_COLUMNS:
        settings = settings.with_difficulty(2, settings.rows)
        pieces, mapping = _times_table_deck(settings.rows, rng)
        game = GamePlay.from_settings(settings, pieces=pieces, mapping=mapping, rng=rng)
    else:
        pieces = [str(i + 1).encode() for i in range(settings.columns * settings.rows)]
        game = GamePlay.from_settings(settings, pieces=pieces, rng=rng)
    _scramble(game)
    return game


# -- board rendering ----------------------------------------------------------


def _render_board(board: BoardState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.grid.columns):
        table.add_column(min_width=6, justify="center")

    for r in range(board.grid.rows):
        cells: list[str] = []
        for c in range(board.grid.columns):
            pos = board.grid.index(r, c)
            label = board.piece_at(pos).decode(errors="replace")
            if board.is_tile_correct(pos):
                cells.append(f"[dim]{pos}[/dim] [bold green]{label}[/bold green]")
            else:
                cells.append(f"[dim]{pos}[/dim] [bold white]{label}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    board = game.board
    stats = Text()
    stats.append("  Swaps: ", style="dim")
    stats.append(str(board.swap_count), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(board.minimal_swaps), style="bold yellow")
    if board.variant is Variant.PAIRED_COLUMNS:
        stats.append("    Rows: ", style="dim")
        stats.append(f"{game.correct_row_count()}/{board.grid.rows}", style="bold yellow")
    else:
        stats.append("    Placed: ", style="dim")
        stats.append(f"{game.completion_ratio():.0%}", style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()
    grid = game.board.grid
    panel = Panel(
        Align.center(_render_board(game.board)),
        title=f"[bold cyan]Tile Swap  {grid.columns}×{grid.rows}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(Text.from_markup(_HELP)))


def _draw_win(board: BoardState, elapsed: float) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append(f"  Solved in {board.swap_count} swaps  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(_render_board(board)),
        Align.center(congrats),
        Align.center(Text(f"Time: {_format_time(elapsed)}", style="dim")),
    )
    panel = Panel(
        group,
        title="[bold green]Tile Swap[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- command handling ---------------------------------------------------------


def _apply_command(game: GamePlay, command: str) -> str:
    """Run one prompt command.  Returns a status message."""
    parts = command.split()
    if len(parts) == 2 and all(p.isdigit() for p in parts):
        a, b = int(parts[0]), int(parts[1])
        size = game.board.size
        if not (0 <= a < size and 0 <= b < size):
            return f"[red]Positions must be between 0 and {size - 1}.[/red]"
        if not game.swap(a, b):
            return "[yellow]Pick two different positions.[/yellow]"
        return ""

    if command == "h":
        hint = SwapSolver.hint(game.board)
        if hint is None:
            return "[green]Already solved![/green]"
        game.swap(*hint)
        return f"[cyan]Hint:[/cyan] swapped [bold]{hint[0]}[/bold] and [bold]{hint[1]}[/bold]"
    if command == "r":
        game.reset()
        return "[yellow]Reset to the solved picture.[/yellow]"
    if command == "s":
        game.reshuffle()
        _scramble(game)
        return "[yellow]Scrambled![/yellow]"
    return "[red]Unknown command.[/red]"


# -- game loop ----------------------------------------------------------------


def _play(settings: GameSettings, rng: random.Random | None) -> None:
    while True:
        game = _new_game(settings, rng)
        finished: list[BoardState] = []
        game.on_complete(finished.append)
        status = ""

        while not finished:
            _draw_game(game, status)
            command = Prompt.ask("  >", console=console).strip().lower()
            if command == "q":
                return
            status = _apply_command(game, command)

        game.state.pause()
        _draw_win(finished[-1], game.state.elapsed_time)
        again = Prompt.ask(
            "  Play again?", choices=["y", "n"], default="y", console=console
        )
        if again != "y":
            return


# -- public entry point -------------------------------------------------------


def run(settings: GameSettings, seed: int | None = None) -> None:
    """Launch the Rich CLI for the puzzle described by *settings*."""
    rng = random.Random(seed) if seed is not None else None
    _play(settings, rng)
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
