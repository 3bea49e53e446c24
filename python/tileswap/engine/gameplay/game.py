"""Core gameplay logic: applies swaps and watches for completion."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Hashable, Sequence

from tileswap.engine.arrangement import ArrangementGenerator
from tileswap.engine.completion import CompletionEvaluator
from tileswap.engine.gamesolver import SwapSolver
from tileswap.engine.gamestate import GameState
from tileswap.models.board import BoardState
from tileswap.models.grid import GridDescriptor, Variant
from tileswap.models.mapping import EducationalMapping
from tileswap.models.settings import GameSettings

logger = logging.getLogger(__name__)

CompletionListener = Callable[[BoardState], None]


class GamePlay:
    """Owns a single puzzle session.

    A fresh ``GamePlay()`` is uninitialized: swaps, resets and reshuffles
    are silently ignored until :meth:`initialize` has run.  Calls are
    expected to come from one controller at a time.
    """

    def __init__(self) -> None:
        self.state: GameState | None = None
        self._rng: random.Random | None = None
        self._listeners: list[CompletionListener] = []
        self._completion_notified = False

    @classmethod
    def from_settings(
        cls,
        settings: GameSettings,
        pieces: Sequence[bytes] | None = None,
        should_shuffle: bool = True,
        mapping: EducationalMapping | Sequence[Hashable] | None = None,
        rng: random.Random | None = None,
    ) -> GamePlay:
        """Start a session sized by *settings*.

        Without *pieces* each tile gets a placeholder buffer holding its
        own index, which is enough for terminal hosts.
        """
        grid = settings.grid()
        if pieces is None:
            pieces = [str(i).encode() for i in range(grid.size)]
        game = cls()
        game.initialize(
            pieces,
            grid,
            should_shuffle,
            variant=settings.variant,
            mapping=mapping,
            rng=rng,
        )
        return game

    @classmethod
    def from_board(cls, board: BoardState) -> GamePlay:
        """Create a session around an existing board (e.g. built in a test)."""
        game = cls()
        game.state = GameState(board)
        game._completion_notified = board.is_complete()
        return game

    # -- lifecycle ------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self.state is not None

    @property
    def board(self) -> BoardState | None:
        return self.state.board if self.state is not None else None

    def initialize(
        self,
        pieces: Sequence[bytes],
        grid: GridDescriptor,
        should_shuffle: bool,
        variant: Variant = Variant.CLASSIC,
        mapping: EducationalMapping | Sequence[Hashable] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Build a new board, replacing any previous one."""
        if len(pieces) != grid.size:
            raise ValueError(
                f"Expected {grid.size} pieces for a {grid.columns}×{grid.rows} "
                f"grid, got {len(pieces)}."
            )
        if variant is Variant.PAIRED_COLUMNS and grid.columns < 2:
            raise ValueError(
                "Paired-column puzzles need at least 2 columns, "
                f"got {grid.columns}."
            )
        if isinstance(mapping, EducationalMapping):
            mapping = EducationalMapping.for_grid(mapping.groups, grid)
        elif mapping is not None:
            mapping = EducationalMapping.for_grid(mapping, grid)

        board = BoardState.solved(grid, variant, mapping=mapping, pieces=list(pieces))
        if should_shuffle:
            board.arrangement = ArrangementGenerator.generate(
                grid, variant, should_shuffle, rng
            )
            board.minimal_swaps = SwapSolver.minimal_swaps(board)

        self._rng = rng
        self.state = GameState(board)
        self._completion_notified = board.is_complete()
        logger.info(
            "initialized %s puzzle %d×%d (shuffled=%s, mapping=%s, minimal swaps=%d)",
            variant.value,
            grid.columns,
            grid.rows,
            should_shuffle,
            mapping is not None,
            board.minimal_swaps,
        )

    def on_complete(self, listener: CompletionListener) -> None:
        """Register *listener* to be called when a swap completes the puzzle."""
        self._listeners.append(listener)

    # -- commands -------------------------------------------------------------

    def swap(self, pos_a: int, pos_b: int) -> bool:
        """Swap the tiles at two positions.

        Returns True if the board changed.  Out-of-range positions raise
        ``IndexError``.
        """
        if self.state is None:
            logger.debug("swap ignored: puzzle not initialized")
            return False

        if not self.state.board.swap(pos_a, pos_b):
            return False

        self._check_completion()
        return True

    def reset(self) -> None:
        """Return every tile to its solved position without reshuffling."""
        if self.state is None:
            logger.debug("reset ignored: puzzle not initialized")
            return

        self.state.board.reset()
        self._completion_notified = self.state.board.is_complete()

    def reshuffle(self) -> None:
        """Scramble the current board again with its own grid and variant."""
        if self.state is None:
            logger.debug("reshuffle ignored: puzzle not initialized")
            return

        board = self.state.board
        board.arrangement = ArrangementGenerator.generate(
            board.grid, board.variant, True, self._rng
        )
        board.swap_count = 0
        board.minimal_swaps = SwapSolver.minimal_swaps(board)
        self.state.restart_clock()
        self._completion_notified = board.is_complete()
        logger.info("reshuffled (minimal swaps=%d)", board.minimal_swaps)

    # -- queries --------------------------------------------------------------

    def is_complete(self) -> bool:
        if self.state is None:
            return False
        return self.state.board.is_complete()

    @property
    def is_won(self) -> bool:
        return self.is_complete()

    def correct_position_count(self) -> int:
        if self.state is None:
            return 0
        return self.state.board.correct_position_count()

    def completion_ratio(self) -> float:
        if self.state is None:
            return 0.0
        return self.state.board.completion_ratio()

    def correct_row_count(self) -> int:
        if self.state is None:
            return 0
        return CompletionEvaluator.correct_row_count(self.state.board)

    # -- helpers --------------------------------------------------------------

    def _check_completion(self) -> None:
        board = self.state.board
        if not board.is_complete():
            self._completion_notified = False
            return
        if self._completion_notified:
            return

        self._completion_notified = True
        logger.info("puzzle complete after %d swaps", board.swap_count)
        for listener in list(self._listeners):
            listener(board)
