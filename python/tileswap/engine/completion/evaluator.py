"""Completion rules for every puzzle variant."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tileswap.models.grid import Variant

if TYPE_CHECKING:
    from tileswap.models.board import BoardState


class CompletionEvaluator:
    """Stateless evaluator; all methods are static."""

    @staticmethod
    def is_complete(board: BoardState) -> bool:
        if board.variant is Variant.PAIRED_COLUMNS:
            return all(
                CompletionEvaluator.is_row_complete(board, row)
                for row in range(board.grid.rows)
            )
        return board.arrangement == board.initial_arrangement

    @staticmethod
    def is_row_complete(board: BoardState, row: int) -> bool:
        """Check the prompt/answer pair on *row*.

        Without a mapping both tiles must be back on their own positions.
        With a mapping the two tiles only need to belong to the same
        logical group.
        """
        grid = board.grid
        if grid.columns < 2:
            return False

        left = grid.index(row, 0)
        right = grid.index(row, 1)
        tile_left = board.arrangement[left]
        tile_right = board.arrangement[right]

        if board.mapping is None:
            return tile_left == left and tile_right == right
        return board.mapping.same_group(tile_left, tile_right, grid.columns)

    @staticmethod
    def correct_row_count(board: BoardState) -> int:
        """Number of rows whose pair is correct (paired variant only)."""
        if board.variant is not Variant.PAIRED_COLUMNS:
            return 0
        return sum(
            1
            for row in range(board.grid.rows)
            if CompletionEvaluator.is_row_complete(board, row)
        )
