"""Board model for the tile-swap puzzle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tileswap.models.grid import GridDescriptor, Variant
from tileswap.models.mapping import EducationalMapping

logger = logging.getLogger(__name__)


def is_permutation(arrangement: list[int], size: int) -> bool:
    """True if *arrangement* holds every tile of ``range(size)`` exactly once."""
    return len(arrangement) == size and sorted(arrangement) == list(range(size))


@dataclass
class BoardState:
    """Which original tile sits at which grid position.

    ``arrangement[i]`` is the identity of the tile currently shown at
    position ``i``.  ``initial_arrangement`` is always the identity and is
    the solved reference for the classic variant.
    """

    grid: GridDescriptor
    arrangement: list[int]
    initial_arrangement: list[int]
    variant: Variant = Variant.CLASSIC
    mapping: EducationalMapping | None = None
    pieces: list[bytes] = field(default_factory=list)
    swap_count: int = 0
    minimal_swaps: int = 0

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(
        cls,
        grid: GridDescriptor,
        variant: Variant = Variant.CLASSIC,
        mapping: EducationalMapping | None = None,
        pieces: list[bytes] | None = None,
    ) -> BoardState:
        identity = list(range(grid.size))
        return cls(
            grid=grid,
            arrangement=identity[:],
            initial_arrangement=identity,
            variant=variant,
            mapping=mapping,
            pieces=list(pieces) if pieces is not None else [],
        )

    # -- mutation -------------------------------------------------------------

    def swap(self, pos_a: int, pos_b: int) -> bool:
        """Exchange the tiles at two positions.

        Returns False (and changes nothing) when both positions are the
        same.  Raises ``IndexError`` for a position outside the grid.
        """
        for pos in (pos_a, pos_b):
            if not self.grid.contains(pos):
                raise IndexError(
                    f"Position {pos} is outside the {self.grid.columns}×"
                    f"{self.grid.rows} grid."
                )
        if pos_a == pos_b:
            return False

        arr = self.arrangement
        arr[pos_a], arr[pos_b] = arr[pos_b], arr[pos_a]
        self.swap_count += 1
        logger.debug(
            "swap %d <-> %d (swap #%d)", pos_a, pos_b, self.swap_count
        )
        return True

    def reset(self) -> None:
        """Put every tile back on its own position; does not reshuffle."""
        self.arrangement = self.initial_arrangement[:]
        self.swap_count = 0
        self.minimal_swaps = 0

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.grid.size

    def piece_at(self, position: int) -> bytes:
        return self.pieces[self.arrangement[position]]

    def is_tile_correct(self, position: int) -> bool:
        return self.arrangement[position] == position

    def correct_position_count(self) -> int:
        return sum(1 for i, tile in enumerate(self.arrangement) if tile == i)

    def completion_ratio(self) -> float:
        return self.correct_position_count() / self.size

    def is_complete(self) -> bool:
        from tileswap.engine.completion import CompletionEvaluator

        return CompletionEvaluator.is_complete(self)

    def copy(self) -> BoardState:
        return BoardState(
            grid=self.grid,
            arrangement=self.arrangement[:],
            initial_arrangement=self.initial_arrangement[:],
            variant=self.variant,
            mapping=self.mapping,
            pieces=self.pieces,
            swap_count=self.swap_count,
            minimal_swaps=self.minimal_swaps,
        )
