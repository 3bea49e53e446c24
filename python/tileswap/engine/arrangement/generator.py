"""Generates scrambled tile arrangements."""

from __future__ import annotations

import logging
import random

from tileswap.models.board import is_permutation
from tileswap.models.grid import GridDescriptor, Variant

logger = logging.getLogger(__name__)


class DerangementError(RuntimeError):
    """The generator could not produce a valid arrangement."""


class ArrangementGenerator:
    """Creates starting arrangements for every puzzle variant."""

    # Safety valve only: a derangement exists for every size >= 2 and one
    # pass succeeds far more often than not.
    MAX_ATTEMPTS = 1000

    @staticmethod
    def identity(size: int) -> list[int]:
        return list(range(size))

    @staticmethod
    def generate(
        grid: GridDescriptor,
        variant: Variant,
        should_shuffle: bool,
        rng: random.Random | None = None,
    ) -> list[int]:
        """Return the starting arrangement for a new puzzle.

        Classic puzzles get a full derangement (no tile on its own
        position).  Paired-column puzzles only scramble the answer column.
        """
        size = grid.size
        if not should_shuffle or size < 2:
            return ArrangementGenerator.identity(size)

        if variant is Variant.PAIRED_COLUMNS:
            if grid.columns < 2:
                raise ValueError(
                    "Paired-column puzzles need at least 2 columns, "
                    f"got {grid.columns}."
                )
            arrangement = ArrangementGenerator.shuffle_answer_column(grid, rng)
        else:
            arrangement = ArrangementGenerator.derangement(size, rng)

        if not is_permutation(arrangement, size):
            logger.error("generated arrangement is not a permutation: %s", arrangement)
            raise DerangementError(
                f"Generated arrangement is not a permutation of 0..{size - 1}."
            )
        return arrangement

    @staticmethod
    def derangement(size: int, rng: random.Random | None = None) -> list[int]:
        """Return a permutation of ``range(size)`` with no fixed point."""
        rng = rng or random
        if size < 2:
            return ArrangementGenerator.identity(size)

        for attempt in range(1, ArrangementGenerator.MAX_ATTEMPTS + 1):
            arrangement = ArrangementGenerator.identity(size)
            for i in range(size):
                j = rng.randrange(size - 1)
                if j >= i:
                    j += 1
                arrangement[i], arrangement[j] = arrangement[j], arrangement[i]

            if all(tile != i for i, tile in enumerate(arrangement)):
                logger.debug(
                    "derangement of %d tiles after %d attempt(s)", size, attempt
                )
                return arrangement

        logger.error(
            "no derangement of %d tiles after %d attempts",
            size,
            ArrangementGenerator.MAX_ATTEMPTS,
        )
        raise DerangementError(
            f"Could not derange {size} tiles in "
            f"{ArrangementGenerator.MAX_ATTEMPTS} attempts."
        )

    @staticmethod
    def shuffle_answer_column(
        grid: GridDescriptor, rng: random.Random | None = None
    ) -> list[int]:
        """Shuffle the second column; every other tile stays in place.

        Fixed points are allowed here, so a row may keep its own answer.
        """
        rng = rng or random
        arrangement = ArrangementGenerator.identity(grid.size)
        positions = grid.answer_positions()

        values = [arrangement[p] for p in positions]
        rng.shuffle(values)
        for pos, value in zip(positions, values):
            arrangement[pos] = value
        return arrangement
