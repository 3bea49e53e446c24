"""Educational mapping from original rows to logical groups."""

from __future__ import annotations

import random
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from tileswap.models.grid import GridDescriptor, original_row


@dataclass(frozen=True)
class EducationalMapping:
    """Indirection table from an original row to its logical group.

    Two tiles facing each other on a row are a correct pair when their
    original rows resolve to the same group, even if they were not
    generated on the same row.
    """

    groups: tuple[Hashable, ...]

    @classmethod
    def for_grid(
        cls, groups: Sequence[Hashable], grid: GridDescriptor
    ) -> EducationalMapping:
        """Bind *groups* to *grid*, checking its length.

        The table may be given per row (``rows`` entries) or per tile
        (``columns * rows`` entries).  A per-tile table is collapsed to
        one group per row and must agree across each row.
        """
        if len(groups) == grid.rows:
            return cls(groups=tuple(groups))
        if len(groups) != grid.size:
            raise ValueError(
                f"Educational mapping must have {grid.rows} (per row) or "
                f"{grid.size} (per tile) entries, got {len(groups)}."
            )

        per_row = []
        for row in range(grid.rows):
            cells = groups[grid.index(row, 0) : grid.index(row, 0) + grid.columns]
            if any(cell != cells[0] for cell in cells):
                raise ValueError(
                    f"Educational mapping row {row} mixes groups: {list(cells)}."
                )
            per_row.append(cells[0])
        return cls(groups=tuple(per_row))

    def __len__(self) -> int:
        return len(self.groups)

    def group_of(self, tile_id: int, columns: int) -> Hashable:
        return self.groups[original_row(tile_id, columns)]

    def same_group(self, tile_a: int, tile_b: int, columns: int) -> bool:
        return self.group_of(tile_a, columns) == self.group_of(tile_b, columns)


def educational_shuffle(
    count: int, rng: random.Random | None = None
) -> list[int]:
    """Return a random ordering of ``range(count)``.

    The content generator reorders its prompt and answer lists with the
    same ordering before rendering, then hands the ordering over as the
    mapping for the generated puzzle.
    """
    indices = list(range(count))
    (rng or random).shuffle(indices)
    return indices
