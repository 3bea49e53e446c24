"""Grid geometry and puzzle variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Variant(StrEnum):
    CLASSIC = "classic"
    PAIRED_COLUMNS = "paired"

    @classmethod
    def from_puzzle_type(cls, puzzle_type: int) -> Variant:
        """Translate the legacy numeric puzzle type.

        ``1`` is the classic puzzle; ``2`` (educational) and ``3``
        (combinations) are both row-paired puzzles.
        """
        if puzzle_type == 1:
            return cls.CLASSIC
        if puzzle_type in (2, 3):
            return cls.PAIRED_COLUMNS
        raise ValueError(f"Unknown puzzle type: {puzzle_type!r}")


@dataclass(frozen=True)
class GridDescriptor:
    """Column/row decomposition of a linear tile index.

    Position ``i`` sits at row ``i // columns``, column ``i % columns``.
    """

    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f"Grid must have at least one column and one row, "
                f"got {self.columns}×{self.rows}."
            )

    @property
    def size(self) -> int:
        return self.columns * self.rows

    def index(self, row: int, col: int) -> int:
        return row * self.columns + col

    def position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.columns)

    def contains(self, index: int) -> bool:
        return 0 <= index < self.size

    def answer_positions(self) -> list[int]:
        """Positions of the second column, one per row."""
        return [self.index(r, 1) for r in range(self.rows)]


def original_row(tile_id: int, columns: int) -> int:
    """Row a tile occupied when the content was generated.

    Tiles are produced in row-major order, so the row is recoverable from
    the identity alone.
    """
    return tile_id // columns
