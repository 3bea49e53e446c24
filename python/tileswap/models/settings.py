"""Game settings: grid difficulty and puzzle variant."""

from __future__ import annotations

from dataclasses import dataclass, replace

from tileswap.models.grid import GridDescriptor, Variant

MIN_SIDE = 1
MAX_SIDE = 6
DEFAULT_COLUMNS = 3
DEFAULT_ROWS = 3


@dataclass(frozen=True)
class GameSettings:
    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    variant: Variant = Variant.CLASSIC
    use_custom_grid_size: bool = True

    def __post_init__(self) -> None:
        for name, value in (("columns", self.columns), ("rows", self.rows)):
            if not MIN_SIDE <= value <= MAX_SIDE:
                raise ValueError(
                    f"{name} must be between {MIN_SIDE} and {MAX_SIDE}, "
                    f"got {value}."
                )

    @classmethod
    def initial(cls) -> GameSettings:
        return cls()

    def with_difficulty(self, columns: int, rows: int) -> GameSettings:
        return replace(self, columns=columns, rows=rows, use_custom_grid_size=True)

    def reset_difficulty(self) -> GameSettings:
        return replace(
            self,
            columns=DEFAULT_COLUMNS,
            rows=DEFAULT_ROWS,
            use_custom_grid_size=False,
        )

    def with_variant(self, variant: Variant) -> GameSettings:
        return replace(self, variant=variant)

    def grid(self) -> GridDescriptor:
        return GridDescriptor(columns=self.columns, rows=self.rows)
