"""Gameplay controller: lifecycle, no-op policy and the completion event."""

from __future__ import annotations

import random

import pytest

from tileswap.engine.gameplay import GamePlay
from tileswap.models.board import BoardState
from tileswap.models.grid import GridDescriptor, Variant
from tileswap.models.mapping import EducationalMapping
from tileswap.models.settings import GameSettings


def _pieces(n: int) -> list[bytes]:
    return [f"tile-{i}".encode() for i in range(n)]


def _classic(columns: int = 3, rows: int = 3, seed: int = 1) -> GamePlay:
    game = GamePlay()
    grid = GridDescriptor(columns, rows)
    game.initialize(_pieces(grid.size), grid, True, rng=random.Random(seed))
    return game


# -- uninitialized ------------------------------------------------------------


def test_uninitialized_game_ignores_commands() -> None:
    game = GamePlay()
    assert not game.is_initialized
    assert not game.swap(0, 1)
    game.reset()
    game.reshuffle()
    assert game.board is None
    assert not game.is_complete()
    assert game.correct_position_count() == 0
    assert game.completion_ratio() == 0.0
    assert game.correct_row_count() == 0


# -- initialize ---------------------------------------------------------------


def test_initialize_classic_deranges_and_resets_counters() -> None:
    game = _classic()
    board = game.board
    assert board is not None
    assert board.initial_arrangement == list(range(9))
    assert all(tile != pos for pos, tile in enumerate(board.arrangement))
    assert board.swap_count == 0
    assert 1 <= board.minimal_swaps <= 8
    assert not game.is_complete()
    assert game.correct_position_count() == 0


def test_initialize_without_shuffle_is_solved() -> None:
    game = GamePlay()
    grid = GridDescriptor(2, 2)
    game.initialize(_pieces(4), grid, False)
    assert game.board.arrangement == [0, 1, 2, 3]
    assert game.is_complete()
    assert game.completion_ratio() == 1.0
    assert game.board.minimal_swaps == 0


def test_initialize_rejects_piece_count_mismatch() -> None:
    with pytest.raises(ValueError, match="pieces"):
        GamePlay().initialize(_pieces(5), GridDescriptor(3, 2), True)


def test_initialize_rejects_bad_mapping() -> None:
    with pytest.raises(ValueError):
        GamePlay().initialize(
            _pieces(6), GridDescriptor(2, 3), True,
            variant=Variant.PAIRED_COLUMNS, mapping=[0, 1],
        )


def test_initialize_rejects_single_column_paired_puzzle() -> None:
    with pytest.raises(ValueError):
        GamePlay().initialize(
            _pieces(3), GridDescriptor(1, 3), False, variant=Variant.PAIRED_COLUMNS
        )


def test_initialize_binds_mapping() -> None:
    game = GamePlay()
    grid = GridDescriptor(2, 3)
    game.initialize(
        _pieces(6), grid, True,
        variant=Variant.PAIRED_COLUMNS, mapping=["A", "B", "A"],
        rng=random.Random(4),
    )
    assert isinstance(game.board.mapping, EducationalMapping)
    assert game.board.mapping.groups == ("A", "B", "A")
    assert [game.board.arrangement[p] for p in (0, 2, 4)] == [0, 2, 4]


def test_reinitialize_replaces_board() -> None:
    game = _classic()
    game.swap(0, 1)
    grid = GridDescriptor(4, 4)
    game.initialize(_pieces(16), grid, True, rng=random.Random(2))
    assert game.board.grid == grid
    assert game.board.swap_count == 0


def test_from_settings_uses_placeholder_pieces() -> None:
    settings = GameSettings.initial().with_difficulty(2, 4)
    game = GamePlay.from_settings(settings, rng=random.Random(9))
    assert game.board.grid.size == 8
    assert game.board.pieces[3] == b"3"


# -- swap, reset, reshuffle ---------------------------------------------------


def test_swap_updates_board() -> None:
    game = _classic()
    before = game.board.arrangement[:]
    assert game.swap(0, 4)
    assert game.board.arrangement[0] == before[4]
    assert game.board.swap_count == 1
    assert not game.swap(3, 3)
    assert game.board.swap_count == 1


def test_swap_out_of_range_fails_fast() -> None:
    game = _classic()
    with pytest.raises(IndexError):
        game.swap(0, 9)


def test_reset_makes_classic_complete() -> None:
    game = _classic()
    game.swap(0, 1)
    game.swap(2, 5)
    game.reset()
    assert game.is_complete()
    assert game.board.swap_count == 0


def test_reshuffle_keeps_grid_and_variant() -> None:
    game = GamePlay()
    grid = GridDescriptor(2, 4)
    game.initialize(
        _pieces(8), grid, False, variant=Variant.PAIRED_COLUMNS,
        rng=random.Random(6),
    )
    game.swap(0, 2)
    game.reshuffle()
    board = game.board
    assert board.grid == grid
    assert board.variant is Variant.PAIRED_COLUMNS
    assert board.swap_count == 0
    assert [board.arrangement[p] for p in (0, 2, 4, 6)] == [0, 2, 4, 6]


# -- completion event ---------------------------------------------------------


def test_completion_event_fires_once() -> None:
    board = BoardState.solved(GridDescriptor(2, 2))
    board.arrangement = [1, 0, 2, 3]
    game = GamePlay.from_board(board)
    fired: list[BoardState] = []
    game.on_complete(fired.append)

    game.swap(2, 3)
    assert fired == []
    game.swap(2, 3)
    assert fired == []

    game.swap(0, 1)
    assert fired == [board]
    assert game.is_won


def test_completion_event_rearms_after_leaving_complete_state() -> None:
    board = BoardState.solved(GridDescriptor(2, 2))
    board.arrangement = [1, 0, 2, 3]
    game = GamePlay.from_board(board)
    fired: list[int] = []
    game.on_complete(lambda b: fired.append(b.swap_count))

    game.swap(0, 1)
    game.swap(0, 1)
    game.swap(0, 1)
    assert fired == [1, 3]


def test_completion_event_not_repeated_while_still_complete() -> None:
    # Swapping the third column of a paired puzzle keeps it complete.
    game = GamePlay()
    game.initialize(_pieces(6), GridDescriptor(3, 2), False, variant=Variant.PAIRED_COLUMNS)
    fired: list[BoardState] = []
    game.on_complete(fired.append)

    game.swap(2, 5)
    assert game.is_complete()
    assert fired == []


def test_reset_does_not_fire_completion_event() -> None:
    game = _classic()
    fired: list[BoardState] = []
    game.on_complete(fired.append)
    game.reset()
    assert game.is_complete()
    assert fired == []


def test_paired_game_with_mapping_reports_rows() -> None:
    board = BoardState.solved(
        GridDescriptor(2, 3),
        Variant.PAIRED_COLUMNS,
        mapping=EducationalMapping(("A", "B", "A")),
    )
    board.arrangement = [0, 3, 2, 1, 4, 5]
    game = GamePlay.from_board(board)
    fired: list[BoardState] = []
    game.on_complete(fired.append)

    assert game.correct_row_count() == 1
    # Row 0 takes row 2's answer, then row 1 gets its own back.  Rows 0
    # and 2 end up with their group-A answers crossed over.
    game.swap(1, 5)
    assert game.board.arrangement == [0, 5, 2, 1, 4, 3]
    assert not game.is_complete()
    game.swap(3, 5)
    assert game.board.arrangement == [0, 5, 2, 3, 4, 1]
    assert game.is_complete()
    assert game.correct_row_count() == 3
    assert len(fired) == 1
