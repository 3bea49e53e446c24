"""Rich frontend helpers: deck building and prompt commands."""

from __future__ import annotations

import random

import pytest

from frontend.cli.rich.app import (
    _DECK,
    _apply_command,
    _new_game,
    _times_table_deck,
    check_settings,
)
from tileswap.models.grid import Variant
from tileswap.models.settings import GameSettings


def test_times_table_deck_pairs_prompts_with_products() -> None:
    pieces, mapping = _times_table_deck(4, random.Random(8))
    assert len(pieces) == 8
    assert len(mapping) == 4
    for row, product in enumerate(mapping):
        a, b = pieces[2 * row].decode().split("×")
        assert int(a) * int(b) == product
        assert int(pieces[2 * row + 1]) == product


def test_paired_game_uses_two_columns() -> None:
    settings = GameSettings.initial().with_difficulty(5, 4).with_variant(
        Variant.PAIRED_COLUMNS
    )
    game = _new_game(settings, random.Random(3))
    assert game.board.grid.columns == 2
    assert game.board.mapping is not None


def test_commands_drive_the_game() -> None:
    game = _new_game(GameSettings.initial(), random.Random(5))

    assert _apply_command(game, "0 1") == ""
    assert game.board.swap_count == 1
    assert "different" in _apply_command(game, "2 2")
    assert "between" in _apply_command(game, "0 42")
    assert "Unknown" in _apply_command(game, "xyz")

    _apply_command(game, "r")
    assert game.is_complete()
    assert "Already solved" in _apply_command(game, "h")

    _apply_command(game, "s")
    assert not game.is_complete()
    assert "Hint" in _apply_command(game, "h")
    assert game.board.swap_count == 1


def _paired(rows: int) -> GameSettings:
    return GameSettings.initial().with_difficulty(2, rows).with_variant(
        Variant.PAIRED_COLUMNS
    )


@pytest.mark.parametrize("rows", [2, 3])
def test_deck_is_dealt_from_the_fixed_facts(rows: int) -> None:
    for seed in range(30):
        pieces, mapping = _times_table_deck(rows, random.Random(seed))
        prompts = [tuple(map(int, p.decode().split("×"))) for p in pieces[::2]]
        assert set(prompts) <= set(_DECK)
        assert len(set(prompts)) == rows
        assert len(set(mapping)) > 1


def test_deck_order_depends_on_the_seed() -> None:
    orders = {tuple(_times_table_deck(6, random.Random(s))[1]) for s in range(20)}
    assert len(orders) > 1


def test_new_paired_game_never_starts_solved() -> None:
    for seed in range(100):
        game = _new_game(_paired(3), random.Random(seed))
        assert not game.is_complete(), f"seed {seed}"


def test_reshuffle_command_never_lands_solved() -> None:
    rng = random.Random(2)
    game = _new_game(_paired(2), rng)
    for _ in range(40):
        _apply_command(game, "s")
        assert not game.is_complete()


def test_paired_win_fires_the_completion_event() -> None:
    game = _new_game(_paired(3), random.Random(4))
    finished = []
    game.on_complete(finished.append)
    while not finished:
        assert "Hint" in _apply_command(game, "h")
    assert game.is_complete()


@pytest.mark.parametrize(
    "settings",
    [
        GameSettings.initial().with_difficulty(2, 1).with_variant(
            Variant.PAIRED_COLUMNS
        ),
        GameSettings.initial().with_difficulty(1, 1),
    ],
    ids=["paired-one-row", "classic-one-tile"],
)
def test_settings_that_start_solved_are_rejected(settings: GameSettings) -> None:
    with pytest.raises(ValueError):
        check_settings(settings)
    with pytest.raises(ValueError):
        _new_game(settings, random.Random(0))


def test_smallest_playable_settings_are_accepted() -> None:
    check_settings(GameSettings.initial().with_difficulty(1, 2))
    check_settings(_paired(2))
