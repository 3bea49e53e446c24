"""Tracks the mutable state of a puzzle in progress."""

from __future__ import annotations

import time

from tileswap.models.board import BoardState


class GameState:
    """Holds the current board and the elapsed play time."""

    def __init__(self, board: BoardState) -> None:
        self.board = board
        self._start_time: float = time.monotonic()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.monotonic() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        """Freeze the clock, e.g. once the puzzle is won."""
        if self._running:
            self._elapsed_banked += time.monotonic() - self._start_time
            self._running = False

    def restart_clock(self) -> None:
        self._start_time = time.monotonic()
        self._elapsed_banked = 0.0
        self._running = True
