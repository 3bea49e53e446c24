"""Tile-swap puzzle solver."""

from __future__ import annotations

from collections import deque

from tileswap.engine.completion.evaluator import CompletionEvaluator
from tileswap.models.board import BoardState
from tileswap.models.grid import Variant

Swap = tuple[int, int]


class SwapSolver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: BoardState) -> list[Swap]:
        """Return a swap sequence that completes *board*, or ``[]`` if complete.

        Every swap puts at least one tile where it belongs.  For the
        classic variant this is optimal: ``N - cycles`` swaps, never more
        than ``N - 1``.  Paired puzzles with a mapping are searched for the
        fewest swaps that leave correct rows alone.
        """
        if CompletionEvaluator.is_complete(board):
            return []

        if board.variant is Variant.PAIRED_COLUMNS and board.mapping is not None:
            swaps = SwapSolver._pair_groups(board)
            if swaps is not None:
                return swaps

        return SwapSolver._place_tiles(board.arrangement, SwapSolver._targets(board))

    @staticmethod
    def hint(board: BoardState) -> Swap | None:
        """Return the next swap to play, or ``None`` if already complete."""
        swaps = SwapSolver.solve(board)
        return swaps[0] if swaps else None

    @staticmethod
    def minimal_swaps(board: BoardState) -> int:
        return len(SwapSolver.solve(board))

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _targets(board: BoardState) -> list[int]:
        """Positions that must hold their own tile for an identity solution."""
        if board.variant is Variant.PAIRED_COLUMNS:
            grid = board.grid
            return [
                grid.index(row, col)
                for row in range(grid.rows)
                for col in (0, 1)
            ]
        return list(range(board.size))

    @staticmethod
    def _place_tiles(arrangement: list[int], targets: list[int]) -> list[Swap]:
        arr = arrangement[:]
        where = {tile: pos for pos, tile in enumerate(arr)}
        swaps: list[Swap] = []
        for pos in targets:
            if arr[pos] == pos:
                continue
            src = where[pos]
            swaps.append((pos, src))
            moved = arr[pos]
            arr[pos], arr[src] = pos, moved
            where[pos], where[moved] = pos, src
        return swaps

    @staticmethod
    def _pair_groups(board: BoardState) -> list[Swap] | None:
        """Fewest swaps that leave every row holding a single group.

        Breadth-first search over the rows that are not yet correct and
        the tiles outside the two paired columns.  Every swap explored
        completes at least one row; rows already correct are never
        touched.  States that only differ by which row (or which side of
        a row) holds a pair are merged.  Returns ``None`` when the open
        rows cannot be completed this way.
        """
        grid = board.grid
        mapping = board.mapping
        if mapping is None:
            return None

        ids: dict[object, int] = {}
        groups = [
            ids.setdefault(mapping.group_of(tile, grid.columns), len(ids))
            for tile in board.arrangement
        ]
        paired = {grid.index(r, c) for r in range(grid.rows) for c in (0, 1)}
        positions = [
            grid.index(r, c)
            for r in range(grid.rows)
            if groups[grid.index(r, 0)] != groups[grid.index(r, 1)]
            for c in (0, 1)
        ]
        n_pairs = len(positions)
        positions += [p for p in range(grid.size) if p not in paired]

        def key(state: tuple[int, ...]) -> tuple:
            rows = sorted(
                tuple(sorted(state[i : i + 2])) for i in range(0, n_pairs, 2)
            )
            return tuple(rows), tuple(sorted(state[n_pairs:]))

        def solved(state: tuple[int, ...]) -> bool:
            return all(state[i] == state[i + 1] for i in range(0, n_pairs, 2))

        def moves(state: tuple[int, ...]):
            for i in range(0, n_pairs, 2):
                if state[i] == state[i + 1]:
                    continue
                for keep, give in ((i, i + 1), (i + 1, i)):
                    wanted = state[keep]
                    spare_seen = False
                    for j in range(len(state)):
                        if j in (keep, give) or state[j] != wanted:
                            continue
                        if j < n_pairs:
                            row = j - j % 2
                            if state[row] == state[row + 1]:
                                continue
                        elif spare_seen:
                            continue
                        else:
                            spare_seen = True
                        yield give, j

        start = tuple(groups[p] for p in positions)
        queue: deque[tuple[tuple[int, ...], list[Swap]]] = deque([(start, [])])
        seen = {key(start)}
        while queue:
            state, path = queue.popleft()
            for a, b in moves(state):
                nxt = list(state)
                nxt[a], nxt[b] = nxt[b], nxt[a]
                nxt_state = tuple(nxt)
                step = path + [(positions[a], positions[b])]
                if solved(nxt_state):
                    return step
                k = key(nxt_state)
                if k not in seen:
                    seen.add(k)
                    queue.append((nxt_state, step))
        return None
