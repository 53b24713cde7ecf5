"""
sliding.py — N×N Sliding-Tile Puzzle
=====================================
A concrete state space for the search core.

State encoding:
    A board is a tuple of n*n ints in row-major order, 0 = blank.
    Tuples are hashable and compare by value, which is all the core needs.

        (1, 2, 3,
         4, 5, 6,
         7, 8, 0)       ← default goal for n = 3

Ships five heuristics (all take a board, return a number ≥ 0):
  • zero              – h = 0, A* degrades to uniform-cost search
  • misplaced_tiles   – tiles not on their goal square          (admissible)
  • manhattan         – Σ |Δrow| + |Δcol| over tiles            (admissible)
  • linear_conflict   – manhattan + 2 per tile that must leave
                        its line to let reversed neighbours pass (admissible)
  • weighted_manhattan – 2 × manhattan; faster, NOT optimal

Moving the blank never changes the parity invariant computed by
`_parity()`, so boards with a different parity than the goal are
unreachable; is_solvable() checks that up front.
"""

import random
from typing import Dict, List, Optional, Sequence, Tuple

Board = Tuple[int, ...]

# blank moves: name → (Δrow, Δcol)
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "up":    (-1, 0),
    "down":  (1, 0),
    "left":  (0, -1),
    "right": (0, 1),
}


class SlidingPuzzle:
    """
    Attributes:
        size : Side length n (board has n*n squares).
        goal : Goal board; defaults to 1 … n*n-1 followed by the blank.
    """

    def __init__(self, size: int = 3, goal: Optional[Sequence[int]] = None):
        if size < 2:
            raise ValueError(f"puzzle size must be >= 2, got {size}")
        self.size = size
        self.goal: Board = tuple(goal) if goal is not None else tuple(range(1, size * size)) + (0,)
        _check_permutation(self.goal, size)

        # tile → (row, col) on the goal board
        self._goal_pos: Dict[int, Tuple[int, int]] = {
            tile: divmod(i, size) for i, tile in enumerate(self.goal)
        }

    # ------------------------------------------------------------------
    # Search collaborators
    # ------------------------------------------------------------------
    def is_goal(self, board: Board) -> bool:
        return board == self.goal

    def successors(self, board: Board) -> List[Board]:
        """Boards reachable by sliding one tile into the blank."""
        n = self.size
        blank = board.index(0)
        r, c = divmod(blank, n)
        result = []
        for dr, dc in DIRECTIONS.values():
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n:
                swap = nr * n + nc
                cells = list(board)
                cells[blank], cells[swap] = cells[swap], cells[blank]
                result.append(tuple(cells))
        return result

    # ------------------------------------------------------------------
    # Heuristics
    # ------------------------------------------------------------------
    def zero(self, board: Board) -> int:
        return 0

    def misplaced_tiles(self, board: Board) -> int:
        return sum(1 for tile, want in zip(board, self.goal) if tile != 0 and tile != want)

    def manhattan(self, board: Board) -> int:
        n = self.size
        total = 0
        for i, tile in enumerate(board):
            if tile == 0:
                continue
            r, c = divmod(i, n)
            gr, gc = self._goal_pos[tile]
            total += abs(r - gr) + abs(c - gc)
        return total

    def linear_conflict(self, board: Board) -> int:
        """
        Manhattan plus 2 moves for every tile that has to step out of its
        goal row (or column) so the others in that line can pass it.
        The count per line is len(line) − longest run already in goal order,
        which keeps the estimate admissible.
        """
        n = self.size
        extra = 0
        for line in range(n):
            row_goals = []
            col_goals = []
            for k in range(n):
                tile = board[line * n + k]
                if tile != 0 and self._goal_pos[tile][0] == line:
                    row_goals.append(self._goal_pos[tile][1])
                tile = board[k * n + line]
                if tile != 0 and self._goal_pos[tile][1] == line:
                    col_goals.append(self._goal_pos[tile][0])
            extra += len(row_goals) - _longest_increasing(row_goals)
            extra += len(col_goals) - _longest_increasing(col_goals)
        return self.manhattan(board) + 2 * extra

    def weighted_manhattan(self, board: Board) -> int:
        return 2 * self.manhattan(board)

    # ------------------------------------------------------------------
    # Solvability
    # ------------------------------------------------------------------
    def is_solvable(self, board: Board) -> bool:
        _check_permutation(board, self.size)
        return self._parity(board) == self._parity(self.goal)

    def _parity(self, board: Board) -> int:
        tiles = [t for t in board if t != 0]
        inversions = sum(
            1
            for i in range(len(tiles))
            for j in range(i + 1, len(tiles))
            if tiles[i] > tiles[j]
        )
        if self.size % 2:
            return inversions % 2
        # even width: a vertical move changes inversions by n-1 (odd) and the blank row by 1
        blank_row = board.index(0) // self.size
        return (inversions + blank_row) % 2

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def scramble(self, moves: int = 20, seed: Optional[int] = None) -> Board:
        """Random walk of the blank away from the goal (always solvable)."""
        rng = random.Random(seed)
        board = self.goal
        previous = None
        for _ in range(moves):
            options = [b for b in self.successors(board) if b != previous]
            previous, board = board, rng.choice(options)
        return board

    def moves(self, path: Sequence[Board]) -> List[str]:
        """Blank directions that turn path[0] into path[-1]."""
        n = self.size
        result = []
        for before, after in zip(path, path[1:]):
            r0, c0 = divmod(before.index(0), n)
            r1, c1 = divmod(after.index(0), n)
            for name, delta in DIRECTIONS.items():
                if delta == (r1 - r0, c1 - c0):
                    result.append(name)
                    break
            else:
                raise ValueError(f"{before!r} → {after!r} is not a single move")
        return result

    def parse_board(self, text: str) -> Board:
        """Whitespace / comma-separated tiles, row-major, 0 = blank."""
        tokens = text.replace(",", " ").split()
        try:
            board = tuple(int(t) for t in tokens)
        except ValueError as exc:
            raise ValueError(f"board contains a non-integer token: {exc}") from exc
        _check_permutation(board, self.size)
        return board

    def format_board(self, board: Board) -> str:
        n = self.size
        width = len(str(n * n - 1))
        rows = []
        for r in range(n):
            cells = board[r * n:(r + 1) * n]
            rows.append(" ".join("." * width if t == 0 else str(t).rjust(width) for t in cells))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"SlidingPuzzle(size={self.size})"


def puzzle_for(board: Sequence[int]) -> SlidingPuzzle:
    """Infer the puzzle size from a flat board (len must be a perfect square)."""
    n = int(round(len(board) ** 0.5))
    if n * n != len(board):
        raise ValueError(f"board of {len(board)} tiles is not square")
    return SlidingPuzzle(size=n)


def _check_permutation(board: Sequence[int], size: int) -> None:
    if sorted(board) != list(range(size * size)):
        raise ValueError(f"board must be a permutation of 0..{size * size - 1}, got {tuple(board)!r}")


def _longest_increasing(values: List[int]) -> int:
    best: List[int] = []
    for i, v in enumerate(values):
        best.append(1 + max((best[j] for j in range(i) if values[j] < v), default=0))
    return max(best, default=0)
