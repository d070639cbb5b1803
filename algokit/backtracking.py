"""Backtracking searches: mazes, Sudoku, knight's tours, queens and Hanoi."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

__all__ = ["solve_maze", "solve_sudoku", "knights_tour", "place_queens", "hanoi_moves"]

_BOARD = 8
_KNIGHT_MOVES = ((-2, 1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1))


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path of open (1) cells from the top-left to the bottom-right.

    The rat moves only down or right, trying down first. The path is returned
    as a grid with 1 on each visited cell, or None when there is none.
    """
    rows = len(maze)
    if rows == 0:
        return None
    cols = len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows must all have the same length")
    path = [[0] * cols for _ in range(rows)]
    dead: set[tuple[int, int]] = set()

    def walk(i: int, j: int) -> bool:
        if i >= rows or j >= cols or maze[i][j] != 1 or (i, j) in dead:
            return False
        path[i][j] = 1
        if (i, j) == (rows - 1, cols - 1):
            return True
        if walk(i + 1, j) or walk(i, j + 1):
            return True
        path[i][j] = 0
        dead.add((i, j))
        return False

    return path if walk(0, 0) else None


def solve_sudoku(board: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the zeros of a square Sudoku board, or return None if impossible.

    The board side must be a perfect square (9 for the usual puzzle). The
    input is left untouched; a solved copy is returned.
    """
    size = len(board)
    box = math.isqrt(size)
    if size == 0 or box * box != size or any(len(row) != size for row in board):
        raise ValueError("board must be n x n with n a positive perfect square")
    grid = [list(row) for row in board]

    def safe(row: int, col: int, num: int) -> bool:
        if num in grid[row]:
            return False
        if any(grid[r][col] == num for r in range(size)):
            return False
        top, left = row - row % box, col - col % box
        return all(
            grid[r][c] != num for r in range(top, top + box) for c in range(left, left + box)
        )

    def fill() -> bool:
        empty = next(
            ((r, c) for r in range(size) for c in range(size) if grid[r][c] == 0), None
        )
        if empty is None:
            return True
        row, col = empty
        for num in range(1, size + 1):
            if safe(row, col, num):
                grid[row][col] = num
                if fill():
                    return True
                grid[row][col] = 0
        return False

    return grid if fill() else None


def knights_tour() -> list[list[int]] | None:
    """A knight's tour of the 8x8 board starting in the top-left corner.

    Squares hold the move number, 1 to 64. Candidate moves are tried in
    order of fewest onward moves, ties in a fixed move order, with
    backtracking on dead ends.
    """
    board = [[0] * _BOARD for _ in range(_BOARD)]
    board[0][0] = 1

    def free_moves(row: int, col: int) -> list[tuple[int, int]]:
        return [
            (row + dr, col + dc)
            for dr, dc in _KNIGHT_MOVES
            if 0 <= row + dr < _BOARD and 0 <= col + dc < _BOARD and board[row + dr][col + dc] == 0
        ]

    def tour(row: int, col: int, move: int) -> bool:
        if move == _BOARD * _BOARD:
            return True
        candidates = sorted(free_moves(row, col), key=lambda square: len(free_moves(*square)))
        for next_row, next_col in candidates:
            board[next_row][next_col] = move + 1
            if tour(next_row, next_col, move + 1):
                return True
            board[next_row][next_col] = 0
        return False

    return board if tour(0, 0, 1) else None


def place_queens(n: int) -> list[int] | None:
    """Place ``n`` non-attacking queens; entry ``i`` is the column in row ``i``.

    Columns are tried left to right, so the first solution in that order is
    returned. None when no placement exists.
    """
    if n < 0:
        raise ValueError("place_queens() needs a non-negative board size")
    columns: list[int] = []
    used: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if col in used or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.append(col)
            used.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    return columns if place(0) else None


def _hanoi(n: int, source: str, target: str, auxiliary: str) -> Iterator[tuple[int, str, str]]:
    if n == 1:
        yield (1, source, target)
        return
    yield from _hanoi(n - 1, source, auxiliary, target)
    yield (n, source, target)
    yield from _hanoi(n - 1, auxiliary, target, source)


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[tuple[int, str, str]]:
    """Moves ``(disk, from_rod, to_rod)`` carrying ``n`` disks from source to target."""
    if n < 1:
        return []
    return list(_hanoi(n, source, target, auxiliary))