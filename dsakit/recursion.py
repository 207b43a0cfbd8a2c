"""Backtracking and recursive enumeration problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")

_MOVES = (("D", 1, 0), ("R", 0, 1), ("L", 0, -1), ("U", -1, 0))


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n×n board.

    Each board is a list of rows, with ``Q`` for a queen and ``.`` for an
    empty square. Boards come in the order found by filling rows top to
    bottom and trying columns left to right.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    placement: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(
                ["".join("Q" if c == col else "." for c in range(n)) for col in placement]
            )
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            placement.append(col)
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(row + 1)
            placement.pop()
            columns.remove(col)
            diagonals.remove(row - col)
            anti_diagonals.remove(row + col)

    place(0)
    return solutions


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return all increasing sets of ``k`` distinct digits 1–9 that sum to ``n``."""
    results: list[list[int]] = []

    def extend(start: int, remaining: int, chosen: list[int]) -> None:
        if len(chosen) == k and remaining == 0:
            results.append(chosen)
            return
        if remaining < 0 or len(chosen) >= k:
            return
        for digit in range(start, 10):
            if digit > remaining:
                break
            extend(digit + 1, remaining - digit, chosen + [digit])

    extend(1, n, [])
    return results


def binary_strings_without_consecutive_ones(num: int) -> list[str]:
    """Return all binary strings of length ``num`` with no two adjacent ones."""
    if num < 0:
        raise ValueError("length must not be negative")
    results: list[str] = []

    def extend(prefix: str) -> None:
        if len(prefix) == num:
            results.append(prefix)
            return
        extend(prefix + "0")
        if not prefix.endswith("1"):
            extend(prefix + "1")

    extend("")
    return results


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every route through a square maze from top-left to bottom-right.

    Open cells hold 1. Routes are strings of the moves D, R, L and U, visit no
    cell twice, and are listed in the order those moves are tried.
    """
    size = len(maze)
    if size == 0 or maze[size - 1][size - 1] == 0:
        return []
    paths: list[str] = []
    visited = {(0, 0)}

    def walk(row: int, col: int, route: str) -> None:
        if maze[row][col] == 0:
            return
        if row == size - 1 and col == size - 1:
            paths.append(route)
            return
        for letter, d_row, d_col in _MOVES:
            r, c = row + d_row, col + d_col
            if 0 <= r < size and 0 <= c < size and maze[r][c] == 1 and (r, c) not in visited:
                visited.add((r, c))
                walk(r, c, route + letter)
                visited.discard((r, c))

    walk(0, 0, "")
    return paths


def subset_sums(arr: Sequence[int]) -> list[int]:
    """Return the sums of all subsets of ``arr`` in ascending order."""
    sums = [0]
    for value in arr:
        sums = [total + value for total in sums] + sums
    return sorted(sums)


def unique_subsets(arr: Sequence[int]) -> list[list[int]]:
    """Return each distinct subset of ``arr`` once, as sorted lists.

    A subset is listed after all of its extensions.
    """
    items = sorted(arr)
    results: list[list[int]] = []

    def visit(start: int, chosen: list[int]) -> None:
        for i in range(start, len(items)):
            if i > start and items[i] == items[i - 1]:
                continue
            visit(i + 1, chosen + [items[i]])
        results.append(chosen)

    visit(0, [])
    return results


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string that the phone keypad digits can spell."""
    for digit in digits:
        if digit not in "0123456789":
            raise ValueError(f"not a keypad digit: {digit!r}")
    return ["".join(letters) for letters in product(*(_KEYPAD[int(d)] for d in digits))]


def count_reachable_cells(n: int) -> int:
    """Count grid cells marked by a depth-first walk of ``n - 1`` steps from the origin.

    The walk tries up, down, left and right in turn and never re-enters a
    marked cell, so a cell first reached late in the walk can cut it short.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    visited: set[tuple[int, int]] = set()
    pending = [(n, 0, 0)]
    while pending:
        steps, row, col = pending.pop()
        if (row, col) in visited:
            continue
        visited.add((row, col))
        if steps == 1:
            continue
        pending.extend(
            reversed(
                [
                    (steps - 1, row - 1, col),
                    (steps - 1, row + 1, col),
                    (steps - 1, row, col - 1),
                    (steps - 1, row, col + 1),
                ]
            )
        )
    return len(visited)