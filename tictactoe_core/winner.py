from __future__ import annotations

from typing import Optional, Tuple

from .board import Board, Mark

Line = Tuple[int, int, int]

# 0 1 2
# 3 4 5
# 6 7 8
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def winning_line(board: Board) -> Optional[Line]:
    """Returns the first completed line in WIN_LINES order, or None."""
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def calculate_winner(board: Board) -> Optional[Mark]:
    """
    Returns the winning mark for a board, or None.

    Only the eight fixed lines are inspected. A full board without a
    completed line reports None; draws are not a separate outcome.
    """
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]
