from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .board import EMPTY_BOARD, Board, Mark, check_cell_index
from .winner import calculate_winner

logger = logging.getLogger(__name__)


class GameState:
    """
    Owns the move history of one game and the cursor into it.

    history[0] is always the empty board; every applied move appends a new
    immutable snapshot. The side to move is derived from the cursor: X moves
    on even steps, O on odd ones.
    """

    def __init__(self) -> None:
        self._history: List[Board] = [EMPTY_BOARD]
        self._step_number = 0

    @property
    def history(self) -> Tuple[Board, ...]:
        return tuple(self._history)

    @property
    def step_number(self) -> int:
        return self._step_number

    @property
    def x_is_next(self) -> bool:
        return self._step_number % 2 == 0

    @property
    def next_player(self) -> Mark:
        return 'X' if self.x_is_next else 'O'

    def __len__(self) -> int:
        return len(self._history)

    def current(self) -> Board:
        """Returns the snapshot at the cursor."""
        return self._history[self._step_number]

    def winner(self) -> Optional[Mark]:
        return calculate_winner(self.current())

    def is_game_over(self) -> bool:
        return self.winner() is not None

    def apply_move(self, cell_index: int) -> bool:
        """
        Places the current player's mark on cell_index.

        Clicks on a filled cell, or on a board that already has a winner,
        are ignored and return False. Any moves after the cursor are
        discarded before the new snapshot is appended.
        """
        i = check_cell_index(cell_index)
        current = self.current()
        if calculate_winner(current) is not None or not current.is_empty(i):
            return False
        mark = self.next_player
        del self._history[self._step_number + 1:]
        self._history.append(current.with_mark(i, mark))
        self._step_number = len(self._history) - 1
        logger.debug('%s played cell %d (step %d)', mark, i, self._step_number)
        return True

    def jump_to(self, step: int) -> None:
        """Moves the cursor to an earlier (or later) snapshot without touching history."""
        if isinstance(step, bool) or not isinstance(step, int):
            raise IndexError(f'step must be an int, got {step!r}')
        if not 0 <= step < len(self._history):
            raise IndexError(f'step out of range: {step} (history has {len(self._history)} entries)')
        self._step_number = step
        logger.debug('jumped to step %d', step)
