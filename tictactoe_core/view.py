from __future__ import annotations

from typing import Any, Dict, List

from .board import SIZE, Board
from .state import GameState
from .winner import winning_line


def status(game: GameState) -> str:
    winner = game.winner()
    if winner:
        return f'Winner: {winner}'
    return f'Next Player: {game.next_player}'


def move_label(step: int) -> str:
    return f'Go to move #{step}' if step else 'Go to game start'


def move_list(game: GameState) -> List[Dict[str, Any]]:
    return [
        {'step': step, 'label': move_label(step), 'current': step == game.step_number}
        for step in range(len(game))
    ]


def game_to_json(game: GameState) -> Dict[str, Any]:
    board = game.current()
    line = winning_line(board)
    winner = board[line[0]] if line else None
    return {
        'squares': list(board.cells),
        'stepNumber': game.step_number,
        'xIsNext': game.x_is_next,
        'nextPlayer': game.next_player,
        'winner': winner,
        'winningLine': list(line) if line else None,
        'gameOver': winner is not None,
        'boardFull': board.is_full(),
        'status': status(game),
        'historyLength': len(game),
        'moves': move_list(game),
    }


def render_text(board: Board) -> str:
    """Human-readable grid, '.' for empty cells."""
    rows = []
    for r in range(SIZE):
        rows.append(' '.join(board.at(r, c) or '.' for c in range(SIZE)))
    return '\n'.join(rows)
